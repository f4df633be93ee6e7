"""
repurpose.datasets.demo — Built-in demonstration graph and curated hypotheses.

This is the data shown before a user uploads their own files.
"""
from __future__ import annotations
import pandas as pd
from typing import List
from repurpose.types import Edge, Graph, Node, NodeCategory, Prediction, PredictionStatus

_COMPOUNDS = ["C1", "C2", "C3", "C4", "C5"]  # Metformin, Aspirin, Atorvastatin, Losartan, Gabapentin
_PROTEINS = ["P1", "P2", "P3", "P4", "P5", "P6", "P7"]  # AMPK, COX-1, HMG-CoA, AGTR1, CACNA2D1, MTOR, NF-kB

_INTERACTIONS = [("C1", "P1"), ("C2", "P2"), ("C3", "P3"), ("C4", "P4"), ("C5", "P5")]
# Protein-protein interaction network
_PPI = [("P1", "P6"), ("P6", "P7"), ("P2", "P7")]

_CURATED = [
    ("1", "C1", "Metformin", "P6", "mTOR", 0.92, PredictionStatus.NEW),
    ("2", "C3", "Atorvastatin", "P7", "NF-kB", 0.89, PredictionStatus.NEW),
    ("3", "C2", "Aspirin", "P1", "AMPK", 0.87, PredictionStatus.INVESTIGATING),
    ("4", "C4", "Losartan", "P2", "COX-2", 0.85, PredictionStatus.NEW),
    ("5", "C5", "Gabapentin", "P3", "Thrombospondin", 0.84, PredictionStatus.NEW),
    ("6", "C1", "Metformin", "P9", "HER2", 0.81, PredictionStatus.NEW),
    ("7", "C6", "Rapamycin", "P10", "Insulin Receptor", 0.78, PredictionStatus.NEW),
    ("8", "C7", "Doxycycline", "P11", "MMP-9", 0.76, PredictionStatus.VALIDATED),
    ("9", "C3", "Atorvastatin", "P12", "Rho kinase", 0.75, PredictionStatus.NEW),
    ("10", "C8", "Sildenafil", "P13", "PDE5", 0.99, PredictionStatus.VALIDATED),
]


def demo_graph() -> Graph:
    """
    Five approved drugs, their primary targets and a small protein network.

    Compound-target edges carry weight 1.0; protein-protein edges 0.5.
    MTOR (P6) and NF-kB (P7) have no direct compound link and are the
    latent candidates the curated hypotheses point at.
    """
    nodes = [Node(c, NodeCategory.COMPOUND) for c in _COMPOUNDS] + [Node(p, NodeCategory.PROTEIN) for p in _PROTEINS]
    edges = [Edge(c, p, 1.0) for c, p in _INTERACTIONS] + [Edge(a, b, 0.5) for a, b in _PPI]
    return Graph(nodes=tuple(nodes), edges=tuple(edges))


def demo_predictions() -> List[Prediction]:
    """Curated hypotheses in their listed order (not sorted by probability)."""
    return [Prediction(*row) for row in _CURATED]


def demo_interactions_frame() -> pd.DataFrame:
    """
    The compound-target edges of the demo graph as an uploadable table.

    Columns: ``compound_id``, ``protein_id``
    """
    return pd.DataFrame(_INTERACTIONS, columns=["compound_id", "protein_id"])
