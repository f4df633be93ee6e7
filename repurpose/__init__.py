from .api import Repurposer
from .core.connection import DuckDBConnection
from .core.parser import parse_table, load_records
from .graph.builder import build, build_topology, BuildResult
from .hypotheses.sampler import CandidateSampler, RandomCandidateSampler, rank_predictions
from .types import Node, Edge, Graph, Prediction, NodeCategory, PredictionStatus
from .validation import IngestionError
from .export import predictions_to_csv, write_predictions_csv, read_predictions_csv
from .datasets import (
    demo_graph,
    demo_predictions,
    demo_interactions_frame,
    generate_training_metrics,
)

def load(interactions, features=None, **kwargs) -> Repurposer:
    engine = Repurposer(**kwargs)
    engine.load(interactions, features)
    return engine

def connect(database=":memory:", **kwargs) -> Repurposer:
    return Repurposer(database=database, **kwargs)

__all__ = [
    "Repurposer",
    "load",
    "connect",
    "DuckDBConnection",
    "parse_table",
    "load_records",
    "build",
    "build_topology",
    "BuildResult",
    "CandidateSampler",
    "RandomCandidateSampler",
    "rank_predictions",
    "Node",
    "Edge",
    "Graph",
    "Prediction",
    "NodeCategory",
    "PredictionStatus",
    "IngestionError",
    "predictions_to_csv",
    "write_predictions_csv",
    "read_predictions_csv",
    # Datasets
    "demo_graph",
    "demo_predictions",
    "demo_interactions_frame",
    "generate_training_metrics",
]
