from __future__ import annotations
from typing import Sequence
from repurpose.types import Record, Graph
from repurpose.graph.aliases import COMPOUND_ALIASES, PROTEIN_ALIASES, has_any


class IngestionError(ValueError):
    """User-facing failure of an ingestion run."""


EMPTY_INTERACTIONS = "Interaction file appears to be empty or invalid."
MISSING_HEADERS = "Interaction CSV must contain headers: 'compound_id' and 'protein_id' (or 'source'/'target')."
EMPTY_GRAPH = "No valid nodes found in the dataset."


def validate_interactions(records: Sequence[Record]) -> None:
    if not records: raise IngestionError(EMPTY_INTERACTIONS)
    # Any row carrying both columns is enough; the builder skips the rest
    if not any(has_any(r, COMPOUND_ALIASES) and has_any(r, PROTEIN_ALIASES) for r in records):
        raise IngestionError(MISSING_HEADERS)


def validate_graph(graph: Graph) -> None:
    if graph.is_empty(): raise IngestionError(EMPTY_GRAPH)
