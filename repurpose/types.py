from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Set, Tuple
import pyarrow as pa

Record = Dict[str, str]


class NodeCategory(str, Enum):
    COMPOUND = "COMPOUND"
    PROTEIN = "PROTEIN"

    @property
    def size_hint(self) -> int:
        return 10 if self is NodeCategory.COMPOUND else 15


class PredictionStatus(str, Enum):
    NEW = "New"
    VALIDATED = "Validated"
    INVESTIGATING = "Investigating"


@dataclass(frozen=True)
class Node:
    id: str
    category: NodeCategory

    @property
    def size_hint(self) -> int:
        return self.category.size_hint


@dataclass(frozen=True)
class Edge:
    source_id: str
    target_id: str
    weight: float = 1.0

    @property
    def key(self) -> str:
        return f"{self.source_id}-{self.target_id}"


@dataclass(frozen=True)
class Prediction:
    id: str
    compound_id: str
    compound_name: str
    protein_id: str
    protein_name: str
    probability: float
    status: PredictionStatus = PredictionStatus.NEW

    @property
    def pair(self) -> Tuple[str, str]:
        return self.compound_id, self.protein_id


NODE_SCHEMA = pa.schema([("id", pa.string()), ("category", pa.string()), ("size_hint", pa.int32())])
EDGE_SCHEMA = pa.schema([("source_id", pa.string()), ("target_id", pa.string()), ("weight", pa.float64())])
PREDICTION_SCHEMA = pa.schema([
    ("id", pa.string()),
    ("compound_id", pa.string()),
    ("compound_name", pa.string()),
    ("protein_id", pa.string()),
    ("protein_name", pa.string()),
    ("probability", pa.float64()),
    ("status", pa.string()),
])


@dataclass(frozen=True)
class Graph:
    """Read-only snapshot of the compound-protein topology."""
    nodes: Tuple[Node, ...] = field(default_factory=tuple)
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def compounds(self) -> List[Node]:
        return [n for n in self.nodes if n.category is NodeCategory.COMPOUND]

    @property
    def proteins(self) -> List[Node]:
        return [n for n in self.nodes if n.category is NodeCategory.PROTEIN]

    @property
    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def edge_keys(self) -> Set[str]:
        return {e.key for e in self.edges}

    def is_empty(self) -> bool:
        return not self.nodes

    def nodes_table(self) -> pa.Table:
        rows = [{"id": n.id, "category": n.category.value, "size_hint": n.size_hint} for n in self.nodes]
        return pa.Table.from_pylist(rows, schema=NODE_SCHEMA)

    def edges_table(self) -> pa.Table:
        rows = [{"source_id": e.source_id, "target_id": e.target_id, "weight": float(e.weight)} for e in self.edges]
        return pa.Table.from_pylist(rows, schema=EDGE_SCHEMA)

    def to_arrow(self) -> Tuple[pa.Table, pa.Table]:
        return self.nodes_table(), self.edges_table()


def predictions_to_arrow(predictions: Iterable[Prediction]) -> pa.Table:
    rows = [{
        "id": p.id,
        "compound_id": p.compound_id,
        "compound_name": p.compound_name,
        "protein_id": p.protein_id,
        "protein_name": p.protein_name,
        "probability": float(p.probability),
        "status": PredictionStatus(p.status).value,
    } for p in predictions]
    return pa.Table.from_pylist(rows, schema=PREDICTION_SCHEMA)
