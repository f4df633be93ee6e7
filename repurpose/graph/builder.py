from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
from repurpose.types import Record, Node, Edge, Graph, NodeCategory, Prediction
from repurpose.graph.aliases import COMPOUND_ALIASES, PROTEIN_ALIASES, FEATURE_ID_ALIASES, resolve
from repurpose.hypotheses.sampler import CandidateSampler, RandomCandidateSampler, rank_predictions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    graph: Graph
    predictions: Tuple[Prediction, ...] = field(default_factory=tuple)


def _add_node(nodes: Dict[str, Node], node_id: str, category: NodeCategory):
    if node_id not in nodes: nodes[node_id] = Node(node_id, category)


def _add_interactions(nodes: Dict[str, Node], edges: List[Edge], interactions: Iterable[Record]) -> int:
    skipped = 0
    for row in interactions:
        c_id, p_id = resolve(row, COMPOUND_ALIASES), resolve(row, PROTEIN_ALIASES)
        if not c_id or not p_id:
            skipped += 1; continue
        _add_node(nodes, c_id, NodeCategory.COMPOUND)
        _add_node(nodes, p_id, NodeCategory.PROTEIN)
        edges.append(Edge(c_id, p_id, 1.0))
    return skipped


def _add_feature_nodes(nodes: Dict[str, Node], features: Iterable[Record]) -> int:
    added = 0
    for row in features:
        node_id = resolve(row, FEATURE_ID_ALIASES)
        if node_id and node_id not in nodes:
            nodes[node_id] = Node(node_id, NodeCategory.COMPOUND); added += 1
    return added


def build_topology(interactions: Iterable[Record], features: Optional[Iterable[Record]] = None) -> Graph:
    """Assemble a deduplicated node list and an edge per usable interaction row."""
    nodes: Dict[str, Node] = {}
    edges: List[Edge] = []
    skipped = _add_interactions(nodes, edges, interactions)
    isolated = _add_feature_nodes(nodes, features or ())
    if skipped: logger.debug("Skipped %d interaction rows without compound/protein ids", skipped)
    if isolated: logger.debug("Added %d compounds from feature rows only", isolated)
    return Graph(nodes=tuple(nodes.values()), edges=tuple(edges))


def build(
    interactions: Iterable[Record],
    features: Optional[Iterable[Record]] = None,
    sampler: Optional[CandidateSampler] = None,
) -> BuildResult:
    graph = build_topology(interactions, features)
    predictions = rank_predictions((sampler or RandomCandidateSampler()).sample(graph))
    logger.info("Built graph with %d nodes, %d edges and %d hypotheses", len(graph.nodes), len(graph.edges), len(predictions))
    return BuildResult(graph=graph, predictions=tuple(predictions))
