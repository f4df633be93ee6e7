from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import pyarrow as pa
from repurpose.core.connection import DuckDBConnection
from repurpose.core.parser import load_records
from repurpose.core import store
from repurpose.graph.builder import build
from repurpose.hypotheses.sampler import CandidateSampler, RandomCandidateSampler
from repurpose.types import Graph, Prediction, PredictionStatus
from repurpose.validation import validate_interactions, validate_graph
from repurpose.export import predictions_to_csv, write_predictions_csv
from repurpose.datasets.demo import demo_graph, demo_predictions

logger = logging.getLogger(__name__)


class Repurposer:
    """Ingests interaction/feature tables and serves the graph and hypotheses."""

    def __init__(
        self,
        database: Union[str, Path] = ":memory:",
        sampler: Optional[CandidateSampler] = None,
        seed: Optional[int] = None,
        memory_limit: Optional[str] = None,
        threads: Optional[int] = None,
    ) -> None:
        if sampler is not None and seed is not None:
            raise ValueError("Pass either sampler or seed, not both; seed only configures the default sampler.")
        self.conn = DuckDBConnection(database=database, memory_limit=memory_limit, threads=threads)
        self.sampler = sampler or RandomCandidateSampler(seed=seed)
        self._graph: Optional[Graph] = None
        self._predictions: Tuple[Prediction, ...] = ()
        self._custom, self._running = False, False

    def _require_loaded(self):
        if self._graph is None: raise RuntimeError("Call load() or load_demo() first.")

    @property
    def graph(self) -> Graph:
        self._require_loaded()
        return self._graph

    @property
    def predictions(self) -> Tuple[Prediction, ...]:
        self._require_loaded()
        return self._predictions

    @property
    def is_custom_data(self) -> bool: return self._custom

    def _publish(self, graph: Graph, predictions, custom: bool) -> Repurposer:
        store.load_snapshot(self.conn, graph, predictions)
        self._graph, self._predictions, self._custom = graph, tuple(predictions), custom
        return self

    def load(self, interactions: Any, features: Any = None) -> Repurposer:
        """
        Run one ingestion: parse, validate, build the graph and sample hypotheses.

        ``interactions`` and ``features`` may be file paths, raw CSV text,
        bytes or dataframes. Raises ``IngestionError`` with a user-facing
        message when the input cannot produce a graph; the previous snapshot
        is kept in that case.
        """
        if self._running: raise RuntimeError("An ingestion run is already in progress.")
        self._running = True
        try:
            interaction_rows = load_records(interactions)
            feature_rows = load_records(features)
            validate_interactions(interaction_rows)
            result = build(interaction_rows, feature_rows, sampler=self.sampler)
            validate_graph(result.graph)
            logger.info("Loaded %d interaction rows and %d feature rows", len(interaction_rows), len(feature_rows))
            if not result.predictions: logger.warning("No candidate links found; the graph may be fully connected.")
            return self._publish(result.graph, result.predictions, custom=True)
        finally:
            self._running = False

    def load_demo(self) -> Repurposer:
        return self._publish(demo_graph(), demo_predictions(), custom=False)

    def summary(self) -> Dict[str, Any]:
        self._require_loaded()
        return store.graph_summary(self.conn)

    def neighbors(self, node_id: str) -> pa.Table:
        self._require_loaded()
        return store.node_neighbors(self.conn, node_id)

    def predictions_for(self, node_id: str) -> pa.Table:
        self._require_loaded()
        return store.node_predictions(self.conn, node_id)

    def top_predictions(self, n: int = 10, status: Optional[Union[str, PredictionStatus]] = None) -> pa.Table:
        self._require_loaded()
        if status is not None:
            try: status = PredictionStatus(status)
            except ValueError: raise ValueError(f"status must be one of {[s.value for s in PredictionStatus]}") from None
        return store.top_predictions(self.conn, n=n, status=status)

    def export_csv(self, path: Optional[Union[str, Path]] = None) -> str:
        self._require_loaded()
        if path is not None: write_predictions_csv(self._predictions, path)
        return predictions_to_csv(self._predictions)

    def sql(self, query: str) -> pa.Table: return self.conn.query(query)
    def close(self): self.conn.close()
    def __enter__(self): return self
    def __exit__(self, *_): self.close()
    def __repr__(self) -> str: return f"Repurposer(database={self.conn._database!r})"
