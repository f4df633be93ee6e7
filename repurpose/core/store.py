from __future__ import annotations
from typing import Any, Dict, Iterable, Optional
import pyarrow as pa
from repurpose.core.connection import DuckDBConnection
from repurpose.types import Graph, Prediction, PredictionStatus, predictions_to_arrow

TABLES = ("nodes", "edges", "predictions")


def _replace_table(conn: DuckDBConnection, table_name: str, data: pa.Table):
    conn.register("_tmp_snapshot", data)
    try: conn.execute(f"CREATE OR REPLACE TABLE {table_name} AS SELECT * FROM _tmp_snapshot")
    finally: conn.unregister("_tmp_snapshot")


def load_snapshot(conn: DuckDBConnection, graph: Graph, predictions: Iterable[Prediction]) -> int:
    """Replace the nodes/edges/predictions tables in one transaction; returns the node count."""
    nodes, edges = graph.to_arrow()
    tables = {"nodes": nodes, "edges": edges, "predictions": predictions_to_arrow(predictions)}

    conn.execute("BEGIN TRANSACTION")
    try:
        for name, data in tables.items(): _replace_table(conn, name, data)
        conn.execute("CREATE INDEX IF NOT EXISTS idx_edges_source ON edges(source_id)")
        conn.execute("CREATE INDEX IF NOT EXISTS idx_edges_target ON edges(target_id)")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    conn.execute("COMMIT")
    return conn.execute("SELECT COUNT(*) FROM nodes").fetchone()[0]


def graph_summary(conn: DuckDBConnection) -> Dict[str, Any]:
    row = conn.execute("""
        SELECT
            (SELECT COUNT(*) FROM nodes) AS nodes,
            (SELECT COUNT(*) FROM nodes WHERE category = 'COMPOUND') AS compounds,
            (SELECT COUNT(*) FROM nodes WHERE category = 'PROTEIN') AS proteins,
            (SELECT COUNT(*) FROM edges) AS edges,
            (SELECT COUNT(*) FROM predictions) AS predictions,
            (SELECT AVG(probability) FROM predictions) AS mean_probability
    """).fetchone()
    keys = ("nodes", "compounds", "proteins", "edges", "predictions", "mean_probability")
    return dict(zip(keys, row))


def node_neighbors(conn: DuckDBConnection, node_id: str) -> pa.Table:
    return conn.query("""
        SELECT CASE WHEN source_id = $node THEN target_id ELSE source_id END AS neighbor,
               CASE WHEN source_id = $node THEN 'out' ELSE 'in' END AS direction,
               weight
        FROM edges WHERE source_id = $node OR target_id = $node
    """, {"node": node_id})


def node_predictions(conn: DuckDBConnection, node_id: str) -> pa.Table:
    return conn.query(
        "SELECT * FROM predictions WHERE compound_id = $node OR protein_id = $node ORDER BY probability DESC",
        {"node": node_id},
    )


def top_predictions(conn: DuckDBConnection, n: int = 10, status: Optional[PredictionStatus] = None) -> pa.Table:
    if status is None:
        return conn.query(f"SELECT * FROM predictions ORDER BY probability DESC LIMIT {int(n)}")
    return conn.query(
        f"SELECT * FROM predictions WHERE status = $status ORDER BY probability DESC LIMIT {int(n)}",
        {"status": PredictionStatus(status).value},
    )
