from __future__ import annotations
import duckdb
from pathlib import Path
from typing import Union, Optional, Any
import pyarrow as pa

class DuckDBConnection:
    """Wrapper for DuckDB connection holding the graph snapshot tables."""
    def __init__(
        self,
        database: Union[str, Path] = ":memory:",
        memory_limit: Optional[str] = None,
        threads: Optional[int] = None,
    ):
        self._database = str(database)
        self.conn = duckdb.connect(self._database)

        if memory_limit:
            self.conn.execute(f"SET memory_limit='{memory_limit}'")
        if threads:
            self.conn.execute(f"SET threads={threads}")

    def execute(self, query: str, params: Optional[Union[list, dict]] = None) -> duckdb.DuckDBPyConnection:
        return self.conn.execute(query, params)

    def query(self, query: str, params: Optional[Union[list, dict]] = None) -> pa.Table:
        res = self.execute(query, params)
        table = res.arrow()
        # Newer duckdb releases hand back a RecordBatchReader
        if hasattr(table, "read_all"):
            return table.read_all()
        return table

    def table_exists(self, table_name: str) -> bool:
        row = self.execute("SELECT COUNT(*) FROM information_schema.tables WHERE table_name = ?", [table_name]).fetchone()
        return row[0] > 0

    def register(self, name: str, data: Any):
        self.conn.register(name, data)

    def unregister(self, name: str):
        self.conn.unregister(name)

    def close(self):
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def __repr__(self) -> str:
        return f"DuckDBConnection(database={self._database!r})"
