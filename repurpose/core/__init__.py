from .connection import DuckDBConnection
from .parser import parse_table, load_records, records_from_frame, read_text

__all__ = ["DuckDBConnection", "parse_table", "load_records", "records_from_frame", "read_text"]
