"""
repurpose.core.parser — Tabular parsing for uploaded interaction and feature files.

``parse_table`` is a deliberately small comma splitter: it does not honour
commas or escaped quotes inside quoted fields. Every value stays a string;
typing is left to the graph builder.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, List, Union
import narwhals as nw
from repurpose.types import Record

logger = logging.getLogger(__name__)


def _clean(field: str) -> str:
    field = field.strip()
    if field.startswith('"'): field = field[1:]
    if field.endswith('"'): field = field[:-1]
    return field


def _header(line: str) -> List[str]:
    return [_clean(f).lower() for f in line.split(",")]


def parse_table(text: str) -> List[Record]:
    """
    Parse comma-delimited text into one record per non-blank data line.

    The first line is the header. Short rows are padded with empty strings,
    long rows are truncated to the header width. Empty input, or a header
    with no data lines, yields an empty list.

    Example
    -------
    >>> parse_table('Compound_ID,"Protein_ID"\\nC1,P1\\n\\nC2')
    [{'compound_id': 'C1', 'protein_id': 'P1'}, {'compound_id': 'C2', 'protein_id': ''}]
    """
    lines = (text or "").strip().split("\n")
    if len(lines) < 2: return []

    headers = _header(lines[0])
    records = []
    for line in lines[1:]:
        if not line.strip(): continue
        values = [_clean(v) for v in line.split(",")]
        records.append({h: (values[i] if i < len(values) else "") for i, h in enumerate(headers)})
    return records


def read_text(source: Union[str, Path], encoding: str = "utf-8") -> str:
    return Path(source).read_text(encoding=encoding)


def _as_text(name: str):
    col = nw.col(name)
    return nw.when(col.is_null()).then(nw.lit("")).otherwise(col.cast(nw.String)).alias(name)


def records_from_frame(df: Any) -> List[Record]:
    """Convert any narwhals-compatible frame (pandas, polars, arrow) into records."""
    try: nw_df = nw.from_native(df)
    except TypeError as e: raise ValueError(f"Unsupported source type: {type(df).__name__}") from e
    if isinstance(nw_df, nw.LazyFrame): nw_df = nw_df.collect()

    # Nulls (None, NaN, pd.NA) become empty strings before leaving the frame
    nw_df = nw_df.with_columns([_as_text(c) for c in nw_df.columns])
    names = [str(c).strip().lower() for c in nw_df.columns]
    return [{n: str(v).strip() for n, v in zip(names, row)} for row in nw_df.rows()]


TABLE_SUFFIXES = (".csv", ".txt", ".tsv")


def _is_file(source: str) -> bool:
    try: return Path(source).is_file()
    except OSError: return False


def load_records(source: Any) -> List[Record]:
    """
    Acquire records from a file path, raw CSV text, bytes or a dataframe.

    A single-line string naming an existing file is read from disk; one
    ending in a table suffix that does not exist raises ``FileNotFoundError``.
    Any other string is parsed as CSV text.
    """
    if source is None: return []
    if isinstance(source, str) and "\n" not in source:
        if _is_file(source): source = Path(source)
        elif source.strip().lower().endswith(TABLE_SUFFIXES): raise FileNotFoundError(source)
    if isinstance(source, Path):
        logger.debug("Reading table from %s", source)
        return parse_table(read_text(source))
    if isinstance(source, bytes): return parse_table(source.decode("utf-8"))
    if isinstance(source, str): return parse_table(source)
    return records_from_frame(source)
