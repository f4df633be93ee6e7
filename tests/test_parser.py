"""Tests for tabular parsing and record acquisition."""

import pytest
import pandas as pd

from repurpose.core.parser import parse_table, read_text, records_from_frame, load_records
from repurpose.graph.builder import build_topology


class TestParseTable:

    def test_basic_records(self):
        rows = parse_table("compound_id,protein_id\nC1,P1\nC2,P2")
        assert rows == [
            {"compound_id": "C1", "protein_id": "P1"},
            {"compound_id": "C2", "protein_id": "P2"},
        ]

    def test_empty_input(self):
        assert parse_table("") == []
        assert parse_table("   \n\n  ") == []

    def test_header_only(self):
        assert parse_table("single header line only") == []
        assert parse_table("compound_id,protein_id\n\n\n") == []

    def test_headers_normalised(self):
        rows = parse_table('  "Compound_ID" , PROTEIN_ID \nC1,P1')
        assert list(rows[0].keys()) == ["compound_id", "protein_id"]

    def test_values_trimmed_and_unquoted(self):
        rows = parse_table('a,b\n  "C1" ,"P 1"')
        assert rows[0] == {"a": "C1", "b": "P 1"}

    def test_values_keep_case(self):
        rows = parse_table("a\nAspirin")
        assert rows[0]["a"] == "Aspirin"

    def test_blank_lines_skipped(self, interactions_csv):
        rows = parse_table(interactions_csv)
        # 6 lines after the trim, one header and one blank
        assert len(rows) == 4

    def test_every_record_has_header_keys(self, interactions_csv):
        rows = parse_table(interactions_csv)
        assert all(set(r) == {"compound_id", "protein_id", "affinity"} for r in rows)

    def test_short_row_padded(self):
        rows = parse_table("a,b,c\n1")
        assert rows[0] == {"a": "1", "b": "", "c": ""}

    def test_long_row_truncated(self):
        rows = parse_table("a,b\n1,2,3,4")
        assert rows[0] == {"a": "1", "b": "2"}

    def test_quoted_commas_not_respected(self):
        rows = parse_table('name,target\n"Aspirin, low dose",COX1')
        assert rows[0] == {"name": "Aspirin", "target": "low dose"}

    def test_no_type_coercion(self):
        rows = parse_table("id,score\nC1,0.75")
        assert rows[0]["score"] == "0.75"

    def test_crlf_line_endings(self):
        rows = parse_table("compound_id,protein_id\r\nC1,P1\r\nC2,P2\r\n")
        assert rows == [
            {"compound_id": "C1", "protein_id": "P1"},
            {"compound_id": "C2", "protein_id": "P2"},
        ]

    def test_lone_quote_field(self):
        rows = parse_table('a,b\n",x')
        assert rows[0] == {"a": "", "b": "x"}

    def test_none_input(self):
        assert parse_table(None) == []


class TestFrameRecords:

    def test_from_pandas(self, interactions_df):
        rows = records_from_frame(interactions_df)
        assert rows[0] == {"drug": "D1", "target": "T1"}
        assert len(rows) == len(interactions_df)

    def test_from_polars(self, interactions_polars):
        rows = records_from_frame(interactions_polars)
        assert rows[-1] == {"drug": "D3", "target": "T3"}

    def test_from_polars_lazy(self, interactions_polars):
        rows = records_from_frame(interactions_polars.lazy())
        assert len(rows) == 4

    def test_nulls_become_empty_strings(self):
        df = pd.DataFrame({"compound_id": ["C1", None], "protein_id": ["P1", "P2"], "score": [1.5, float("nan")]})
        rows = records_from_frame(df)
        assert rows[1] == {"compound_id": "", "protein_id": "P2", "score": ""}
        assert rows[0]["score"] == "1.5"

    def test_nullable_string_dtype(self):
        df = pd.DataFrame({
            "compound_id": pd.array(["C1", None], dtype="string"),
            "protein_id": pd.array(["P1", "P2"], dtype="string"),
        })
        rows = records_from_frame(df)
        assert rows[1] == {"compound_id": "", "protein_id": "P2"}
        # The row without a compound is skipped, not turned into a "<NA>" node
        assert build_topology(rows).node_ids == ["C1", "P1"]

    def test_nullable_csv_read(self, tmp_path):
        p = tmp_path / "interactions.csv"
        p.write_text("compound_id,protein_id\nC1,P1\n,P2\n", encoding="utf-8")
        df = pd.read_csv(p, dtype_backend="numpy_nullable")
        assert build_topology(records_from_frame(df)).node_ids == ["C1", "P1"]

    def test_unsupported_object(self):
        with pytest.raises(ValueError, match="Unsupported source type"):
            records_from_frame(object())


class TestLoadRecords:

    def test_from_path(self, tmp_path, interactions_csv):
        p = tmp_path / "interactions.csv"
        p.write_text(interactions_csv, encoding="utf-8")
        assert len(load_records(p)) == 4
        assert len(load_records(str(p))) == 4

    def test_from_text(self, interactions_csv):
        assert load_records(interactions_csv) == parse_table(interactions_csv)

    def test_from_bytes(self, interactions_csv):
        assert load_records(interactions_csv.encode("utf-8")) == parse_table(interactions_csv)

    def test_none_is_empty(self):
        assert load_records(None) == []

    def test_from_dataframe(self, interactions_df):
        assert load_records(interactions_df)[1] == {"drug": "D1", "target": "T2"}

    def test_bare_word_is_text(self):
        # A single word that is not a file is parsed as (header-only) text
        assert load_records("compound_id") == []

    def test_missing_table_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_records(str(tmp_path / "interactions.csv"))

    def test_path_with_comma(self, tmp_path, interactions_csv):
        p = tmp_path / "screen 1, replicate 2.csv"
        p.write_text(interactions_csv, encoding="utf-8")
        assert len(load_records(str(p))) == 4

    def test_read_text_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_text(tmp_path / "missing.csv")
