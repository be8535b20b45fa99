"""
Unit Tests for record loading from uploaded bytes.
"""

from io import BytesIO

import pandas as pd
import pytest

from ttest_tutor.engine.ingest import dataframe_to_records, load_records, read_dataframe
from ttest_tutor.stats.errors import ParseError

CSV = b"Subject,Before,After\ns1,10,8\ns2,12,9\ns3,9,7\n"


class TestCsv:

    def test_records_keep_column_order(self):
        records = load_records(CSV, "scores.csv")
        assert list(records[0].keys()) == ["Subject", "Before", "After"]
        assert records[0] == {"Subject": "s1", "Before": 10, "After": 8}
        assert len(records) == 3

    def test_values_are_builtin_types(self):
        records = load_records(CSV, "scores.csv")
        assert all(type(r["Before"]) is int for r in records)

    def test_blank_cell_becomes_none(self):
        records = load_records(b"A,B\n1,2\n3,\n", "gaps.csv")
        assert records[1] == {"A": 3, "B": None}

    def test_fully_empty_column_dropped(self):
        records = load_records(b"A,Empty,B\n1,,2\n3,,4\n", "gaps.csv")
        assert list(records[0].keys()) == ["A", "B"]

    def test_txt_delimiter_sniffed(self):
        records = load_records(b"A;B\n1;2\n3;4\n", "data.txt")
        assert records == [{"A": 1, "B": 2}, {"A": 3, "B": 4}]

    def test_stray_text_cell_leaves_rest_of_column_numeric(self):
        records = load_records(b"Subject,X,Y,Z\ns1,10,8,1\ns2,abc,9,4\ns3,9,7,2\n", "scores.csv")
        assert records[0]["X"] == 10
        assert records[1]["X"] == "abc"
        assert records[2]["X"] == 9
        assert records[0]["Subject"] == "s1"


class TestExcel:

    def test_first_sheet_is_read(self):
        buffer = BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            pd.DataFrame({"Pre": [1.5, 2.5], "Post": [1.0, 2.0]}).to_excel(writer, sheet_name="First", index=False)
            pd.DataFrame({"Other": ["x", "y"]}).to_excel(writer, sheet_name="Second", index=False)

        records = load_records(buffer.getvalue(), "upload.XLSX")
        assert records == [{"Pre": 1.5, "Post": 1.0}, {"Pre": 2.5, "Post": 2.0}]


class TestParseErrors:

    def test_empty_content(self):
        with pytest.raises(ParseError, match="empty"):
            load_records(b"", "scores.csv")

    def test_unsupported_extension(self):
        with pytest.raises(ParseError, match="Unsupported file type"):
            load_records(b"{}", "scores.json")

    def test_corrupt_workbook(self):
        with pytest.raises(ParseError, match="Error reading the file"):
            read_dataframe(b"definitely not a zip archive", "broken.xlsx")


def test_dataframe_to_records_nan_to_none():
    df = pd.DataFrame({"A": [1.0, float("nan")], "B": ["x", None]})
    assert dataframe_to_records(df) == [{"A": 1.0, "B": "x"}, {"A": None, "B": None}]
