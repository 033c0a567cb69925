"""Unit tests for sheet value-grid parsing."""

import pytest

from storydesk.data.sheets import is_blank, normalize_header, parse_sheet_values, resolve_field


class TestNormalizeHeader:
    """Test suite for normalize_header."""

    @pytest.mark.parametrize("header, expected", [
        ("Study Title", "study_title"),
        ("Study Link #", "study_link_"),
        ("Prev. Link #", "prev_link_"),
        ("Average O/R", "average_o_r"),
        ("QA Due By", "qa_due_by"),
        ("brand", "brand"),
        ("", ""),
    ])
    def test_header_keys(self, header, expected) -> None:
        assert normalize_header(header) == expected


class TestParseSheetValues:
    """Test suite for parse_sheet_values."""

    def test_rows_keyed_by_normalized_header(self, metrics_sheet_values) -> None:
        rows = parse_sheet_values(metrics_sheet_values)

        assert len(rows) == 3
        assert rows[0]["id"] == 0
        assert rows[0]["study_title"] == "Best Cities for Dog Owners"
        assert rows[0]["study_link_"] == "42"
        assert rows[1]["prev_link_"] == "17"
        assert rows[2]["id"] == 2

    def test_short_rows_are_padded(self, planning_sheet_values) -> None:
        rows = parse_sheet_values(planning_sheet_values)

        assert rows[2]["story_title"] == "Garden Gnome Survey"
        assert rows[2]["production_date"] == ""
        assert rows[2]["study_url"] == ""

    def test_none_cells_become_empty(self) -> None:
        rows = parse_sheet_values([["Title", "Brand"], ["x", None]])
        assert rows == [{"id": 0, "title": "x", "brand": ""}]

    @pytest.mark.parametrize("values", [None, [], [["Title", "Brand"]]])
    def test_no_data_rows(self, values) -> None:
        assert parse_sheet_values(values) == []

    def test_malformed_rows_are_skipped(self) -> None:
        rows = parse_sheet_values([["Title"], "not a row", ["ok"]])
        assert rows == [{"id": 1, "title": "ok"}]

    def test_empty_row(self) -> None:
        rows = parse_sheet_values([["Title"], []])
        assert rows == [{"id": 0, "title": ""}]


class TestResolveField:
    """Test suite for resolve_field and is_blank."""

    def test_first_non_empty(self) -> None:
        row = {"story_title": "", "news_peg": "Snow Day"}
        assert resolve_field(row, ["story_title", "news_peg"]) == "Snow Day"

    def test_default(self) -> None:
        assert resolve_field({}, ["story_title"], default="") == ""
        assert resolve_field({}, ["story_title"]) is None

    def test_zero_is_not_blank(self) -> None:
        assert resolve_field({"links": 0}, ["links"]) == 0
        assert is_blank(0) is False
        assert is_blank("  ") is True
        assert is_blank(None) is True
