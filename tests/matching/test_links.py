"""Unit tests for link count extraction."""

import pytest

from storydesk.config.defaults import AliasParams
from storydesk.data.sheets import parse_sheet_values
from storydesk.errors import UnparseableInputError
from storydesk.matching.links import extract_link_count, parse_link_count


class TestExtractLinkCount:
    """Test suite for extract_link_count."""

    def test_first_alias_wins(self) -> None:
        row = {"study_link_": "42", "prev_link_": "17"}
        assert extract_link_count(row, ["study_link_", "prev_link_"]) == 42

    def test_skips_empty_values(self) -> None:
        """Blank cells fall through to the next alias."""
        row = {"study_link_": "  ", "prev_link_": "17"}
        assert extract_link_count(row, ["study_link_", "prev_link_"]) == 17

    def test_alias_order_is_respected(self) -> None:
        row = {"study_link_": "42", "prev_link_": "17"}
        assert extract_link_count(row, ["prev_link_", "study_link_"]) == 17

    def test_default_aliases(self) -> None:
        assert extract_link_count({"prev__link_": "9"}) == 9
        assert extract_link_count({"links": 3}) == 3
        assert "prev__link_" in AliasParams().link_count

    def test_double_underscore_header_resolves_to_single(self) -> None:
        """Sheet headers like "Prev  Link #" collapse to the prev_link_ key."""
        rows = parse_sheet_values([["Study Title", "Prev  Link #"], ["Dog Parks", "11"]])

        assert "prev__link_" not in rows[0]
        assert extract_link_count(rows[0]) == 11

    def test_missing_keys_return_zero(self) -> None:
        assert extract_link_count({"brand": "LawnStarter"}, ["study_link_", "links"]) == 0

    def test_non_numeric_returns_zero(self) -> None:
        """Non-numeric strings degrade to 0 instead of raising."""
        assert extract_link_count({"study_link_": "n/a", "links": "tbd"}, ["study_link_", "links"]) == 0

    def test_first_non_empty_value_is_used_even_if_unparseable(self) -> None:
        row = {"study_link_": "pending", "links": "12"}
        assert extract_link_count(row, ["study_link_", "links"]) == 0

    def test_non_mapping_returns_zero(self) -> None:
        assert extract_link_count(["42"], ["study_link_"]) == 0

    def test_empty_alias_list(self) -> None:
        assert extract_link_count({"study_link_": "42"}, []) == 0


class TestParseLinkCount:
    """Test suite for parse_link_count."""

    @pytest.mark.parametrize("raw, expected", [
        ("42", 42),
        (" 42 ", 42),
        ("1,204", 1204),
        ("12 links", 12),
        ("12.9", 12),
        (7, 7),
        (7.8, 7),
        (-3, 0),
        ("-3", 0),
        ("+5", 5),
    ])
    def test_valid_values(self, raw, expected) -> None:
        assert parse_link_count(raw) == expected

    @pytest.mark.parametrize("raw", ["n/a", "", "links: 12", True, float("nan"), float("inf"), None, [3]])
    def test_invalid_values(self, raw) -> None:
        with pytest.raises(UnparseableInputError):
            parse_link_count(raw)
