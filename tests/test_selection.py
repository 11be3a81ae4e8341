"""
Tests for selection parsing — "1, 9, x" against a numbered catalog.
"""

import pytest

from winadmin.core.models.catalog import Catalog
from winadmin.core.services.selection import InvalidToken, parse_selection


class TestParseSelection:
    def test_two_valid_indices(self, catalog):
        result = parse_selection("1, 2", catalog)
        assert result.package_ids == ["googlechrome", "vlc"]
        assert result.invalid == []

    def test_invalid_tokens_dropped(self, catalog):
        result = parse_selection("1, 9, x", catalog)
        assert result.package_ids == ["googlechrome"]
        assert len(result.invalid) == 2
        assert result.invalid[0] == InvalidToken("9", "out_of_range", 2)
        assert result.invalid[1] == InvalidToken("x", "not_a_number", 3)

    def test_empty_input(self, catalog):
        result = parse_selection("", catalog)
        assert result.is_empty
        assert result.invalid == []

    def test_whitespace_only_input(self, catalog):
        result = parse_selection("   ", catalog)
        assert result.is_empty
        assert result.invalid == []

    def test_order_preserved(self, catalog):
        assert parse_selection("2,1", catalog).package_ids == ["vlc", "googlechrome"]

    def test_duplicates_kept(self, catalog):
        assert parse_selection("1,1", catalog).package_ids == ["googlechrome", "googlechrome"]

    def test_zero_is_out_of_range(self, catalog):
        result = parse_selection("0", catalog)
        assert result.is_empty
        assert result.invalid[0].reason == "out_of_range"

    def test_negative_is_out_of_range(self, catalog):
        result = parse_selection("-1", catalog)
        assert result.invalid[0].reason == "out_of_range"

    def test_explicit_plus_sign(self, catalog):
        assert parse_selection("+2", catalog).package_ids == ["vlc"]

    def test_decimal_is_not_a_number(self, catalog):
        result = parse_selection("1.5", catalog)
        assert result.invalid[0].reason == "not_a_number"

    def test_empty_token_between_delimiters(self, catalog):
        result = parse_selection("1,,2", catalog)
        assert result.package_ids == ["googlechrome", "vlc"]
        assert result.invalid == [InvalidToken("", "not_a_number", 2)]

    def test_custom_delimiter(self, catalog):
        assert parse_selection("1; 2", catalog, delimiter=";").package_ids == [
            "googlechrome",
            "vlc",
        ]

    def test_entries_carry_display_names(self, catalog):
        result = parse_selection("2", catalog)
        assert result.entries[0].display_name == "VLC"

    def test_empty_catalog(self):
        result = parse_selection("1", Catalog())
        assert result.is_empty
        assert result.invalid[0].reason == "out_of_range"

    def test_huge_number_is_out_of_range(self, catalog):
        huge = "9" * 5000
        result = parse_selection(f"1, {huge}, -{huge}", catalog)
        assert result.package_ids == ["googlechrome"]
        assert [t.reason for t in result.invalid] == ["out_of_range", "out_of_range"]
        assert result.invalid[0].position == 2

    @pytest.mark.parametrize(
        "text",
        ["1", "1, 2", "1, 9, x", "x, y", "2, 2, 2, 0", " , 1 ,", "3,abc,1,-4,2"],
    )
    def test_count_is_tokens_minus_invalid(self, catalog, text):
        result = parse_selection(text, catalog)
        tokens = text.split(",")
        assert len(result.entries) == len(tokens) - len(result.invalid)

    @pytest.mark.parametrize("index", [1, 2])
    def test_resolved_id_matches_catalog(self, catalog, index):
        result = parse_selection(str(index), catalog)
        assert result.package_ids == [catalog.entries()[index - 1].package_id]


class TestInvalidToken:
    def test_messages(self):
        assert "not a number" in InvalidToken("x", "not_a_number", 1).message
        assert "not a valid choice" in InvalidToken("9", "out_of_range", 1).message
        assert "position 2" in InvalidToken("", "not_a_number", 2).message


class TestSelectionToDict:
    def test_shape(self, catalog):
        d = parse_selection("1, x", catalog).to_dict()
        assert d["selected"] == [{"name": "Chrome", "package": "googlechrome"}]
        assert d["invalid"] == [{"token": "x", "reason": "not_a_number", "position": 2}]
