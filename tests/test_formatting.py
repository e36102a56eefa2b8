"""
Tests for dhb.formatting

These helpers never raise; odd input falls through unchanged.
"""

import pytest

from dhb.formatting import group_digits, set_width, strip_prefix


class TestStripPrefix:
    """Tests for strip_prefix"""

    @pytest.mark.parametrize(
        "num, expected",
        [
            ("0xDEADBEEF", "DEADBEEF"),
            ("0b11110000", "11110000"),
            ("0o12", "12"),
            ("DEADBEEF", "DEADBEEF"),
            ("1", "1"),
        ],
    )
    def test_examples(self, num, expected) -> None:
        assert strip_prefix(num) == expected

    def test_bare_prefix_kept(self) -> None:
        assert strip_prefix("0x") == "0x"
        assert strip_prefix("0b") == "0b"
        assert strip_prefix("") == ""

    def test_uppercase_prefix_not_stripped(self) -> None:
        assert strip_prefix("0XFF") == "0XFF"
        assert strip_prefix("0B101") == "0B101"

    def test_only_one_prefix_removed(self) -> None:
        assert strip_prefix("0x0x1") == "0x1"

    def test_prefix_independent_of_digits(self) -> None:
        assert strip_prefix("0bFF") == "FF"


class TestSetWidth:
    """Tests for set_width"""

    def test_equal_width_unchanged(self) -> None:
        assert set_width("12345", 5) == "12345"

    def test_never_truncates(self) -> None:
        assert set_width("12345", 4) == "12345"
        assert set_width("12345", 1) == "12345"

    def test_pads_with_zeros(self) -> None:
        result = set_width("12345", 10)
        assert len(result) == 10
        assert result[:5] == "00000"
        assert result.endswith("12345")

    def test_non_positive_width_unchanged(self) -> None:
        assert set_width("123", 0) == "123"
        assert set_width("123", -4) == "123"

    def test_empty_string_padded(self) -> None:
        assert set_width("", 3) == "000"
        assert set_width("0", 2) == "00"

    def test_large_numbers(self) -> None:
        assert set_width("12345678901234567890", 25) == "0000012345678901234567890"


class TestGroupDigits:
    """Tests for group_digits"""

    def test_uneven_grouping(self) -> None:
        assert group_digits("123456789", 2) == "1 23 45 67 89"

    def test_even_grouping(self) -> None:
        assert group_digits("123456789", 3) == "123 456 789"

    def test_group_of_one(self) -> None:
        assert group_digits("1234", 1) == "1 2 3 4"

    @pytest.mark.parametrize("grouping", [0, -1, 9, 10, 100])
    def test_no_op_boundary(self, grouping) -> None:
        assert group_digits("123456789", grouping) == "123456789"

    def test_empty_string(self) -> None:
        assert group_digits("", 2) == ""

    def test_groups_anchored_right(self) -> None:
        assert group_digits("0000DEADBEEF", 4) == "0000 DEAD BEEF"
        assert group_digits("1" + "0" * 8, 4) == "1 0000 0000"
