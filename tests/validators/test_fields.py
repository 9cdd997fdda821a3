"""Tests for the built-in field validators and offset advancement."""

from __future__ import annotations

import pytest
from recipe_builders import spec

from recipectl.validators.fields import (
    DateTimeFieldValidator,
    FieldResult,
    StringFieldValidator,
)


class TestStringLiteral:
    @pytest.mark.parametrize(
        ("field", "offset", "value", "expected"),
        [
            ("HDR20240101", 0, "HDR", True),
            ("XXX20240101", 0, "HDR", False),
            ("HDR20240101", 3, "2024", True),
            ("hdr", 0, "HDR", False),
            ("HD", 0, "HDR", False),
            ("ABHDR", 2, "HDR", True),
        ],
    )
    def test_exact_substring(self, field: str, offset: int, value: str, expected: bool) -> None:
        result = StringFieldValidator().evaluate(field, offset, spec(value=value))
        assert result.valid is expected

    @pytest.mark.parametrize("field", ["HDR", "XXX", "H", ""])
    def test_offset_advances_by_value_length_either_way(self, field: str) -> None:
        result = StringFieldValidator().evaluate(field, 0, spec(value="HDR"))
        assert result.offset == 3

    def test_value_takes_precedence_over_length(self) -> None:
        result = StringFieldValidator().evaluate("AB", 0, spec(value="AB", length=10))
        assert result == FieldResult(valid=True, offset=2)


class TestStringLength:
    def test_enough_characters(self) -> None:
        result = StringFieldValidator().evaluate("ABC", 0, spec(length=3))
        assert result == FieldResult(valid=True, offset=3)

    def test_too_few_characters(self) -> None:
        result = StringFieldValidator().evaluate("AB", 0, spec(length=3))
        assert result == FieldResult(valid=False, offset=3)

    def test_length_counts_from_offset(self) -> None:
        validator = StringFieldValidator()
        assert validator.evaluate("ABCDE", 2, spec(length=3)).valid is True
        assert validator.evaluate("ABCDE", 3, spec(length=3)).valid is False

    def test_content_not_constrained(self) -> None:
        result = StringFieldValidator().evaluate("   ", 0, spec(length=3))
        assert result.valid is True


class TestStringFreeText:
    @pytest.mark.parametrize(
        ("field", "expected"),
        [("hello", True), (" x ", True), ("", False), ("   ", False), ("\t\n", False)],
    )
    def test_non_blank(self, field: str, expected: bool) -> None:
        result = StringFieldValidator().evaluate(field, 0, spec())
        assert result.valid is expected

    def test_offset_unchanged(self) -> None:
        result = StringFieldValidator().evaluate("hello", 4, spec())
        assert result.offset == 4


class TestDateTime:
    def test_valid_date(self) -> None:
        result = DateTimeFieldValidator().evaluate("20240101", 0, spec("datetime", format="yyyyMMdd"))
        assert result == FieldResult(valid=True, offset=8)

    def test_date_inside_fixed_record(self) -> None:
        result = DateTimeFieldValidator().evaluate(
            "HDR20240229TAIL", 3, spec("datetime", format="yyyyMMdd")
        )
        assert result == FieldResult(valid=True, offset=11)

    def test_impossible_date(self) -> None:
        result = DateTimeFieldValidator().evaluate("20230229", 0, spec("datetime", format="yyyyMMdd"))
        assert result == FieldResult(valid=False, offset=8)

    def test_too_short(self) -> None:
        result = DateTimeFieldValidator().evaluate("2024", 0, spec("datetime", format="yyyyMMdd"))
        assert result == FieldResult(valid=False, offset=8)

    def test_missing_format_is_invalid(self) -> None:
        result = DateTimeFieldValidator().evaluate("20240101", 0, spec("datetime"))
        assert result == FieldResult(valid=False, offset=0)

    def test_window_is_pattern_width(self) -> None:
        # Trailing characters after the window are not part of the date.
        result = DateTimeFieldValidator().evaluate(
            "20240101XYZ", 0, spec("datetime", format="yyyyMMdd")
        )
        assert result.valid is True


def test_validator_names() -> None:
    assert StringFieldValidator().name == "string"
    assert DateTimeFieldValidator().name == "datetime"
