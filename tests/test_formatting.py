"""Tests for display formatters."""

from __future__ import annotations

import logging
import re

import pytest

from kenya_dashboard.ui.components.formatting import (
    INVALID_DATE,
    format_currency,
    format_date,
    format_number,
    format_percentage,
    format_value,
)


@pytest.mark.unit
class TestFormatCurrency:
    @pytest.mark.parametrize("value", [0, 1, 12.3, 1234.567, 99_999_999.999, -10.5, 0.004])
    def test_two_fraction_digits_and_symbol(self, value: float) -> None:
        out = format_currency(value)
        assert "Ksh" in out
        assert re.search(r"\.\d{2}$", out)

    def test_grouping(self) -> None:
        assert format_currency(1234567.891) == "Ksh 1,234,567.89"

    def test_negative_sign_precedes_symbol(self) -> None:
        assert format_currency(-10.5) == "-Ksh 10.50"


@pytest.mark.unit
class TestFormatPercentage:
    def test_whole_number_percentage(self) -> None:
        assert format_percentage(9.5) == "9.50%"

    def test_matches_fraction_formatting(self) -> None:
        assert format_percentage(9.5) == f"{0.095:.2%}"

    def test_negative(self) -> None:
        assert format_percentage(-1.25) == "-1.25%"


@pytest.mark.unit
class TestFormatNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (1_500_000_000, "1.50 Billion"),
            (1_000_000_000, "1.00 Billion"),
            (2_500_000, "2.50 Million"),
            (2_500, "2.50 Thousand"),
            (1_000, "1.00 Thousand"),
            (999.994, "999.99"),
            (42, "42.00"),
            (-13.5, "-13.50"),
        ],
    )
    def test_tiers(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_idempotent(self) -> None:
        assert format_number(123_456) == format_number(123_456)


@pytest.mark.unit
class TestFormatDate:
    def test_valid_iso_date(self) -> None:
        out = format_date("2024-01-01")
        assert out != INVALID_DATE
        assert "2024" in out
        assert out == "January 01, 2024"

    def test_invalid_date_returns_literal(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert format_date("not-a-date") == "Invalid Date"
        assert "not-a-date" in caplog.text

    def test_none_does_not_raise(self) -> None:
        assert format_date(None) == INVALID_DATE  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["now", "today", "2024-13-45", "2024-02-30"])
    def test_non_iso_or_impossible_dates_are_rejected(self, text: str) -> None:
        assert format_date(text) == INVALID_DATE


@pytest.mark.unit
def test_format_value_dispatches_on_kind() -> None:
    assert format_value(7.7, "percent") == "7.70%"
    assert format_value(2_500, "number") == "2.50 Thousand"
    assert format_value(2_500, "currency") == "Ksh 2,500.00"
