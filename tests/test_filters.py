"""Tests for the per-year series filter."""

from __future__ import annotations

import pytest

from kenya_dashboard.data.filters import (
    ALL_YEARS,
    available_years,
    filter_by_year,
)
from kenya_dashboard.data.models import GdpPoint, RatePoint


@pytest.fixture
def year_series():
    # Deliberately unsorted to exercise first-occurrence ordering
    return (
        GdpPoint(year="2018", gdp=1.0),
        GdpPoint(year="2019", gdp=2.0),
        GdpPoint(year="2018", gdp=3.0),
    )


@pytest.fixture
def rate_series():
    return (
        RatePoint(date="2022-10-01", rate=8.75),
        RatePoint(date="2023-01-01", rate=9.50),
        RatePoint(date="2023-07-01", rate=10.50),
        RatePoint(date="2024-01-01", rate=13.00),
    )


@pytest.mark.unit
class TestAvailableYears:
    def test_first_occurrence_without_duplicates(self, year_series) -> None:
        assert available_years(year_series) == ["2018", "2019"]

    def test_years_from_dates(self, rate_series) -> None:
        assert available_years(rate_series) == ["2022", "2023", "2024"]

    def test_absent_series(self) -> None:
        assert available_years(None) == []


@pytest.mark.unit
class TestFilterByYear:
    def test_selected_year_preserves_order(self, year_series) -> None:
        result = filter_by_year(year_series, "2018")
        assert [r.gdp for r in result] == [1.0, 3.0]

    def test_all_is_identity(self, year_series) -> None:
        assert filter_by_year(year_series, ALL_YEARS) is year_series

    def test_unknown_year_is_empty(self, rate_series) -> None:
        assert filter_by_year(rate_series, "1999") == ()

    def test_dated_series(self, rate_series) -> None:
        result = filter_by_year(rate_series, "2023")
        assert [r.date for r in result] == ["2023-01-01", "2023-07-01"]

    def test_absent_series_stays_absent(self) -> None:
        assert filter_by_year(None, "2018") is None
        assert filter_by_year(None, ALL_YEARS) is None
