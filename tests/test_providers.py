"""Tests for the sample data source and per-indicator providers."""

from __future__ import annotations

import time

import pytest

from kenya_dashboard.data.errors import SeriesValidationError
from kenya_dashboard.data.models import (
    GdpPoint,
    Indicator,
    InflationPoint,
    RatePoint,
)
from kenya_dashboard.data.providers import (
    PROVIDERS,
    fetch_cbr_data,
    fetch_gdp_data,
    fetch_inflation_data,
    validate_series,
)
from kenya_dashboard.data.sources import SAMPLE_DATA, SampleDataSource


class StaticSource:
    def __init__(self, records) -> None:
        self.records = records
        self.calls = []

    async def fetch_series(self, indicator: Indicator):
        self.calls.append(indicator)
        return self.records


@pytest.mark.unit
class TestSampleDataSource:
    @pytest.mark.asyncio
    async def test_serves_every_indicator(self) -> None:
        source = SampleDataSource(latency_scale=0)
        for indicator in Indicator:
            data = await source.fetch_series(indicator)
            assert data == SAMPLE_DATA[indicator]

    @pytest.mark.asyncio
    async def test_latency_is_scaled(self) -> None:
        source = SampleDataSource(latency_scale=0.01)
        started = time.perf_counter()
        await source.fetch_series(Indicator.TRADE_BALANCE)
        assert time.perf_counter() - started >= 0.007

    def test_sample_series_are_valid(self) -> None:
        for indicator, data in SAMPLE_DATA.items():
            assert validate_series(indicator, data) == data


@pytest.mark.unit
class TestProviders:
    @pytest.mark.asyncio
    async def test_cbr_provider_returns_rate_points(self) -> None:
        data = await fetch_cbr_data(SampleDataSource(latency_scale=0))
        assert all(isinstance(point, RatePoint) for point in data)
        assert data[-1] == RatePoint(date="2024-01-01", rate=13.00)

    @pytest.mark.asyncio
    async def test_provider_asks_for_its_own_indicator(self) -> None:
        source = StaticSource((InflationPoint(year="2023", inflation=7.7),))
        await fetch_inflation_data(source)
        assert source.calls == [Indicator.INFLATION]

    @pytest.mark.asyncio
    async def test_empty_series_rejected(self) -> None:
        with pytest.raises(SeriesValidationError, match="no records"):
            await fetch_gdp_data(StaticSource(()))

    @pytest.mark.asyncio
    async def test_out_of_order_series_rejected(self) -> None:
        source = StaticSource((GdpPoint(year="2020", gdp=1.0), GdpPoint(year="2019", gdp=2.0)))
        with pytest.raises(SeriesValidationError, match="2019 listed after 2020"):
            await fetch_gdp_data(source)

    @pytest.mark.asyncio
    async def test_duplicate_keys_rejected(self) -> None:
        source = StaticSource((GdpPoint(year="2020", gdp=1.0), GdpPoint(year="2020", gdp=2.0)))
        with pytest.raises(SeriesValidationError, match="duplicate"):
            await fetch_gdp_data(source)

    @pytest.mark.asyncio
    async def test_wrong_record_type_rejected(self) -> None:
        source = StaticSource((InflationPoint(year="2020", inflation=1.0),))
        with pytest.raises(SeriesValidationError, match="expected GdpPoint"):
            await fetch_gdp_data(source)

    @pytest.mark.asyncio
    async def test_default_source_is_sample_data(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "kenya_dashboard.data.providers.SampleDataSource",
            lambda: SampleDataSource(latency_scale=0),
        )
        assert await fetch_gdp_data() == SAMPLE_DATA[Indicator.GDP]

    def test_one_provider_per_indicator(self) -> None:
        assert list(PROVIDERS) == list(Indicator)
