"""
One provider coroutine per indicator.

Each provider asks the data source for its series and refuses to hand back an
empty, unordered, duplicate-keyed, or wrongly-typed sequence.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Dict, Optional, Sequence, Tuple

from kenya_dashboard.data.errors import SeriesValidationError
from kenya_dashboard.data.models import (
    RECORD_TYPES,
    DebtPoint,
    GdpPoint,
    Indicator,
    InflationPoint,
    RatePoint,
    SeriesPoint,
    TradeBalancePoint,
    UnemploymentPoint,
)
from kenya_dashboard.data.sources import EconomicDataSource, SampleDataSource

Provider = Callable[[Optional[EconomicDataSource]], Awaitable[Tuple[SeriesPoint, ...]]]


def validate_series(indicator: Indicator, records: Sequence[SeriesPoint]) -> Tuple[SeriesPoint, ...]:
    series = tuple(records)
    if not series:
        raise SeriesValidationError(indicator.value, "no records returned")
    expected_type = RECORD_TYPES[indicator]
    for record in series:
        if not isinstance(record, expected_type):
            raise SeriesValidationError(
                indicator.value,
                f"expected {expected_type.__name__}, got {type(record).__name__}",
            )
    keys = [record.time_key for record in series]
    for previous, current in zip(keys, keys[1:]):
        if current == previous:
            raise SeriesValidationError(indicator.value, f"duplicate entry for {current}")
        if current < previous:
            raise SeriesValidationError(indicator.value, f"{current} listed after {previous}")
    return series


async def _fetch(indicator: Indicator, source: Optional[EconomicDataSource]) -> Tuple[SeriesPoint, ...]:
    source = source if source is not None else SampleDataSource()
    records = await source.fetch_series(indicator)
    return validate_series(indicator, records)


async def fetch_cbr_data(source: Optional[EconomicDataSource] = None) -> Tuple[RatePoint, ...]:
    return await _fetch(Indicator.CBR, source)  # type: ignore[return-value]


async def fetch_gdp_data(source: Optional[EconomicDataSource] = None) -> Tuple[GdpPoint, ...]:
    return await _fetch(Indicator.GDP, source)  # type: ignore[return-value]


async def fetch_debt_data(source: Optional[EconomicDataSource] = None) -> Tuple[DebtPoint, ...]:
    return await _fetch(Indicator.DEBT, source)  # type: ignore[return-value]


async def fetch_trade_balance_data(
    source: Optional[EconomicDataSource] = None,
) -> Tuple[TradeBalancePoint, ...]:
    return await _fetch(Indicator.TRADE_BALANCE, source)  # type: ignore[return-value]


async def fetch_inflation_data(source: Optional[EconomicDataSource] = None) -> Tuple[InflationPoint, ...]:
    return await _fetch(Indicator.INFLATION, source)  # type: ignore[return-value]


async def fetch_unemployment_data(
    source: Optional[EconomicDataSource] = None,
) -> Tuple[UnemploymentPoint, ...]:
    return await _fetch(Indicator.UNEMPLOYMENT, source)  # type: ignore[return-value]


# Ordered to match the DashboardSeries slots
PROVIDERS: Dict[Indicator, Provider] = {
    Indicator.CBR: fetch_cbr_data,
    Indicator.GDP: fetch_gdp_data,
    Indicator.DEBT: fetch_debt_data,
    Indicator.TRADE_BALANCE: fetch_trade_balance_data,
    Indicator.INFLATION: fetch_inflation_data,
    Indicator.UNEMPLOYMENT: fetch_unemployment_data,
}
