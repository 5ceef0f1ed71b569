"""
Economic data sources feeding the indicator providers.

Only the bundled sample source ships today; it stands in for the statistics
API the dashboard will eventually call and mimics its latency.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Protocol, Sequence, Tuple

from kenya_dashboard.data.errors import DataSourceError
from kenya_dashboard.data.models import (
    DebtPoint,
    GdpPoint,
    Indicator,
    InflationPoint,
    RatePoint,
    SeriesPoint,
    TradeBalancePoint,
    UnemploymentPoint,
)

logger = logging.getLogger(__name__)


class EconomicDataSource(Protocol):
    async def fetch_series(self, indicator: Indicator) -> Sequence[SeriesPoint]:
        ...


_CBR_QUARTERLY: Tuple[Tuple[str, float], ...] = (
    ("2018-01-01", 9.50),
    ("2018-04-01", 9.00),
    ("2018-07-01", 9.00),
    ("2018-10-01", 9.00),
    ("2019-01-01", 9.00),
    ("2019-04-01", 9.00),
    ("2019-07-01", 9.00),
    ("2019-10-01", 8.50),
    ("2020-01-01", 8.25),
    ("2020-04-01", 7.25),
    ("2020-07-01", 7.00),
    ("2020-10-01", 7.00),
    ("2021-01-01", 7.00),
    ("2021-04-01", 7.00),
    ("2021-07-01", 7.00),
    ("2021-10-01", 7.00),
    ("2022-01-01", 7.00),
    ("2022-04-01", 7.50),
    ("2022-07-01", 8.25),
    ("2022-10-01", 8.75),
    ("2023-01-01", 9.50),
    ("2023-04-01", 9.50),
    ("2023-07-01", 10.50),
    ("2023-10-01", 12.50),
    ("2024-01-01", 13.00),
)

SAMPLE_DATA: Dict[Indicator, Tuple[SeriesPoint, ...]] = {
    Indicator.CBR: tuple(RatePoint(date=d, rate=r) for d, r in _CBR_QUARTERLY),
    Indicator.GDP: (
        GdpPoint(year="2018", gdp=99.21),
        GdpPoint(year="2019", gdp=101.86),
        GdpPoint(year="2020", gdp=98.61),
        GdpPoint(year="2021", gdp=110.22),
        GdpPoint(year="2022", gdp=115.45),
    ),
    Indicator.DEBT: (
        DebtPoint(year="2018", debt=50.2),
        DebtPoint(year="2019", debt=55.1),
        DebtPoint(year="2020", debt=65.4),
        DebtPoint(year="2021", debt=68.2),
        DebtPoint(year="2022", debt=67.5),
    ),
    Indicator.TRADE_BALANCE: (
        TradeBalancePoint(year="2018", trade_balance=-10.5),
        TradeBalancePoint(year="2019", trade_balance=-11.2),
        TradeBalancePoint(year="2020", trade_balance=-10.8),
        TradeBalancePoint(year="2021", trade_balance=-12.1),
        TradeBalancePoint(year="2022", trade_balance=-13.5),
    ),
    Indicator.INFLATION: (
        InflationPoint(year="2018", inflation=5.72),
        InflationPoint(year="2019", inflation=5.28),
        InflationPoint(year="2020", inflation=5.62),
        InflationPoint(year="2021", inflation=6.14),
        InflationPoint(year="2022", inflation=7.66),
        InflationPoint(year="2023", inflation=7.70),
    ),
    Indicator.UNEMPLOYMENT: (
        UnemploymentPoint(year="2018", unemployment=5.8),
        UnemploymentPoint(year="2019", unemployment=5.5),
        UnemploymentPoint(year="2020", unemployment=6.2),
        UnemploymentPoint(year="2021", unemployment=5.9),
        UnemploymentPoint(year="2022", unemployment=5.7),
    ),
}

# Simulated round-trip per indicator, in seconds
SAMPLE_LATENCY: Dict[Indicator, float] = {
    Indicator.CBR: 1.5,
    Indicator.GDP: 1.0,
    Indicator.DEBT: 1.2,
    Indicator.TRADE_BALANCE: 0.8,
    Indicator.INFLATION: 1.0,
    Indicator.UNEMPLOYMENT: 1.2,
}


class SampleDataSource:
    """Serves the bundled sample series after a simulated network delay."""

    def __init__(self, latency_scale: float = 1.0) -> None:
        self._latency_scale = max(latency_scale, 0.0)

    async def fetch_series(self, indicator: Indicator) -> Tuple[SeriesPoint, ...]:
        indicator = Indicator(indicator)
        delay = SAMPLE_LATENCY[indicator] * self._latency_scale
        if delay:
            await asyncio.sleep(delay)
        try:
            data = SAMPLE_DATA[indicator]
        except KeyError as exc:
            raise DataSourceError(indicator.value, "no sample data bundled") from exc
        logger.debug("Served %d sample records for %s", len(data), indicator.value)
        return data
