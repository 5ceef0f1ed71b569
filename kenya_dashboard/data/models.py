"""
Typed records, series containers, and load states for the indicator dashboard.
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Union

YEAR_PATTERN = re.compile(r"\d{4}")


class Indicator(str, Enum):
    CBR = "cbr"
    GDP = "gdp"
    DEBT = "debt"
    TRADE_BALANCE = "trade_balance"
    INFLATION = "inflation"
    UNEMPLOYMENT = "unemployment"


@dataclass(frozen=True)
class RatePoint:
    date: str
    rate: float

    def __post_init__(self) -> None:
        # Malformed dates fail here, not in the year filter
        dt.date.fromisoformat(self.date)

    @property
    def time_key(self) -> str:
        return self.date

    @property
    def value(self) -> float:
        return self.rate

    @property
    def year(self) -> str:
        return str(dt.date.fromisoformat(self.date).year)


@dataclass(frozen=True)
class _YearPoint:
    year: str

    def __post_init__(self) -> None:
        if not isinstance(self.year, str) or not YEAR_PATTERN.fullmatch(self.year):
            raise ValueError(f"Year must be a four-digit string, got {self.year!r}")

    @property
    def time_key(self) -> str:
        return self.year


@dataclass(frozen=True)
class GdpPoint(_YearPoint):
    gdp: float

    @property
    def value(self) -> float:
        return self.gdp


@dataclass(frozen=True)
class DebtPoint(_YearPoint):
    debt: float

    @property
    def value(self) -> float:
        return self.debt


@dataclass(frozen=True)
class TradeBalancePoint(_YearPoint):
    trade_balance: float

    @property
    def value(self) -> float:
        return self.trade_balance


@dataclass(frozen=True)
class InflationPoint(_YearPoint):
    inflation: float

    @property
    def value(self) -> float:
        return self.inflation


@dataclass(frozen=True)
class UnemploymentPoint(_YearPoint):
    unemployment: float

    @property
    def value(self) -> float:
        return self.unemployment


SeriesPoint = Union[
    RatePoint,
    GdpPoint,
    DebtPoint,
    TradeBalancePoint,
    InflationPoint,
    UnemploymentPoint,
]
Series = Tuple[SeriesPoint, ...]

RECORD_TYPES: Dict[Indicator, type] = {
    Indicator.CBR: RatePoint,
    Indicator.GDP: GdpPoint,
    Indicator.DEBT: DebtPoint,
    Indicator.TRADE_BALANCE: TradeBalancePoint,
    Indicator.INFLATION: InflationPoint,
    Indicator.UNEMPLOYMENT: UnemploymentPoint,
}


@dataclass(frozen=True)
class DashboardSeries:
    """The six indicator series, one named slot each."""

    cbr: Tuple[RatePoint, ...]
    gdp: Tuple[GdpPoint, ...]
    debt: Tuple[DebtPoint, ...]
    trade_balance: Tuple[TradeBalancePoint, ...]
    inflation: Tuple[InflationPoint, ...]
    unemployment: Tuple[UnemploymentPoint, ...]

    def __getitem__(self, indicator: Indicator) -> Series:
        return getattr(self, Indicator(indicator).value)

    def as_dict(self) -> Dict[Indicator, Series]:
        return {indicator: self[indicator] for indicator in Indicator}


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded:
    series: DashboardSeries


@dataclass(frozen=True)
class Failed:
    message: str


LoadState = Union[Idle, Loading, Loaded, Failed]


@dataclass(frozen=True)
class LoadStateView:
    """Flattened loading/error/series projection consumed by the page shell."""

    loading: bool
    error: Optional[str]
    series: Optional[Mapping[Indicator, Series]]

    @classmethod
    def from_state(cls, state: LoadState) -> "LoadStateView":
        if isinstance(state, Loaded):
            return cls(loading=False, error=None, series=state.series.as_dict())
        if isinstance(state, Failed):
            return cls(loading=False, error=state.message, series=None)
        return cls(loading=isinstance(state, Loading), error=None, series=None)
