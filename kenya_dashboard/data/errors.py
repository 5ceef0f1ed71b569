from __future__ import annotations

from typing import Optional


class DashboardDataError(Exception):
    """Base error for anything that prevents an indicator series from loading."""


class DataSourceError(DashboardDataError):
    def __init__(self, indicator: Optional[str], reason: str) -> None:
        self.indicator = indicator
        self.reason = reason
        label = f"{indicator}: " if indicator else ""
        super().__init__(f"{label}{reason}")


class SeriesValidationError(DashboardDataError):
    def __init__(self, indicator: str, reason: str) -> None:
        self.indicator = indicator
        self.reason = reason
        super().__init__(f"Invalid {indicator} series: {reason}")
