from __future__ import annotations

from typing import Optional

from kenya_dashboard.data.models import Series, SeriesPoint


def latest_point(series: Optional[Series]) -> Optional[SeriesPoint]:
    if not series:
        return None
    return series[-1]


def previous_point(series: Optional[Series]) -> Optional[SeriesPoint]:
    if not series or len(series) < 2:
        return None
    return series[-2]


def pct_change(current: Optional[float], previous: Optional[float]) -> Optional[float]:
    if current is None or previous in (None, 0):
        return None
    try:
        return ((current - previous) / abs(previous)) * 100
    except ZeroDivisionError:
        return None


def latest_change(series: Optional[Series]) -> Optional[float]:
    """Absolute change between the last two records, in the series' own unit."""
    latest = latest_point(series)
    previous = previous_point(series)
    if latest is None or previous is None:
        return None
    return latest.value - previous.value
