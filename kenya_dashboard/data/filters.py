"""
Year filter applied to a single indicator series.
"""

from __future__ import annotations

from typing import List, Optional

from kenya_dashboard.data.models import Series

ALL_YEARS = "All"


def available_years(series: Optional[Series]) -> List[str]:
    """Distinct years in the series, in order of first occurrence."""
    if series is None:
        return []
    return list(dict.fromkeys(record.year for record in series))


def filter_by_year(series: Optional[Series], selected_year: str = ALL_YEARS) -> Optional[Series]:
    """
    Narrow the series to one year.

    ``"All"`` returns the series untouched, an unknown year returns an empty
    tuple, and a series that has not loaded yet stays ``None``.
    """
    if series is None:
        return None
    if selected_year == ALL_YEARS:
        return series
    return tuple(record for record in series if record.year == selected_year)
