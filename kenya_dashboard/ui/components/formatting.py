"""
Utility helpers for formatting currency, percentages, magnitudes, and dates.
"""

from __future__ import annotations

import logging
import re

import pandas as pd

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")

CURRENCY_SYMBOLS = {
    "KES": "Ksh",
}

SCALE_FACTORS = [
    (1_000_000_000, "Billion"),
    (1_000_000, "Million"),
    (1_000, "Thousand"),
]


def format_currency(value: float, currency: str = "KES") -> str:
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol} {abs(value):,.2f}"


def format_percentage(value: float) -> str:
    # Values arrive as whole percentages (9.5 == 9.5%); the % format type expects a fraction
    return f"{value / 100:.2%}"


def format_number(value: float) -> str:
    for factor, suffix in SCALE_FACTORS:
        if value >= factor:
            return f"{value / factor:.2f} {suffix}"
    return f"{value:.2f}"


def format_date(date_string: str) -> str:
    # pandas also parses words such as "now" and "today"; only ISO dates are accepted
    if not isinstance(date_string, str) or not ISO_DATE_PATTERN.match(date_string):
        logger.warning("Error formatting date %r: not an ISO date", date_string)
        return INVALID_DATE
    try:
        parsed = pd.to_datetime(date_string, format="ISO8601", errors="coerce")
    except (TypeError, ValueError, OverflowError) as exc:
        logger.warning("Error formatting date %r: %s", date_string, exc)
        return INVALID_DATE
    if pd.isna(parsed):
        logger.warning("Error formatting date %r: unparseable", date_string)
        return INVALID_DATE
    return parsed.strftime("%B %d, %Y")


def format_value(value: float, kind: str) -> str:
    if kind == "percent":
        return format_percentage(value)
    if kind == "currency":
        return format_currency(value)
    return format_number(value)
