"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from kenya_dashboard.data.models import Indicator

logger = logging.getLogger(__name__)

SETTING_PREFIX = "KENYA_DASHBOARD_"


@dataclass(frozen=True)
class IndicatorConfig:
    indicator: Indicator
    title: str
    description: str
    chart_title: str
    chart_type: str  # line | area | bar
    color: str
    x_label: str
    y_label: str
    value_format: str  # percent | number
    empty_message: str
    icon: str = ""


# Ordered section definitions for the dashboard
INDICATORS: List[IndicatorConfig] = [
    IndicatorConfig(
        indicator=Indicator.CBR,
        title="Central Bank Rate (CBR)",
        description="The Central Bank Rate is the base interest rate set by the Central Bank of Kenya.",
        chart_title="Central Bank Rate Over Time",
        chart_type="line",
        color="#8884d8",
        x_label="Date",
        y_label="Rate (%)",
        value_format="percent",
        empty_message="No data available for the selected year.",
        icon="🏛️",
    ),
    IndicatorConfig(
        indicator=Indicator.GDP,
        title="Gross Domestic Product (GDP)",
        description=(
            "The total monetary value of all final goods and services produced "
            "within Kenya in a specific period."
        ),
        chart_title="GDP Over Time",
        chart_type="area",
        color="#82ca9d",
        x_label="Year",
        y_label="GDP (Billion KES)",
        value_format="number",
        empty_message="No GDP data available.",
        icon="🏢",
    ),
    IndicatorConfig(
        indicator=Indicator.DEBT,
        title="National Debt",
        description="The total amount of money that the Kenyan government owes to its creditors.",
        chart_title="National Debt Over Time",
        chart_type="line",
        color="#e55353",
        x_label="Year",
        y_label="Debt (% of GDP)",
        value_format="percent",
        empty_message="No National Debt data available.",
        icon="💵",
    ),
    IndicatorConfig(
        indicator=Indicator.TRADE_BALANCE,
        title="Trade Balance",
        description="The difference between Kenya's exports and imports of goods and services.",
        chart_title="Trade Balance Over Time",
        chart_type="bar",
        color="#f4c030",
        x_label="Year",
        y_label="Trade Balance (Billion KES)",
        value_format="number",
        empty_message="No Trade Balance data available.",
        icon="📈",
    ),
    IndicatorConfig(
        indicator=Indicator.INFLATION,
        title="Inflation Rate",
        description=(
            "The rate at which the general level of prices for goods and services "
            "is rising, and subsequently, purchasing power is falling."
        ),
        chart_title="Inflation Rate",
        chart_type="line",
        color="#a855f7",
        x_label="Year",
        y_label="Inflation Rate (%)",
        value_format="percent",
        empty_message="No inflation data available.",
        icon="💰",
    ),
    IndicatorConfig(
        indicator=Indicator.UNEMPLOYMENT,
        title="Unemployment Rate",
        description="The percentage of the labor force that is unemployed.",
        chart_title="Unemployment Rate",
        chart_type="line",
        color="#fbbf24",
        x_label="Year",
        y_label="Unemployment Rate (%)",
        value_format="percent",
        empty_message="No unemployment data available.",
        icon="🔎",
    ),
]

INDICATOR_CONFIG = {config.indicator: config for config in INDICATORS}


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        pass
    return default


@dataclass(frozen=True)
class DashboardSettings:
    latency_scale: float = 1.0
    cache_ttl_seconds: int = 600
    log_level: str = "INFO"


DEFAULT_SETTINGS = DashboardSettings()


def _parse_float(name: str, raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative, using %s", name, raw, default)
        return default
    return value


def load_settings() -> DashboardSettings:
    """Resolve dashboard settings from env vars / secrets, falling back to defaults."""
    latency_key = f"{SETTING_PREFIX}LATENCY_SCALE"
    ttl_key = f"{SETTING_PREFIX}CACHE_TTL"
    level_key = f"{SETTING_PREFIX}LOG_LEVEL"

    latency_scale = _parse_float(latency_key, get_setting(latency_key), DEFAULT_SETTINGS.latency_scale)
    cache_ttl = _parse_float(ttl_key, get_setting(ttl_key), DEFAULT_SETTINGS.cache_ttl_seconds)

    log_level = (get_setting(level_key) or DEFAULT_SETTINGS.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Ignoring %s=%r: unknown log level", level_key, log_level)
        log_level = DEFAULT_SETTINGS.log_level

    return DashboardSettings(
        latency_scale=latency_scale,
        cache_ttl_seconds=int(cache_ttl),
        log_level=log_level,
    )
