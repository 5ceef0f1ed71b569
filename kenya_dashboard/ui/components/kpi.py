from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

import streamlit as st

from kenya_dashboard.config import INDICATORS
from kenya_dashboard.data.models import Indicator, Series
from kenya_dashboard.ui.components.formatting import format_number, format_percentage, format_value
from kenya_dashboard.ui.pages.helpers import latest_change, latest_point, pct_change, previous_point


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_format: str = "number"  # percent | number | currency
    delta: Optional[float] = None
    delta_format: str = "pct"  # pct | pp
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value is None:
        return "N/A"
    return format_value(card.value, card.value_format)


def _format_delta(card: KpiCard) -> Optional[str]:
    if card.delta is None:
        return None
    if card.delta_format == "pp":
        return f"{format_number(card.delta)} pp"
    return format_percentage(card.delta)


def build_kpi_cards(series: Mapping[Indicator, Series]) -> List[KpiCard]:
    """One card per indicator with its latest value and change vs the prior record."""
    cards: List[KpiCard] = []
    for config in INDICATORS:
        data = series.get(config.indicator)
        latest = latest_point(data)
        if latest is None:
            cards.append(KpiCard(label=config.title, help_text=config.empty_message))
            continue
        if config.value_format == "percent":
            delta = latest_change(data)
            delta_format = "pp"
        else:
            previous = previous_point(data)
            delta = pct_change(latest.value, previous.value if previous else None)
            delta_format = "pct"
        cards.append(
            KpiCard(
                label=config.title,
                value=latest.value,
                value_format=config.value_format,
                delta=delta,
                delta_format=delta_format,
                help_text=f"As of {latest.time_key}",
            )
        )
    return cards


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No indicator data available.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                value = _format_value(card)
                delta = _format_delta(card)
                st.metric(label=card.label, value=value, delta=delta)
                if card.help_text:
                    st.caption(card.help_text)
