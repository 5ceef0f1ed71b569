from __future__ import annotations

from typing import Callable, Dict, Optional

import streamlit as st

from kenya_dashboard.config import INDICATOR_CONFIG, IndicatorConfig
from kenya_dashboard.data.filters import ALL_YEARS, available_years, filter_by_year
from kenya_dashboard.data.models import Indicator, Series
from kenya_dashboard.ui.components.charts import indicator_chart, render_plotly, series_to_frame
from kenya_dashboard.ui.components.formatting import format_date, format_percentage
from kenya_dashboard.ui.components.tables import render_table
from kenya_dashboard.ui.pages.helpers import latest_point


def _section_header(config: IndicatorConfig) -> None:
    st.subheader(f"{config.icon} {config.title}".strip())
    st.caption(config.description)


def _chart_and_table(series: Optional[Series], config: IndicatorConfig) -> None:
    if not series:
        st.info(config.empty_message)
        return
    frame = series_to_frame(series)
    render_plotly(indicator_chart(frame, config))
    with st.expander("Data table", expanded=False):
        render_table(frame, config, highlight_sign=config.indicator == Indicator.TRADE_BALANCE)


def render_central_bank_rate(series: Optional[Series]) -> None:
    """CBR section: latest rate, a per-year filter, and the filtered rate chart."""
    config = INDICATOR_CONFIG[Indicator.CBR]
    with st.container(border=True):
        _section_header(config)

        latest = latest_point(series)
        col_latest, col_year = st.columns([3, 1])
        with col_latest:
            if latest is None:
                st.metric("Latest Rate", "N/A")
            else:
                st.metric("Latest Rate", format_percentage(latest.value))
                st.caption(f"({format_date(latest.time_key)})")
        with col_year:
            year_options = [ALL_YEARS] + available_years(series)
            selected_year = st.selectbox(
                "Select Year",
                options=year_options,
                index=0,
                key="cbr_selected_year",
                format_func=lambda v: "All Years" if v == ALL_YEARS else v,
            )

        _chart_and_table(filter_by_year(series, selected_year), config)


def render_indicator(indicator: Indicator, series: Optional[Series]) -> None:
    config = INDICATOR_CONFIG[indicator]
    with st.container(border=True):
        _section_header(config)
        _chart_and_table(series, config)


PAGE_RENDERERS: Dict[Indicator, Callable[[Optional[Series]], None]] = {
    Indicator.CBR: render_central_bank_rate,
    Indicator.GDP: lambda series: render_indicator(Indicator.GDP, series),
    Indicator.DEBT: lambda series: render_indicator(Indicator.DEBT, series),
    Indicator.TRADE_BALANCE: lambda series: render_indicator(Indicator.TRADE_BALANCE, series),
    Indicator.INFLATION: lambda series: render_indicator(Indicator.INFLATION, series),
    Indicator.UNEMPLOYMENT: lambda series: render_indicator(Indicator.UNEMPLOYMENT, series),
}
