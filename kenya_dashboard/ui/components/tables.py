"""
Reusable helpers for rendering indicator data tables with CSV export.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from kenya_dashboard.config import IndicatorConfig
from kenya_dashboard.ui.components.formatting import format_date, format_value


def format_table(df: pd.DataFrame, config: IndicatorConfig) -> pd.DataFrame:
    """Display copy of a ``period``/``value`` frame with human-readable columns."""
    formatted_df = df.copy()
    if config.x_label == "Date":
        formatted_df["period"] = formatted_df["period"].apply(format_date)
    formatted_df["value"] = formatted_df["value"].apply(
        lambda v: format_value(v, config.value_format)
    )
    return formatted_df.rename(columns={"period": config.x_label, "value": config.y_label})


def _style_sign(val) -> str:
    try:
        if isinstance(val, str):
            val = val.replace("%", "").replace(",", "").split()[0]
        num = float(val)
    except (TypeError, ValueError, IndexError):
        return ""
    if num > 0:
        return "color: #2ca02c;"
    if num < 0:
        return "color: #d62728;"
    return ""


def render_table(
    df: pd.DataFrame,
    config: IndicatorConfig,
    height: int = 250,
    highlight_sign: bool = False,
) -> None:
    if df.empty:
        st.info(config.empty_message)
        return

    formatted_df = format_table(df, config)
    dataframe_obj = formatted_df
    if highlight_sign:
        dataframe_obj = formatted_df.style.map(_style_sign, subset=[config.y_label])

    st.dataframe(
        dataframe_obj,
        use_container_width=True,
        height=height,
        hide_index=True,
    )

    csv_bytes = df.rename(columns={"period": config.x_label, "value": config.indicator.value}).to_csv(
        index=False
    ).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=f"kenya_{config.indicator.value}.csv",
        mime="text/csv",
        key=f"download_{config.indicator.value}",
    )
