"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from kenya_dashboard.config import IndicatorConfig
from kenya_dashboard.data.models import Series


DEFAULT_TEMPLATE = "plotly_dark"
GRID_COLOR = "rgba(255, 255, 255, 0.2)"
AXIS_FONT_COLOR = "#9ca3af"
CHART_HEIGHT = 300


def series_to_frame(series: Optional[Series]) -> pd.DataFrame:
    """Flatten records into a ``period``/``value`` frame in their original order."""
    if not series:
        return pd.DataFrame(columns=["period", "value"])
    return pd.DataFrame(
        {
            "period": [record.time_key for record in series],
            "value": [record.value for record in series],
        }
    )


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    showlegend: bool = False,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        height=CHART_HEIGHT,
        hovermode="x unified",
        showlegend=showlegend,
        margin=dict(l=40, r=20, t=60, b=40),
        font=dict(color=AXIS_FONT_COLOR),
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False, type="category")
    fig.update_yaxes(showgrid=True, gridcolor=GRID_COLOR, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def line_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: str,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    markers: bool = False,
) -> go.Figure:
    fig = px.line(df, x=x, y=y, markers=markers, color_discrete_sequence=[color])
    fig.update_traces(line=dict(width=3, shape="spline"))
    return _configure_layout(fig, title, xaxis_title, yaxis_title)


def area_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: str,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig = px.area(df, x=x, y=y, color_discrete_sequence=[color])
    fig.update_traces(line=dict(shape="spline"), opacity=0.3)
    return _configure_layout(fig, title, xaxis_title, yaxis_title)


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: str,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig = px.bar(df, x=x, y=y, color_discrete_sequence=[color])
    return _configure_layout(fig, title, xaxis_title, yaxis_title)


CHART_BUILDERS = {
    "line": line_chart,
    "area": area_chart,
    "bar": bar_chart,
}


def indicator_chart(df: pd.DataFrame, config: IndicatorConfig) -> go.Figure:
    builder = CHART_BUILDERS.get(config.chart_type)
    if builder is None:
        raise ValueError(f"Unknown chart type {config.chart_type!r} for {config.indicator.value}")
    fig = builder(
        df,
        x="period",
        y="value",
        color=config.color,
        title=config.chart_title,
        xaxis_title=config.x_label,
        yaxis_title=config.y_label,
    )
    if config.x_label == "Date":
        fig.update_xaxes(type="date", tickformat="%B %d, %Y")
    return fig
