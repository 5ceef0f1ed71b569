"""
Layout helpers for the Streamlit application (page setup, sidebar, loading and error views).
"""

from __future__ import annotations

import streamlit as st

from kenya_dashboard.config import INDICATORS, DashboardSettings

PAGE_TITLE = "Kenya Economic Analysis"


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="wide",
        page_icon=":chart_with_upwards_trend:",
    )
    _inject_card_styles()


def _inject_card_styles() -> None:
    st.markdown(
        """
        <style>
        [data-testid="stMetric"] {
            background-color: #1f2937;
            border: 1px solid #374151;
            border-radius: 0.5rem;
            padding: 0.75rem;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_header() -> None:
    st.title(PAGE_TITLE)


def format_cache_ttl(seconds: int) -> str:
    if seconds < 60:
        return f"{seconds} s"
    minutes, remainder = divmod(seconds, 60)
    if remainder:
        return f"{minutes} min {remainder} s"
    return f"{minutes} min"


def sidebar_controls(settings: DashboardSettings) -> bool:
    """
    Render the sidebar and return True when the user asked for a data refresh.
    """
    st.sidebar.header("Data")
    refresh = st.sidebar.button("🔄 Refresh Data")
    st.sidebar.caption(
        f"Series are cached for {format_cache_ttl(settings.cache_ttl_seconds)}. "
        "Sample data stands in for the statistics API."
    )
    with st.sidebar.expander("Indicators", expanded=False):
        for config in INDICATORS:
            st.markdown(f"- {config.icon} {config.title}")
    return refresh


def render_loading_placeholder() -> None:
    """Skeleton grid shown while series are still loading."""
    for _ in range(3):
        cols = st.columns(2)
        for col in cols:
            with col:
                with st.container(border=True):
                    st.markdown("&nbsp;" * 3)
                    st.caption("Loading…")


def render_error(message: str) -> None:
    st.markdown("## Error")
    st.error(message)
