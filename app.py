import kenya_dashboard.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from kenya_dashboard.config import load_settings
from kenya_dashboard.data.loader import clear_cache, load_data
from kenya_dashboard.ui.layout import (
    render_header,
    render_loading_placeholder,
    setup_page,
    sidebar_controls,
)
from kenya_dashboard.ui.pages.dashboard import render_dashboard

logger = logging.getLogger(__name__)


def main() -> None:
    setup_page()
    settings = load_settings()
    render_header()

    if sidebar_controls(settings):
        logger.info("Refresh requested; clearing cached series")
        clear_cache()

    placeholder = st.empty()
    with placeholder.container():
        render_loading_placeholder()
    state = load_data()
    placeholder.empty()

    render_dashboard(state)


if __name__ == "__main__":
    main()
