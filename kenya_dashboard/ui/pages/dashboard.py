from __future__ import annotations

from kenya_dashboard.config import INDICATORS
from kenya_dashboard.data.models import LoadState, LoadStateView
from kenya_dashboard.ui.components.kpi import build_kpi_cards, render_kpi_cards
from kenya_dashboard.ui.layout import render_error, render_loading_placeholder
from kenya_dashboard.ui.pages.indicators import PAGE_RENDERERS


def render_dashboard(state: LoadState) -> None:
    """
    Render the body for one load state.

    A failed load shows only the error view; a loaded one shows the KPI row
    followed by the six indicator sections in their configured order.
    """
    view = LoadStateView.from_state(state)
    if view.loading:
        render_loading_placeholder()
        return
    if view.error is not None:
        render_error(view.error)
        return
    if view.series is None:
        return

    render_kpi_cards(build_kpi_cards(view.series))

    for config in INDICATORS:
        renderer = PAGE_RENDERERS.get(config.indicator)
        if renderer is None:
            continue
        renderer(view.series.get(config.indicator))
