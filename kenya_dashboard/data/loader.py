"""
Concurrent loading of every indicator series into a single dashboard state.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import streamlit as st

from kenya_dashboard.config import load_settings
from kenya_dashboard.data.models import (
    DashboardSeries,
    Failed,
    Idle,
    Loaded,
    Loading,
    LoadState,
)
from kenya_dashboard.data.providers import PROVIDERS
from kenya_dashboard.data.sources import EconomicDataSource, SampleDataSource

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred while fetching data."


class AggregateLoader:
    """Fan out to every provider at once and join the results.

    The loader moves Idle -> Loading -> Loaded | Failed exactly once; the
    terminal state is kept for the lifetime of the instance. The first provider
    failure wins; the other providers still run to completion before the
    failure is reported, and their results are dropped. Providers are neither
    timed out nor cancelled, so a hung source keeps ``load`` waiting.
    """

    def __init__(self, source: Optional[EconomicDataSource] = None) -> None:
        self._source = source if source is not None else SampleDataSource()
        self._state: LoadState = Idle()

    @property
    def state(self) -> LoadState:
        return self._state

    def start(self) -> LoadState:
        if isinstance(self._state, Idle):
            self._state = Loading()
            logger.info("Loading %d indicator series", len(PROVIDERS))
        return self._state

    async def load(self) -> LoadState:
        if isinstance(self._state, (Loaded, Failed)):
            return self._state
        self.start()

        indicators = list(PROVIDERS)
        tasks = [
            asyncio.ensure_future(PROVIDERS[indicator](self._source)) for indicator in indicators
        ]
        try:
            results = await asyncio.gather(*tasks)
        except Exception as exc:
            message = str(exc) or DEFAULT_ERROR_MESSAGE
            logger.error("Indicator load failed: %s", message, exc_info=exc)
            await self._settle(tasks)
            self._state = Failed(message=message)
            return self._state

        series = DashboardSeries(
            **{indicator.value: result for indicator, result in zip(indicators, results)}
        )
        logger.info(
            "Loaded indicator series: %s",
            ", ".join(f"{indicator.value}={len(result)}" for indicator, result in zip(indicators, results)),
        )
        self._state = Loaded(series=series)
        return self._state

    @staticmethod
    async def _settle(tasks: List["asyncio.Future"]) -> None:
        # Remaining providers finish inside this loop, before asyncio.run tears it down
        pending = [task for task in tasks if not task.done()]
        if pending:
            await asyncio.wait(pending)
        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                logger.debug("Discarded provider error: %s", task.exception())


async def load_dashboard(source: Optional[EconomicDataSource] = None) -> LoadState:
    """Run a fresh loader to completion and return its terminal state."""
    return await AggregateLoader(source).load()


def load_data() -> LoadState:
    """Wrapper that resolves settings and calls the cached implementation."""
    settings = load_settings()
    return _load_data_impl(settings.latency_scale)


@st.cache_data(show_spinner=False, ttl=load_settings().cache_ttl_seconds)
def _load_data_impl(latency_scale: float) -> LoadState:
    """Load every series once per cache window.

    Cached by latency_scale; cleared by the sidebar refresh button.
    """
    return asyncio.run(load_dashboard(SampleDataSource(latency_scale=latency_scale)))


def clear_cache() -> None:
    _load_data_impl.clear()  # type: ignore[attr-defined]
