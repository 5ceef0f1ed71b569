"""Tests for settings resolution and indicator metadata."""

from __future__ import annotations

import pytest

from kenya_dashboard.config import (
    DEFAULT_SETTINGS,
    INDICATOR_CONFIG,
    INDICATORS,
    get_setting,
    load_settings,
)
from kenya_dashboard.data.models import Indicator
from kenya_dashboard.ui.components.charts import CHART_BUILDERS


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LATENCY_SCALE", "CACHE_TTL", "LOG_LEVEL"):
        monkeypatch.delenv(f"KENYA_DASHBOARD_{name}", raising=False)


@pytest.mark.unit
class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings() == DEFAULT_SETTINGS

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KENYA_DASHBOARD_LATENCY_SCALE", "0.5")
        monkeypatch.setenv("KENYA_DASHBOARD_CACHE_TTL", "120")
        monkeypatch.setenv("KENYA_DASHBOARD_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.latency_scale == 0.5
        assert settings.cache_ttl_seconds == 120
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["fast", "-1"])
    def test_invalid_latency_falls_back(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("KENYA_DASHBOARD_LATENCY_SCALE", raw)
        assert load_settings().latency_scale == DEFAULT_SETTINGS.latency_scale

    def test_unknown_log_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KENYA_DASHBOARD_LOG_LEVEL", "chatty")
        assert load_settings().log_level == DEFAULT_SETTINGS.log_level


@pytest.mark.unit
def test_get_setting_prefers_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KENYA_DASHBOARD_TEST_VALUE", "from-env")
    assert get_setting("KENYA_DASHBOARD_TEST_VALUE", "default") == "from-env"


@pytest.mark.unit
def test_get_setting_default_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("KENYA_DASHBOARD_MISSING", raising=False)
    assert get_setting("KENYA_DASHBOARD_MISSING", "fallback") == "fallback"


@pytest.mark.unit
def test_every_indicator_configured_once() -> None:
    assert [config.indicator for config in INDICATORS] == list(Indicator)
    assert set(INDICATOR_CONFIG) == set(Indicator)
    for config in INDICATORS:
        assert config.chart_type in CHART_BUILDERS
        assert config.value_format in {"percent", "number"}
