"""Tests for settings loading and logging set-up."""

import logging

import pytest

from dijkstra_graph.config import (
    AppConfig,
    ObservabilityConfig,
    RenderConfig,
    get_config,
    reset_config,
)
from dijkstra_graph.domain.errors import ConfigurationError
from dijkstra_graph.logging_config import configure_logging


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.observability.level == "INFO"
    assert config.render.cost_format is None
    assert config.render.path_separator == " -> "


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DG_RENDER_COST_FORMAT", ".2f")

    config = get_config()

    assert config.observability.level == "DEBUG"
    assert config.render.cost_format == ".2f"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reset_config_reloads(monkeypatch):
    first = get_config()
    monkeypatch.setenv("DG_RENDER_PATH_SEPARATOR", " => ")
    reset_config()

    second = get_config()

    assert second is not first
    assert second.render.path_separator == " => "


def test_configure_logging_applies_level():
    level = configure_logging(ObservabilityConfig(level="warning"))

    assert level == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as exc_info:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert exc_info.value.setting_name == "DG_LOG_LEVEL"


def test_render_config_is_independent():
    assert RenderConfig(cost_format=".1f").cost_format == ".1f"
