"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the ambient settings
of the project (logging and text rendering). Graph contents are never
configured: callers build them through the GraphStore API.

Configuration can be overridden via environment variables:
- DG_LOG_LEVEL=DEBUG
- DG_RENDER_COST_FORMAT=.2f
- DG_RENDER_PATH_SEPARATOR=" => "
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with DG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RenderConfig(BaseSettings):
    """Text rendering configuration.

    Environment variables prefixed with DG_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="DG_RENDER_")

    # None keeps full precision; set a format spec such as ".2f" to round
    cost_format: Optional[str] = None
    path_separator: str = " -> "


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.observability.level)
        print(config.render.cost_format)

    Environment variables prefixed with DG_.
    """

    model_config = SettingsConfigDict(env_prefix="DG_")

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
