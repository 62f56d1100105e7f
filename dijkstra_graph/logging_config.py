"""Logging set-up driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> int:
    """Apply the observability settings to the root logger.

    Args:
        config: Optional override, defaults to ``get_config().observability``.

    Returns:
        The numeric log level that was applied.

    Raises:
        ConfigurationError: If the level name is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level!r}",
            setting_name="DG_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logging.basicConfig(level=level, format=config.format, force=True)
    return level
