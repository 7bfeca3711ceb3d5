"""Library configuration: logging level and format, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
]

_LOG_FORMATS = ('json', 'console')


@dataclass(frozen=True)
class Config:
    """Configuration for fallible's ambient logging.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON when True, console output when False.
    """

    log_level: str | None = None
    json_logs: bool = True

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from FALLIBLE_LOG_LEVEL and FALLIBLE_LOG_FORMAT."""
        level = os.environ.get('FALLIBLE_LOG_LEVEL', '').strip() or None
        log_format = os.environ.get('FALLIBLE_LOG_FORMAT', 'json').strip().lower()
        if log_format not in _LOG_FORMATS:
            logging.warning("Unknown FALLIBLE_LOG_FORMAT value '%s', defaulting to json", log_format)
            log_format = 'json'
        return cls(log_level=level.upper() if level else None, json_logs=log_format == 'json')


# Set by init()
_config: Config | None = None


def init(config: Config | None = None) -> Config:
    """Install a configuration and configure logging if a level is set.

    Args:
        config: Configuration to install. Read from the environment if None.

    Returns:
        The installed Config.
    """
    global _config  # noqa: PLW0603
    _config = config if config is not None else Config.from_env()
    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)
    return _config


def get_config() -> Config:
    """Return the installed Config, or one read from the environment."""
    if _config is None:
        return Config.from_env()
    return _config
