"""Environment-driven configuration."""

from __future__ import annotations

import logging
import os

from .events import Algorithm

__all__ = [
    "ConfigurationError",
    "ALGORITHM_ENV",
    "LOG_LEVEL_ENV",
    "DEFAULT_ALGORITHM",
    "resolve_default_algorithm",
    "resolve_log_level",
]

ALGORITHM_ENV = "SUNTIMES_ALGORITHM"
LOG_LEVEL_ENV = "SUNTIMES_LOG_LEVEL"
DEFAULT_ALGORITHM = Algorithm.noaa_cached


class ConfigurationError(RuntimeError):
    """Raised when the environment holds an unusable setting."""


def resolve_default_algorithm() -> Algorithm:
    """Return the algorithm named by ``SUNTIMES_ALGORITHM``, if any."""

    override = os.environ.get(ALGORITHM_ENV)
    if not override:
        return DEFAULT_ALGORITHM
    try:
        return Algorithm(override.strip().lower())
    except ValueError as exc:
        choices = ", ".join(algorithm.value for algorithm in Algorithm)
        raise ConfigurationError(
            f"{ALGORITHM_ENV} must be one of {choices}, got {override!r}"
        ) from exc


def resolve_log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"{LOG_LEVEL_ENV} is not a logging level: {name!r}")
    return level
