"""Application settings.

Values come from environment variables and may be overridden by CLI
options.  Reading the environment happens once, in
:meth:`Settings.from_env`; the resulting object is passed explicitly to
whatever needs it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from marina_ledger.core.inventory import DEFAULT_CAPACITY
from marina_ledger.exceptions import ConfigError

ENV_CAPACITY: str = "MARINA_LEDGER_CAPACITY"
ENV_LOG_LEVEL: str = "MARINA_LEDGER_LOG_LEVEL"

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration."""

    capacity: int = DEFAULT_CAPACITY
    """Maximum number of boats held in the inventory."""

    log_level: str = "WARNING"
    """Name of the stdlib logging level."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (``os.environ`` by default).

        Raises
        ------
        ConfigError
            When a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        raw_capacity = env.get(ENV_CAPACITY)
        if raw_capacity:
            settings = settings.with_capacity(_parse_capacity(raw_capacity, source=ENV_CAPACITY))

        raw_level = env.get(ENV_LOG_LEVEL)
        if raw_level:
            settings = settings.with_log_level(raw_level, source=ENV_LOG_LEVEL)

        return settings

    def with_capacity(self, capacity: int) -> Settings:
        if capacity <= 0:
            raise ConfigError(f"Capacity must be a positive number, got {capacity}.")
        return replace(self, capacity=capacity)

    def with_log_level(self, level: str, *, source: str = "--log-level") -> Settings:
        normalized = level.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level for {source}: {level!r}",
                hint=f"Use one of: {', '.join(_LOG_LEVELS)}",
            )
        return replace(self, log_level=normalized)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_capacity(raw: str, *, source: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ConfigError(
            f"Invalid capacity for {source}: {raw!r}",
            hint="Capacity is a whole number of boats, e.g. 120.",
        ) from exc
    return value
