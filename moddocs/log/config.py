"""
Configuration classes for the logging system.

Immutable configuration for loggers and formatters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable logger configuration.

    Holds the level (False disables logging), microsecond precision and
    color settings of a root logger and the loggers derived from it.
    """

    level: int | bool = logging.INFO
    micros: bool = False
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, str):
            name = level.lower()
            if name.isnumeric():
                return int(name)
            if name in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[name]
            raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        micros: bool = False,
        colors: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            micros: Whether to show microsecond precision
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(level=cls._resolve_level(level), micros=micros, colors=colors)

    @classmethod
    def from_config(cls, section: dict[str, Any]) -> LogConfig:
        """
        Create LogConfig from the "logging" section of a configuration.

        Example:
            config = Config.load(Path(".moddocs.yml"))
            log_config = LogConfig.from_config(config.get("logging", {}))
        """
        level = section.get("level", "info")
        colors = section.get("colors", True)
        if isinstance(colors, dict):
            colors = colors.get("enabled", True)
        return cls.from_params(
            level=level,
            micros=bool(section.get("micros", False)),
            colors=bool(colors),
        )
