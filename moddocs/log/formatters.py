"""
Log formatter for console output.

Renders records as ``[HH:MM:SS,mmm] [L] message   [key:value] [name]`` with
optional ANSI colors per level.
"""

import logging
from datetime import datetime
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_value(value: Any) -> str:
    """Format an extra field value."""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, Exception):
        return value.__class__.__name__
    return str(value)


class LogFormatter(logging.Formatter):
    """
    Console log formatter with structured extra fields.

    Extra fields are sorted by key and padded to a fixed rule width so
    messages line up in a terminal.
    """

    def __init__(self, config: LogConfig):
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created)
        text = stamp.strftime(LogConstants.DATE_FORMAT)
        if self._config.micros:
            return f"{text},{stamp.microsecond:06d}"
        return f"{text},{stamp.microsecond // 1000:03d}"

    def _format_extra(self, record: logging.LogRecord) -> str:
        extra = getattr(record, EXTRA_ATTR, None)
        if not extra:
            return ""
        parts = [f"[{key}:{_format_value(extra[key])}]" for key in sorted(extra)]
        return " ".join(parts)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record.

        Args:
            record: Log record to format

        Returns:
            Formatted log line (with traceback lines when exc_info is set)
        """
        line = super().format(record)
        head, sep, tail = line.partition("\n")

        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        extra = self._format_extra(record)
        if extra:
            head += " " * max(1, rule - len(head)) + extra
        head += f" [{record.name}]"

        if self._config.colors:
            color = ColorManager.get_color_for_level(record.levelno)
            if color:
                head = ColorManager.colorize(head, color)
        return head + sep + tail
