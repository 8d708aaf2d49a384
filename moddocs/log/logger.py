"""
Logger class for the logging system.

Extends the standard logger with structured extra fields, a TRACE level and
derived "view" loggers that share the handlers of their root.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

EXTRA_ATTR = "__moddocs__extra"


class Logger(logging.Logger):
    """
    Enhanced logger with structured extra fields.

    Extra fields passed as ``extra={...}`` are kept together on the record so
    the formatter can render them as ``[key:value]`` pairs after the message.
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            config: Logger configuration (defaults to info level)
            extra: Pre-populated extra fields to include in all log records
        """
        if config is None:
            config = LogConfig.from_params("info")

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = extra or {}
        self._root_logger: Logger | None = None

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record with extra fields kept in a single attribute."""
        merged = self._extra.copy()
        if extra:
            merged.update(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        setattr(record, EXTRA_ATTR, merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a TRACE level message (more verbose than DEBUG)."""
        level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if not self._logging_disabled and self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)

    def callHandlers(self, record: logging.LogRecord) -> None:
        """
        Pass a record to all relevant handlers.

        Derived loggers delegate to the root logger's handlers instead of
        owning any themselves.
        """
        if self._root_logger is not None:
            for handler in self._root_logger.handlers:
                if record.levelno >= handler.level:
                    handler.handle(record)
        else:
            super().callHandlers(record)
