"""
Factory for creating and configuring loggers.
"""

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create a root logger writing to stderr (or the given stream).

        Stdout is reserved for command output, so logs never mix with it.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("generated", extra={"file": "json.md"})
            [12:34:56,789] [I] generated        [file:json.md] [/]
        """
        return LoggerFactory.create("/", config, stream=stream)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        stream: TextIO | None = None,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Create a standalone logger with its own console handler.

        Args:
            name: Logger name
            config: Logger configuration
            stream: Output stream (defaults to sys.stderr)
            extra: Pre-populated extra fields to include in all log records

        Returns:
            Configured logger instance
        """
        logger = Logger(name, config, extra=extra)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(logger.level)
        handler.setFormatter(LogFormatter(config))
        logger.addHandler(handler)
        logger.propagate = False
        return logger

    @staticmethod
    def derive(
        parent: Logger, name: str, extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Derive a child logger that shares the handlers of the parent's root.

        Example:
            >>> docs_lg = LoggerFactory.derive(root_lg, "docs")
            >>> docs_lg.name
            '/docs'
        """
        base = parent.name.rstrip("/")
        merged = dict(parent._extra)
        if extra:
            merged.update(extra)
        child = Logger(f"{base}/{name}", parent.config, extra=merged)
        child._root_logger = parent._root_logger or parent
        child.propagate = False
        return child
