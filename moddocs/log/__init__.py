"""
Logging for moddocs.

Provides a logger with structured extra fields, a console formatter and a
factory for root and derived loggers.

Example:
    from moddocs.log import LogConfig, LoggerFactory

    lg = LoggerFactory.create_root(LogConfig.from_params("debug"))
    lg.debug("loading module", extra={"path": "./examples"})
"""

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

__all__ = [
    "ColorManager",
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
