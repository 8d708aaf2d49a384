"""
Constants for the logging system.

Format strings, rule widths and custom log level definitions.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    DATE_FORMAT: str = "%H:%M:%S"

    # Messages are padded to this width before extra fields are appended
    DEFAULT_RULE_WIDTH: int = 70
    MICRO_RULE_WIDTH: int = 74

    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    LEVEL_NAMES: dict[str, int | bool] = {
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
        "false": False,  # Special value to disable all logging
    }

    RESET: str = "\x1b[0m"


logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")
