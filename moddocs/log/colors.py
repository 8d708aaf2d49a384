"""
Color management for console output.

Centralized ANSI color codes, shared by the log formatter and by the
pretty module formatter.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    # Basic ANSI color escape sequences (without the trailing "m")
    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    BLUE = "\x1b[34"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    WHITE = "\x1b[37"
    DEFAULT = "\x1b[38"

    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.CUSTOM_LEVELS["TRACE"]: "\x1b[38;5;244",
        logging.DEBUG: "\x1b[38;5;32",
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    _NAMES: dict[str, str] = {
        "red": RED,
        "green": GREEN,
        "yellow": YELLOW,
        "blue": BLUE,
        "magenta": MAGENTA,
        "cyan": CYAN,
        "white": WHITE,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str | None:
        """Get color for a log level, or None if the level has none."""
        return ColorManager.COLORS.get(level)

    @staticmethod
    def from_name(name: str) -> str | None:
        """Resolve a color name (e.g. "cyan") to its escape sequence."""
        return ColorManager._NAMES.get(name.lower())

    @staticmethod
    def colorize(text: str, color: str, bold: bool = False) -> str:
        """
        Wrap text in a color escape sequence and a reset.

        Args:
            text: Text to colorize
            color: Color escape sequence without the trailing "m"
            bold: Whether to render the text bold

        Returns:
            Colorized text
        """
        suffix = ";1m" if bold else "m"
        return f"{color}{suffix}{text}{ColorManager.RESET}"
