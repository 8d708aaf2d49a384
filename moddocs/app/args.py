"""
Argument parsing helpers.
"""

import argparse
from typing import Any


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that appends default values to help text.

    Defaults that are suppressed or None are not shown.
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        if action.default is not argparse.SUPPRESS and action.default is not None:
            return help_text + f" (default: {action.default})"
        return help_text


class SuppressDefaultsParser:
    """
    Wrapper that registers arguments without defaults.

    Used to re-register an ancestor's persistent flags on a descendant
    parser: the flag is accepted after the subcommand name, but the
    ancestor's default stays the value seen when the flag is absent.
    """

    def __init__(self, parser: argparse.ArgumentParser | Any):
        self._parser = parser

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        kwargs["default"] = argparse.SUPPRESS
        return self._parser.add_argument(*args, **kwargs)

    def add_argument_group(self, *args: Any, **kwargs: Any) -> "SuppressDefaultsParser":
        return SuppressDefaultsParser(self._parser.add_argument_group(*args, **kwargs))

    def add_mutually_exclusive_group(
        self, *args: Any, **kwargs: Any
    ) -> "SuppressDefaultsParser":
        return SuppressDefaultsParser(
            self._parser.add_mutually_exclusive_group(*args, **kwargs)
        )

    def __getattr__(self, name: str) -> Any:
        return getattr(self._parser, name)
