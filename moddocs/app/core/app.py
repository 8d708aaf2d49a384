"""
Core app class for the command-line application.

The App is the root command: it owns the root argument parser, loads the
configuration, creates the root logger and dispatches to the selected
subcommand.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from ...config import Config
from ...exceptions import ConfigError, ModdocsError
from ...log import LogConfig, LogError, Logger, LoggerFactory
from ..args import DefaultsHelpFormatter
from ..tools.base import Tool, ToolConfig


class App(Tool):
    """
    Root command of a CLI application.

    Example:
        app = App("moddocs", help_text="Generate module documentation")
        app.add_tool(JSONTool())
        sys.exit(app.main())
    """

    def __init__(
        self,
        name: str,
        help_text: str = "",
        description: str = "",
        example: str = "",
    ):
        """
        Initialize the app.

        Args:
            name: Program name, also the root of every command path
            help_text: One-line summary
            description: Long description
            example: Example invocations shown in help and docs
        """
        super().__init__(
            None,
            ToolConfig(
                name=name,
                help_text=help_text,
                description=description,
                example=example,
            ),
        )
        self.settings_config: Config = Config(enable_env_overrides=False)
        self._parsed_args: argparse.Namespace | None = None

    @property
    def args(self) -> argparse.Namespace:
        """Parsed command-line arguments (empty before parse_args())."""
        if self._parsed_args is None:
            return argparse.Namespace()
        return self._parsed_args

    def add_persistent_args(self, parser: argparse.ArgumentParser) -> None:
        """Flags accepted by every command."""
        parser.add_argument(
            "-l",
            "--log-level",
            default=None,
            metavar="LEVEL",
            help="log level: error, warning, info, debug, trace or false",
        )
        parser.add_argument(
            "--config",
            default=None,
            metavar="FILE",
            help="config file (default: ./.moddocs.yml when present)",
        )

    def create_args(self) -> argparse.ArgumentParser:
        """Create the root parser and the parsers of every subcommand."""
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.config.description or self.config.help_text,
            epilog=self.config.example or None,
            formatter_class=DefaultsHelpFormatter,
        )
        self.set_args(parser)
        return parser

    def parse_args(self, argv: list[str] | None = None) -> argparse.Namespace:
        """Build the parsers (once) and parse the command line."""
        parser = self._arg_prs or self.create_args()
        self._parsed_args = parser.parse_args(argv)
        return self._parsed_args

    def load_config(self) -> Config:
        """Load the configuration named by --config, or discover one."""
        self.settings_config = Config.discover(getattr(self.args, "config", None))
        return self.settings_config

    def setup_lg(self) -> None:
        """Create the root logger from config, with --log-level taking precedence."""
        level = getattr(self.args, "log_level", None)
        try:
            log_config = LogConfig.from_config(self.settings_config.section("logging"))
            if level is not None:
                log_config = LogConfig.from_params(
                    level, micros=log_config.micros, colors=log_config.colors
                )
        except LogError as e:
            raise ConfigError(str(e)) from e
        self._logger = LoggerFactory.create_root(log_config)

    def _report(self, error: Exception) -> None:
        if isinstance(self._logger, Logger):
            self._logger.error(str(error), extra={"error": error.__class__.__name__})
        else:
            print(f"{self.name}: error: {error}", file=sys.stderr)

    def main(self, argv: list[str] | None = None, **kwargs: Any) -> int:
        """
        Run the application.

        Returns:
            int: Exit code (1 when a moddocs error aborted the run)
        """
        self.parse_args(argv)
        try:
            self.load_config()
            self.setup(**kwargs)
            return self.run(**kwargs)
        except ModdocsError as e:
            self._report(e)
            return 1
