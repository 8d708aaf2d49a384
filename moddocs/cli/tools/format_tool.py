"""
Commands that render a module in one output format.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from ...app.tools import Tool, ToolConfig
from ...app.traceable import Traceable
from ...format import (
    BaseFormatter,
    JSONFormatter,
    MarkdownDocumentFormatter,
    MarkdownTableFormatter,
    PrettyFormatter,
    XMLFormatter,
    YAMLFormatter,
)
from ...module import LoadOptions, load
from ..output import ConsoleOutput, OutputWriter
from ..settings import resolve_settings


class FormatTool(Tool):
    """
    Base class of the format commands.

    Subclasses set ``formatter`` and provide their ToolConfig; the command
    takes the module directory as its only positional argument.
    """

    formatter: type[BaseFormatter]

    def __init__(
        self,
        parent: Traceable | None = None,
        config: ToolConfig | None = None,
        out: OutputWriter | None = None,
    ):
        super().__init__(parent, config)
        self.out = out or ConsoleOutput()

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("path", metavar="PATH", help="path to the module directory")

    def run(self, **kwargs: Any) -> int:
        """Load the module, render it and print the result."""
        settings = resolve_settings(self.args, self.app.settings_config)
        path = Path(self.args.path)
        module = load(
            LoadOptions(
                path,
                sort_by_name=settings.sort_by_name,
                sort_by_required=settings.sort_by_required,
            )
        )
        self.lg.debug(
            "loaded module",
            extra={"path": path, "inputs": len(module.inputs)},
        )
        output = self.formatter(settings).render(module, settings)
        self.out.write(output.rstrip("\n"))
        return 0


class JSONTool(FormatTool):
    formatter = JSONFormatter

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="json",
            help_text="Generate JSON of inputs and outputs",
        )


class YAMLTool(FormatTool):
    formatter = YAMLFormatter

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="yaml",
            help_text="Generate YAML of inputs and outputs",
        )


class XMLTool(FormatTool):
    formatter = XMLFormatter

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="xml",
            help_text="Generate XML of inputs and outputs",
        )


class PrettyTool(FormatTool):
    """Colorized plain-text listing for the terminal."""

    formatter = PrettyFormatter

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="pretty",
            help_text="Generate colorized pretty of inputs and outputs",
        )

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        super().add_args(parser)
        parser.add_argument(
            "--no-color", action="store_true", help="do not colorize printed result"
        )


class MarkdownDocumentTool(FormatTool):
    formatter = MarkdownDocumentFormatter

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="document",
            aliases=["doc"],
            help_text="Generate Markdown document of inputs and outputs",
        )


class MarkdownTableTool(FormatTool):
    formatter = MarkdownTableFormatter

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="table",
            aliases=["tbl"],
            help_text="Generate Markdown tables of inputs and outputs",
        )


class MarkdownTool(Tool):
    """
    Groups the markdown layouts.

    The group itself renders nothing; its heading and escaping flags are
    inherited by both layouts.
    """

    def __init__(
        self, parent: Traceable | None = None, out: OutputWriter | None = None
    ):
        super().__init__(parent)
        self.add_tool(MarkdownDocumentTool(self, out=out))
        self.add_tool(MarkdownTableTool(self, out=out))

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="markdown",
            aliases=["md"],
            help_text="Generate Markdown of inputs and outputs",
        )

    def add_persistent_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--indent",
            type=int,
            default=None,
            metavar="N",
            help="indention level of Markdown sections [1, 2, 3, 4, 5] (default 2)",
        )
        parser.add_argument(
            "--no-escape",
            action="store_true",
            help="do not escape special characters",
        )
