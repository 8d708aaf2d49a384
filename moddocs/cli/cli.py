#!/usr/bin/env python3
"""
moddocs CLI - Generate documentation of a module's inputs and outputs.

Usage:
    moddocs json ./my-module/
    moddocs markdown table --indent 3 ./my-module/
    moddocs --sort-by-required pretty ./my-module/
"""

from __future__ import annotations

import argparse
import sys

from ..app import App
from .output import OutputWriter
from .tools import (
    CompletionTool,
    DocsTool,
    JSONTool,
    MarkdownTool,
    PrettyTool,
    XMLTool,
    YAMLTool,
)

# Format commands, in the order they are registered
_FORMAT_TOOLS = [JSONTool, MarkdownTool, PrettyTool, XMLTool, YAMLTool]


class ModdocsApp(App):
    """Root command: adds the section and sorting flags every format accepts."""

    def add_persistent_args(self, parser: argparse.ArgumentParser) -> None:
        super().add_persistent_args(parser)
        parser.add_argument(
            "--no-header", action="store_true", help="do not show module header"
        )
        parser.add_argument(
            "--no-inputs", action="store_true", help="do not show inputs"
        )
        parser.add_argument(
            "--no-outputs", action="store_true", help="do not show outputs"
        )
        parser.add_argument(
            "--no-providers", action="store_true", help="do not show providers"
        )
        parser.add_argument(
            "--no-requirements", action="store_true", help="do not show requirements"
        )
        parser.add_argument(
            "--no-sort", action="store_true", help="do not sort items"
        )
        parser.add_argument(
            "--sort-by-required",
            action="store_true",
            help="sort items by name and print required ones first",
        )


def build_app(out: OutputWriter | None = None) -> App:
    """Build the CLI application with all commands registered."""
    app = ModdocsApp(
        "moddocs",
        help_text="Generate documentation of a module's inputs and outputs",
        description=(
            "A utility to generate documentation from a module manifest "
            "in various output formats"
        ),
        example="moddocs json ./my-module/\nmoddocs markdown table ./my-module/",
    )
    for tool_cls in _FORMAT_TOOLS:
        app.add_tool(tool_cls(out=out))
    app.add_tool(CompletionTool(out=out))
    app.add_tool(DocsTool())
    return app


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the moddocs CLI."""
    return build_app().main(argv)


if __name__ == "__main__":
    sys.exit(main())
