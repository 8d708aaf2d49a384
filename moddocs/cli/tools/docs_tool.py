"""
Generator of the format reference documentation.

Writes one markdown page per output format command, each embedding the
output of that command for the example module.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from ...app.tools import Tool, ToolConfig
from ...app.traceable import Traceable
from ...docs import DEFAULT_OUTPUT_DIR, DocsGenerator
from ...exceptions import GenerationError
from ...format import RenderSettings


class DocsTool(Tool):
    """Generate the reference pages of the format commands."""

    def __init__(self, parent: Traceable | None = None):
        config = ToolConfig(
            name="docs",
            help_text="Generate format reference documentation",
            description=(
                "Generate a markdown page for every format command, with the "
                "output of the command for the example module embedded."
            ),
            hidden=True,
        )
        super().__init__(parent, config)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--output-dir",
            default=str(DEFAULT_OUTPUT_DIR),
            metavar="DIR",
            help="directory the pages are written to",
        )
        parser.add_argument(
            "--examples",
            default="examples",
            metavar="DIR",
            help="directory of the example module",
        )

    def run(self, **kwargs: Any) -> int:
        output_dir = Path(self.args.output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GenerationError(
                f"cannot create output directory: {e.strerror}", path=output_dir
            ) from e

        generator = DocsGenerator(
            self.app.name, RenderSettings().for_docs(), lg=self.lg
        )
        written = generator.generate(
            self.app.node(), output_dir, Path(self.args.examples)
        )
        self.lg.info(
            "generated documentation",
            extra={"pages": len(written), "dir": output_dir},
        )
        return 0
