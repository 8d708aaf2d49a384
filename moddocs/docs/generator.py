"""
Documentation generation for the CLI's output formats.

Loads the example module once, then walks the command tree and writes a
markdown page per documentable command with the output of that command
embedded as an example.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date
from pathlib import Path

from ..app.tools.node import CommandNode
from ..format import RenderSettings
from ..log import Logger
from ..module import LoadOptions, Module
from ..module import load as load_module
from .command import CommandDocRenderer
from .example import ExampleRenderer
from .registry import DEFAULT_FORMATS, FormatDescriptor, FormatRegistry
from .walker import TreeWalker

DEFAULT_OUTPUT_DIR = Path("docs/formats")


class DocsGenerator:
    """
    Generates the format reference pages.

    Example:
        generator = DocsGenerator("moddocs", RenderSettings().for_docs(), lg=lg)
        paths = generator.generate(app.node(), Path("docs/formats"), Path("examples"))
    """

    def __init__(
        self,
        root_name: str,
        settings: RenderSettings,
        formats: Iterable[FormatDescriptor] = DEFAULT_FORMATS,
        examples_ref: str = "./examples/",
        tool_name: str | None = None,
        today: Callable[[], date] = date.today,
        lg: Logger | None = None,
    ):
        """
        Initialize the generator.

        Args:
            root_name: Name of the root command
            settings: Settings every embedded formatter run uses
            formats: Formats with embeddable output
            examples_ref: Module path shown in the example shell commands
            tool_name: Name in the page footers (defaults to root_name)
            today: Clock for the page footers
            lg: Logger for progress messages
        """
        self.root_name = root_name
        self.settings = settings
        self.registry = FormatRegistry(root_name, formats)
        self.examples = ExampleRenderer(self.registry, examples_ref)
        self.tool_name = tool_name or root_name
        self.today = today
        self.lg = lg

    def load_model(self, examples_dir: Path) -> Module:
        """
        Load the example module.

        Raises:
            LoaderError: If the module cannot be loaded
        """
        return load_module(
            LoadOptions(
                path=examples_dir,
                sort_by_name=self.settings.sort_by_name,
                sort_by_required=self.settings.sort_by_required,
            )
        )

    def generate(
        self, root: CommandNode, output_dir: Path, examples_dir: Path
    ) -> list[Path]:
        """
        Write the pages of every documentable command below root.

        The example module is loaded before anything is written. The root
        command itself gets no page.

        Args:
            root: Command tree snapshot
            output_dir: Existing output directory
            examples_dir: Directory of the example module

        Returns:
            Paths of the written pages

        Raises:
            LoaderError: If the example module cannot be loaded
            FormatterError: If an embedded example fails to render
            GenerationError: If a page cannot be written
        """
        model = self.load_model(examples_dir)
        renderer = CommandDocRenderer(
            self.examples, model, self.settings, self.tool_name, self.today
        )
        walker = TreeWalker(renderer, self.root_name, self.lg)

        written: list[Path] = []
        for child in root.children:
            if not child.is_documentable:
                continue
            written.extend(walker.generate(child, output_dir))
        return written
