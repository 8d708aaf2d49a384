"""
Markdown page rendering for a single command.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from io import StringIO

from ..app.tools.node import CommandNode
from ..format import RenderSettings
from ..module.model import Module
from .example import ExampleRenderer

_MONTHS = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()


def autogen_date(day: date) -> str:
    """Format a date as "2-Jan-2006" (no zero padding, locale independent)."""
    return f"{day.day}-{_MONTHS[day.month - 1]}-{day.year}"


class CommandDocRenderer:
    """
    Renders the markdown page of one command.

    The page is built in memory; nothing is written to disk here.
    """

    def __init__(
        self,
        examples: ExampleRenderer,
        model: Module,
        settings: RenderSettings,
        tool_name: str,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize the renderer.

        Args:
            examples: Renderer for the embedded example section
            model: Example module shared by every page
            settings: Settings for every embedded formatter run
            tool_name: Name shown in the auto-generated footer
            today: Clock for the footer date
        """
        self.examples = examples
        self.model = model
        self.settings = settings
        self.tool_name = tool_name
        self.today = today

    def _write_options(self, buf: StringIO, node: CommandNode) -> None:
        if node.own_flags.has_available_flags():
            buf.write("### Options\n\n```\n")
            buf.write(node.own_flags.print_defaults())
            buf.write("```\n\n")

        if node.inherited_flags.has_available_flags():
            buf.write("### Options inherited from parent commands\n\n```\n")
            buf.write(node.inherited_flags.print_defaults())
            buf.write("```\n\n")

    def render(self, node: CommandNode) -> str:
        """
        Render a command page.

        Raises:
            FormatterError: If the embedded example fails to render
        """
        buf = StringIO()
        name = node.command_path

        buf.write(f"## {name}\n\n")
        buf.write(f"{node.short}\n\n")
        buf.write("### Synopsis\n\n")
        buf.write(f"{node.long_description}\n\n")

        if node.runnable:
            buf.write(f"```\n{node.usage}\n```\n\n")

        if node.example:
            buf.write("### Examples\n\n")
            buf.write(f"```\n{node.example}\n```\n\n")

        self._write_options(buf, node)

        buf.write(self.examples.render(name, self.model, self.settings))

        if not node.disable_autogen_tag:
            buf.write(
                f"###### Auto generated by {self.tool_name} on {autogen_date(self.today())}\n"
            )
        return buf.getvalue()
