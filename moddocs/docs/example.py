"""
Embedded example rendering.

Produces the "### Example" section of a command page: the shell command that
runs the format against the examples module, followed by the formatter's
actual output indented as a markdown code block.
"""

from __future__ import annotations

from io import StringIO

from ..exceptions import FormatterError
from ..format import RenderSettings
from ..module.model import Module
from .registry import FormatRegistry

INDENT = "    "


def indent_output(output: str) -> str:
    """
    Indent formatter output as a markdown code block.

    Non-blank lines get four leading spaces, blank lines stay empty so the
    block has no whitespace-only lines. Every line ends with a newline.
    """
    buf = StringIO()
    for line in output.split("\n"):
        if line == "":
            buf.write("\n")
        else:
            buf.write(f"{INDENT}{line}\n")
    return buf.getvalue()


class ExampleRenderer:
    """
    Renders example sections for command pages.

    Example:
        renderer = ExampleRenderer(FormatRegistry("moddocs"))
        block = renderer.render("moddocs json", module, settings)
    """

    def __init__(
        self,
        registry: FormatRegistry,
        examples_ref: str = "./examples/",
        examples_link: str = "/examples/",
    ):
        """
        Initialize the renderer.

        Args:
            registry: Formatter lookup
            examples_ref: Module path used in the illustrative shell command
            examples_link: Link target of the examples module in the prose
        """
        self.registry = registry
        self.examples_ref = examples_ref
        self.examples_link = examples_link

    def shell_command(self, identifier: str) -> str:
        """The command line that produces the embedded output."""
        return f"{identifier}{self.registry.extra_flags(identifier)} {self.examples_ref}"

    def _run(self, identifier: str, model: Module, settings: RenderSettings) -> str | None:
        formatter = self.registry.resolve(identifier, settings)
        if formatter is None:
            return None
        try:
            return formatter.render(model, settings)
        except FormatterError:
            raise
        except Exception as e:
            raise FormatterError(
                f"formatter failed: {e}", format=self.registry.normalize(identifier)
            ) from e

    def render(self, identifier: str, model: Module, settings: RenderSettings) -> str:
        """
        Render the example section for a command.

        Args:
            identifier: Full command path, e.g. "moddocs markdown table"
            model: Example module
            settings: Render settings for the formatter

        Returns:
            Markdown text; without embedded output when the identifier has
            no formatter

        Raises:
            FormatterError: If the formatter fails
        """
        output = self._run(identifier, model, settings)

        buf = StringIO()
        buf.write("### Example\n\n")
        buf.write(f"Given the [`examples`]({self.examples_link}) module:\n\n")
        buf.write("```shell\n")
        buf.write(self.shell_command(identifier) + "\n")
        buf.write("```\n\n")
        buf.write("generates the following output:\n\n")
        if output is not None:
            buf.write(indent_output(output))
        buf.write("\n\n")
        return buf.getvalue()
