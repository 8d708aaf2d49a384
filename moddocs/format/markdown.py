"""
Markdown formatters: table and document layouts.
"""

from __future__ import annotations

from io import StringIO

from ..exceptions import FormatterError
from ..module.model import Input, Module
from .base import BaseFormatter, is_multiline_value, value_repr, visible
from .settings import RenderSettings

_ESCAPES = (("_", "\\_"), ("*", "\\*"), ("|", "\\|"))


def escape(text: str, settings: RenderSettings) -> str:
    """Escape markdown emphasis and table characters when escaping is enabled."""
    if not settings.escape_characters:
        return text
    for char, replacement in _ESCAPES:
        text = text.replace(char, replacement)
    return text


def _cell(text: str, settings: RenderSettings) -> str:
    """Make text safe for a single table cell."""
    text = escape(text, settings)
    if not settings.escape_characters:
        # a raw pipe ends the cell
        text = text.replace("|", "\\|")
    return "<br>".join(line.strip() for line in text.splitlines())


def _code(text: str) -> str:
    """Inline code span on a single line."""
    return "`" + " ".join(line.strip() for line in text.splitlines()) + "`"


class _MarkdownFormatter(BaseFormatter):
    """Shared heading and header handling for the markdown layouts."""

    def _heading(self, settings: RenderSettings, extra: int = 0) -> str:
        level = settings.indent_level + extra
        return "#" * level

    def _check(self, settings: RenderSettings) -> None:
        if not 1 <= settings.indent_level <= 5:
            raise FormatterError(
                "markdown indent level must be between 1 and 5",
                indent=settings.indent_level,
            )

    def render(self, module: Module, settings: RenderSettings) -> str:
        self._check(settings)
        module = visible(module, settings)
        out = StringIO()
        if module.header:
            out.write(module.header + "\n\n")
        self._write_sections(out, module, settings)
        return out.getvalue().rstrip("\n") + "\n"

    def _write_sections(
        self, out: StringIO, module: Module, settings: RenderSettings
    ) -> None:
        raise NotImplementedError


class MarkdownTableFormatter(_MarkdownFormatter):
    """Renders each module section as a markdown table."""

    def _write_sections(
        self, out: StringIO, module: Module, settings: RenderSettings
    ) -> None:
        h = self._heading(settings)

        if settings.show_requirements:
            out.write(f"{h} Requirements\n\n")
            if module.requirements:
                out.write("| Name | Version |\n|------|---------|\n")
                for r in module.requirements:
                    out.write(f"| {_cell(r.name, settings)} | {r.version or 'n/a'} |\n")
            else:
                out.write("No requirements.\n")
            out.write("\n")

        if settings.show_providers:
            out.write(f"{h} Providers\n\n")
            if module.providers:
                out.write("| Name | Version |\n|------|---------|\n")
                for p in module.providers:
                    out.write(
                        f"| {_cell(p.full_name, settings)} | {p.version or 'n/a'} |\n"
                    )
            else:
                out.write("No providers.\n")
            out.write("\n")

        if settings.show_inputs:
            out.write(f"{h} Inputs\n\n")
            if module.inputs:
                out.write(
                    "| Name | Description | Type | Default | Required |\n"
                    "|------|-------------|------|---------|:--------:|\n"
                )
                for i in module.inputs:
                    default = "n/a" if i.required else _code(value_repr(i.default))
                    out.write(
                        f"| {_cell(i.name, settings)} "
                        f"| {_cell(i.description, settings) or 'n/a'} "
                        f"| {_code(i.type)} | {default} "
                        f"| {'yes' if i.required else 'no'} |\n"
                    )
            else:
                out.write("No inputs.\n")
            out.write("\n")

        if settings.show_outputs:
            out.write(f"{h} Outputs\n\n")
            if module.outputs:
                out.write("| Name | Description |\n|------|-------------|\n")
                for o in module.outputs:
                    out.write(
                        f"| {_cell(o.name, settings)} "
                        f"| {_cell(o.description, settings) or 'n/a'} |\n"
                    )
            else:
                out.write("No outputs.\n")
            out.write("\n")


class MarkdownDocumentFormatter(_MarkdownFormatter):
    """Renders the module as a markdown document with one heading per entry."""

    def _write_input(
        self, out: StringIO, item: Input, settings: RenderSettings
    ) -> None:
        out.write(f"{self._heading(settings, 1)} {escape(item.name, settings)}\n\n")
        out.write(f"Description: {escape(item.description, settings) or 'n/a'}\n\n")

        if "\n" in item.type:
            out.write(f"Type:\n\n```hcl\n{item.type}\n```\n\n")
        else:
            out.write(f"Type: `{item.type}`\n\n")

        if item.required:
            return
        if is_multiline_value(item.default):
            out.write(f"Default:\n\n```json\n{value_repr(item.default, indent=2)}\n```\n\n")
        else:
            out.write(f"Default: `{value_repr(item.default)}`\n\n")

    def _write_list(self, out: StringIO, entries: list[tuple[str, str]]) -> None:
        for name, version in entries:
            out.write(f"- {name} ({version})\n" if version else f"- {name}\n")
        out.write("\n")

    def _write_inputs(
        self, out: StringIO, module: Module, settings: RenderSettings
    ) -> None:
        h = self._heading(settings)
        out.write(f"{h} Required Inputs\n\n")
        if module.required_inputs:
            out.write("The following input variables are required:\n\n")
            for i in module.required_inputs:
                self._write_input(out, i, settings)
        else:
            out.write("No required inputs.\n\n")

        out.write(f"{h} Optional Inputs\n\n")
        if module.optional_inputs:
            out.write(
                "The following input variables are optional (have default values):\n\n"
            )
            for i in module.optional_inputs:
                self._write_input(out, i, settings)
        else:
            out.write("No optional inputs.\n\n")

    def _write_sections(
        self, out: StringIO, module: Module, settings: RenderSettings
    ) -> None:
        h = self._heading(settings)

        if settings.show_requirements:
            out.write(f"{h} Requirements\n\n")
            if module.requirements:
                out.write("The following requirements are needed by this module:\n\n")
                self._write_list(
                    out,
                    [(escape(r.name, settings), r.version) for r in module.requirements],
                )
            else:
                out.write("No requirements.\n\n")

        if settings.show_providers:
            out.write(f"{h} Providers\n\n")
            if module.providers:
                out.write("The following providers are used by this module:\n\n")
                self._write_list(
                    out,
                    [(escape(p.full_name, settings), p.version) for p in module.providers],
                )
            else:
                out.write("No providers.\n\n")

        if settings.show_inputs:
            self._write_inputs(out, module, settings)

        if settings.show_outputs:
            out.write(f"{h} Outputs\n\n")
            if module.outputs:
                out.write("The following outputs are exported:\n\n")
                for o in module.outputs:
                    out.write(f"{self._heading(settings, 1)} {escape(o.name, settings)}\n\n")
                    out.write(
                        f"Description: {escape(o.description, settings) or 'n/a'}\n\n"
                    )
            else:
                out.write("No outputs.\n\n")
