"""
Pretty formatter: colored plain text for terminals.
"""

from ..log.colors import ColorManager
from ..module.model import Module
from .base import BaseFormatter, value_repr, visible
from .settings import RenderSettings


class PrettyFormatter(BaseFormatter):
    """
    Renders the module as plain text blocks, one per entry.

    Example output (colors omitted):

        provider.aws (>= 2.15.0)

        input.region ("us-east-1")
        AWS region to deploy into.
    """

    def _paint(self, text: str, color: str, settings: RenderSettings) -> str:
        if not settings.show_color:
            return text
        return ColorManager.colorize(text, color)

    def _block(self, lines: list[str]) -> str:
        return "\n".join(lines)

    def render(self, module: Module, settings: RenderSettings) -> str:
        module = visible(module, settings)
        blocks: list[str] = []

        if module.header:
            blocks.append(module.header)

        if module.providers:
            blocks.append(
                self._block(
                    [
                        self._paint(f"provider.{p.full_name}", ColorManager.CYAN, settings)
                        + (f" ({p.version})" if p.version else "")
                        for p in module.providers
                    ]
                )
            )

        if module.requirements:
            blocks.append(
                self._block(
                    [
                        self._paint(f"requirement.{r.name}", ColorManager.CYAN, settings)
                        + (f" ({r.version})" if r.version else "")
                        for r in module.requirements
                    ]
                )
            )

        for i in module.inputs:
            if i.required:
                suffix = self._paint("(required)", ColorManager.RED, settings)
            else:
                suffix = self._paint(f"({value_repr(i.default)})", ColorManager.GREEN, settings)
            name = self._paint(f"input.{i.name}", ColorManager.YELLOW, settings)
            blocks.append(f"{name} {suffix}\n{i.description or 'n/a'}")

        for o in module.outputs:
            name = self._paint(f"output.{o.name}", ColorManager.MAGENTA, settings)
            blocks.append(f"{name}\n{o.description or 'n/a'}")

        return "\n\n".join(blocks) + "\n"
