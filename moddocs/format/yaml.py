"""
YAML formatter.
"""

from typing import Any

import yaml  # type: ignore[import-untyped]

from ..module.model import Module
from .base import BaseFormatter, to_dict, visible
from .settings import RenderSettings


class _Dumper(yaml.SafeDumper):
    """Safe dumper writing multi-line strings as literal blocks."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> Any:
        # Indent sequences under their parent key
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, value: str) -> Any:
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_Dumper.add_representer(str, _represent_str)


class YAMLFormatter(BaseFormatter):
    """Renders the module as a YAML document, keeping key order."""

    def render(self, module: Module, settings: RenderSettings) -> str:
        data = to_dict(visible(module, settings))
        return yaml.dump(
            data,
            Dumper=_Dumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        ).rstrip("\n")
