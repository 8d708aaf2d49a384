"""
Formatter contract and shared helpers.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Protocol

from ..module.model import Module
from .settings import RenderSettings


class Formatter(Protocol):
    """Renders a module into text."""

    def render(self, module: Module, settings: RenderSettings) -> str:
        """Render the module, raising FormatterError on failure."""
        ...


class BaseFormatter:
    """Common base for formatters: keeps the construction settings."""

    def __init__(self, settings: RenderSettings | None = None):
        self.settings = settings or RenderSettings()

    def render(self, module: Module, settings: RenderSettings) -> str:
        raise NotImplementedError


def visible(module: Module, settings: RenderSettings) -> Module:
    """Return the module with the sections hidden by the settings emptied."""
    return dataclasses.replace(
        module,
        header=module.header if settings.show_header else "",
        requirements=module.requirements if settings.show_requirements else (),
        providers=module.providers if settings.show_providers else (),
        inputs=module.inputs if settings.show_inputs else (),
        outputs=module.outputs if settings.show_outputs else (),
    )


def _or_none(text: str) -> str | None:
    return text or None


def to_dict(module: Module) -> dict[str, Any]:
    """Structured representation shared by the JSON and YAML formatters."""
    return {
        "header": module.header,
        "inputs": [
            {
                "name": i.name,
                "type": i.type,
                "description": _or_none(i.description),
                "default": i.default,
                "required": i.required,
            }
            for i in module.inputs
        ],
        "outputs": [
            {"name": o.name, "description": _or_none(o.description)}
            for o in module.outputs
        ],
        "providers": [
            {"name": p.name, "alias": _or_none(p.alias), "version": _or_none(p.version)}
            for p in module.providers
        ],
        "requirements": [
            {"name": r.name, "version": _or_none(r.version)}
            for r in module.requirements
        ],
    }


def value_repr(value: Any, indent: int | None = None) -> str:
    """Render a default value the way it would be written in JSON."""
    return json.dumps(value, indent=indent, ensure_ascii=False, default=str)


def is_multiline_value(value: Any) -> bool:
    """True for non-empty maps and lists, rendered as indented blocks."""
    return isinstance(value, (dict, list)) and len(value) > 0
