"""
XML formatter.
"""

import xml.etree.ElementTree as ET
from typing import Any

from ..module.model import Module
from .base import BaseFormatter, value_repr, visible
from .settings import RenderSettings


def _child(parent: ET.Element, tag: str, text: Any = None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    if text is not None and text != "":
        element.text = str(text)
    return element


class XMLFormatter(BaseFormatter):
    """Renders the module as an XML document rooted at <module>."""

    def render(self, module: Module, settings: RenderSettings) -> str:
        module = visible(module, settings)
        root = ET.Element("module")
        _child(root, "header", module.header)

        inputs = _child(root, "inputs")
        for i in module.inputs:
            node = _child(inputs, "input")
            _child(node, "name", i.name)
            _child(node, "type", i.type)
            _child(node, "description", i.description)
            _child(node, "default", None if i.required else value_repr(i.default))
            _child(node, "required", str(i.required).lower())

        outputs = _child(root, "outputs")
        for o in module.outputs:
            node = _child(outputs, "output")
            _child(node, "name", o.name)
            _child(node, "description", o.description)

        providers = _child(root, "providers")
        for p in module.providers:
            node = _child(providers, "provider")
            _child(node, "name", p.name)
            _child(node, "alias", p.alias)
            _child(node, "version", p.version)

        requirements = _child(root, "requirements")
        for r in module.requirements:
            node = _child(requirements, "requirement")
            _child(node, "name", r.name)
            _child(node, "version", r.version)

        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="unicode")
