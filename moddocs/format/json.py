"""
JSON formatter.
"""

import json

from ..module.model import Module
from .base import BaseFormatter, to_dict, visible
from .settings import RenderSettings


class JSONFormatter(BaseFormatter):
    """Renders the module as an indented JSON document."""

    def render(self, module: Module, settings: RenderSettings) -> str:
        data = to_dict(visible(module, settings))
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
