"""
Module formatters.

Each formatter is constructed from RenderSettings and exposes
``render(module, settings) -> str``.

Example:
    from moddocs.format import JSONFormatter, RenderSettings

    settings = RenderSettings(show_color=False)
    print(JSONFormatter(settings).render(module, settings))
"""

from .base import BaseFormatter, Formatter
from .json import JSONFormatter
from .markdown import MarkdownDocumentFormatter, MarkdownTableFormatter
from .pretty import PrettyFormatter
from .settings import RenderSettings
from .xml import XMLFormatter
from .yaml import YAMLFormatter

__all__ = [
    "BaseFormatter",
    "Formatter",
    "JSONFormatter",
    "MarkdownDocumentFormatter",
    "MarkdownTableFormatter",
    "PrettyFormatter",
    "RenderSettings",
    "XMLFormatter",
    "YAMLFormatter",
]
