"""
Reference documentation generation for the moddocs command tree.
"""

from .command import CommandDocRenderer, autogen_date
from .example import ExampleRenderer, indent_output
from .generator import DEFAULT_OUTPUT_DIR, DocsGenerator
from .registry import DEFAULT_FORMATS, FormatDescriptor, FormatRegistry
from .walker import TreeWalker, doc_basename

__all__ = [
    "DEFAULT_FORMATS",
    "DEFAULT_OUTPUT_DIR",
    "CommandDocRenderer",
    "DocsGenerator",
    "ExampleRenderer",
    "FormatDescriptor",
    "FormatRegistry",
    "TreeWalker",
    "autogen_date",
    "doc_basename",
    "indent_output",
]
