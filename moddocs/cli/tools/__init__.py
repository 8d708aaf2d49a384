"""
Commands of the moddocs CLI.
"""

from .completion_tool import CompletionTool, bash_completion
from .docs_tool import DocsTool
from .format_tool import (
    FormatTool,
    JSONTool,
    MarkdownDocumentTool,
    MarkdownTableTool,
    MarkdownTool,
    PrettyTool,
    XMLTool,
    YAMLTool,
)

__all__ = [
    "CompletionTool",
    "DocsTool",
    "FormatTool",
    "JSONTool",
    "MarkdownDocumentTool",
    "MarkdownTableTool",
    "MarkdownTool",
    "PrettyTool",
    "XMLTool",
    "YAMLTool",
    "bash_completion",
]
