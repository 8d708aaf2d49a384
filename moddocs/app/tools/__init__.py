"""
Tool framework components.

This module provides the tool framework:
- Base tool class
- Tool grouping functionality
- Read-only command tree view
"""

from .base import Tool, ToolConfig
from .group import ToolGroup
from .node import CommandNode, FlagSet

__all__ = ["CommandNode", "FlagSet", "Tool", "ToolConfig", "ToolGroup"]
