"""
Command framework for moddocs.

Builds an argparse based command tree out of tools and exposes it as a
read-only CommandNode tree.

Example:
    from moddocs.app import App, Tool, ToolConfig

    class HelloTool(Tool):
        def __init__(self, parent=None):
            super().__init__(parent, ToolConfig(name="hello", help_text="Say hello"))

        def run(self, **kwargs):
            print("hello")
            return 0

    app = App("demo")
    app.add_tool(HelloTool())
    app.main(["hello"])
"""

from .core.app import App
from .errors import AppError, DupToolError, MissingParentError, UndefGroupError
from .tools import CommandNode, FlagSet, Tool, ToolConfig, ToolGroup

__all__ = [
    "App",
    "AppError",
    "CommandNode",
    "DupToolError",
    "FlagSet",
    "MissingParentError",
    "Tool",
    "ToolConfig",
    "ToolGroup",
    "UndefGroupError",
]
