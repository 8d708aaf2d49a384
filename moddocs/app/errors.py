"""
Error classes for the moddocs.app package.

Programming errors raised while assembling the command tree.
"""

from typing import Any


class AppError(Exception):
    """Base exception for moddocs.app package."""

    pass


class UndefNameError(AppError):
    """Raised when a tool name is not defined."""

    def __init__(self, cls: Any | None = None, tool: Any | None = None) -> None:
        self.cls = cls
        self.tool = tool
        if cls:
            super().__init__(f"Tool class {cls.__name__} must define a name")
        elif tool:
            super().__init__(f"Tool {tool} must have a name")
        else:
            super().__init__("Tool name is not defined")


class UndefGroupError(AppError):
    """Raised when a tool group is not defined."""

    def __init__(self, tool: Any) -> None:
        self.tool = tool
        super().__init__(f"Tool '{tool.name}' requires a group but none is defined")


class DupToolError(AppError):
    """Raised when attempting to register a duplicate tool."""

    def __init__(self, tool: Any) -> None:
        self.tool = tool
        super().__init__(f"Tool '{tool.name}' is already registered")


class MissingParentError(AppError):
    """Raised when accessing parent-dependent resources without a parent."""

    def __init__(self, tool_name: str, property_name: str):
        self.tool_name = tool_name
        self.property_name = property_name
        super().__init__(
            f"Tool '{tool_name}' cannot access '{property_name}' without a parent. "
            f"Tools need a parent (usually an App instance) to access shared resources."
        )


class ArgsNotSetError(AppError):
    """Raised when parser-dependent data is requested before set_args()."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(
            f"Tool '{tool_name}' has no argument parser; call set_args() first"
        )
