"""
Tool group management for organizing subcommands.

This module provides ToolGroup, which holds the subcommand tools of a parent
tool, creates their subparsers and dispatches to the selected one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

from ..errors import DupToolError, UndefNameError

if TYPE_CHECKING:
    from .base import Tool


class ToolGroup:
    """
    Manages the subcommand tools of a parent tool.

    Tools are kept in registration order, which is also the order of the
    generated subparsers and of the command tree.
    """

    def __init__(self, parent: Any, cmd_var: str, default: str | None = None):
        """
        Initialize the tool group.

        Args:
            parent: Parent tool instance
            cmd_var: Namespace attribute holding the selected subcommand
            default: Default subcommand to run if none specified
        """
        self._parent = parent
        self._cmd_var = cmd_var
        self._default = default
        self._tools: dict[str, Tool] = {}
        self._funcs: dict[str, Callable] = {}

    @property
    def lg(self) -> Any:
        """Get the logger from the parent tool."""
        return self._parent.lg

    @property
    def tools(self) -> list[Tool]:
        return list(self._tools.values())

    def _check_new_tool(self, tool: Tool) -> None:
        """
        Validate a new tool before registration.

        Raises:
            UndefNameError: If tool has no name
            DupToolError: If tool name already exists
        """
        if not tool.name:
            raise UndefNameError(tool=tool)
        if tool.name in self._tools:
            raise DupToolError(tool)

    def add_tool(self, tool: Tool, run_func: Callable | None = None) -> Tool:
        """
        Add a tool to the group with optional custom run function.

        Args:
            tool: Tool instance to add
            run_func: Optional function to run instead of tool.run()

        Returns:
            Tool: The added tool instance
        """
        self._check_new_tool(tool)
        self._tools[tool.name] = tool
        if run_func is not None:
            self._funcs[tool.name] = run_func
        return tool

    def get_tool(self, name: str) -> Tool:
        """Get a tool by name."""
        if name not in self._tools:
            raise KeyError(f"Tool '{name}' not found in group")
        return self._tools[name]

    def add_tool_args(self, parser: Any) -> Any:
        """
        Add subparsers for the tools in the group.

        Hidden tools still parse but are left out of the listed choices.
        """
        visible = [t.name for t in self._tools.values() if not t.config.hidden]
        subs = parser.add_subparsers(
            dest=self._cmd_var, metavar="{" + ",".join(visible) + "}"
        )
        for tool in self._tools.values():
            args, kwargs = tool.cmd
            kwargs["formatter_class"] = parser.formatter_class
            tool.set_args(subs.add_parser(*args, **kwargs))
        return subs

    def finalize_args(self, parser: Any) -> None:
        """Set the default subcommand, if any."""
        if self._default is not None:
            parser.set_defaults(**{self._cmd_var: self._default})

    def _is_tool_selected(self, args: Any, tool: Tool) -> bool:
        """Check if a tool is selected by the arguments."""
        arg = getattr(args, self._cmd_var, None)
        if arg is None:
            return False
        cmd_args, cmd_kwargs = tool.cmd
        return arg in cmd_args or arg in cmd_kwargs.get("aliases", [])

    def run(self, **kwargs: Any) -> int:
        """
        Run the selected tool.

        Returns:
            int: Exit code (the tool's, 0 after printing help when no
                subcommand was given, 127 for an unknown command)
        """
        args = self._parent.args
        for tool in self._tools.values():
            if self._is_tool_selected(args, tool):
                self.lg.debug("running subtool", extra={"tool": tool.name})
                if tool.name in self._funcs:
                    return cast(int, self._funcs[tool.name]())
                return tool.run(**kwargs)

        cmd = getattr(args, self._cmd_var, None)
        if cmd is None:
            if self._parent.arg_prs:
                self._parent.arg_prs.print_help()
            return 0

        self.lg.error(f"no command found for '{cmd}'")
        return 127
