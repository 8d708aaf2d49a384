"""
Base tool class for command-line applications.

A tool is one command of the CLI. Tools form a tree through tool groups;
each tool contributes local flags (add_args) and persistent flags
(add_persistent_args) that every descendant command accepts as well.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from ...log import LogConfig, Logger, LoggerFactory
from ..args import SuppressDefaultsParser
from ..errors import ArgsNotSetError, MissingParentError, UndefGroupError, UndefNameError
from ..traceable import Traceable
from .node import CommandNode, FlagSet, format_usage

if TYPE_CHECKING:
    from ..core.app import App
    from .group import ToolGroup


@dataclass
class ToolConfig:
    """Configuration for a tool."""

    name: str
    aliases: list[str] | None = None
    help_text: str = ""
    description: str = ""
    example: str = ""
    hidden: bool = False
    disable_autogen_tag: bool = False


class Tool(Traceable):
    """
    Base class for a command.

    Subclasses implement run() to become runnable; a tool that only groups
    subcommands leaves run() alone and dispatches to its group.
    """

    def __init__(
        self, parent: Traceable | None = None, config: ToolConfig | None = None
    ):
        """
        Initialize the tool.

        Args:
            parent: Parent tool or application
            config: Tool configuration (optional, see _create_config)
        """
        super().__init__(parent)
        self.config = config or self._create_config()
        self._logger: Logger | None = None
        self._arg_prs: argparse.ArgumentParser | None = None
        self._group: ToolGroup | None = None
        self._persistent_actions: list[argparse.Action] = []
        self._inherited_actions: list[argparse.Action] = []
        self._suppressed_actions: list[argparse.Action] = []
        self._initialized = False

    def _create_config(self) -> ToolConfig:
        """Create default configuration. Override in subclasses."""
        raise UndefNameError(cls=self.__class__)

    @property
    def name(self) -> str:
        if self.config and self.config.name:
            return self.config.name
        raise UndefNameError(self.__class__)

    @property
    def cmd(self) -> tuple[list[str], dict[str, Any]]:
        """
        Get (args, kwargs) for creating this tool's subparser.

        Hidden tools get no help entry so they are not listed by --help.
        """
        kwargs: dict[str, Any] = {
            "aliases": self.config.aliases or [],
            "description": self.config.description or self.config.help_text,
        }
        if not self.config.hidden:
            kwargs["help"] = self.config.help_text
        return [self.name], kwargs

    @property
    def group(self) -> ToolGroup:
        """
        Get the tool group for subcommands.

        Raises:
            UndefGroupError: If no group is defined
        """
        if self._group is None:
            raise UndefGroupError(self)
        return self._group

    @property
    def tools(self) -> list[Tool]:
        """Subcommand tools, in registration order."""
        return self._group.tools if self._group is not None else []

    @property
    def lg(self) -> Logger:
        """Get the logger instance, deriving it from the parent on first use."""
        if self._logger is None:
            self.setup_lg()
        assert self._logger is not None
        return self._logger

    @property
    def args(self) -> argparse.Namespace:
        """
        Get parsed command-line arguments from the application.

        Raises:
            MissingParentError: If no ancestor holds parsed arguments
        """
        try:
            return cast(argparse.Namespace, self.trace_attr("_parsed_args"))
        except AttributeError:
            raise MissingParentError(self.name, "args") from None

    @property
    def arg_prs(self) -> argparse.ArgumentParser | None:
        return self._arg_prs

    @property
    def app(self) -> App:
        """
        Get the root App instance by traversing the parent chain.

        Raises:
            MissingParentError: If tool is not attached to an App
        """
        from ..core.app import App

        node: Any = self
        while node is not None:
            if isinstance(node, App):
                return node
            node = getattr(node, "parent", None)
        raise MissingParentError(self.name, "app")

    @property
    def runnable(self) -> bool:
        """True when the tool implements run() itself."""
        return type(self).run is not Tool.run

    def ancestors(self) -> list[Tool]:
        """Ancestor tools, root first."""
        chain: list[Tool] = []
        node = self.parent
        while isinstance(node, Tool):
            chain.append(node)
            node = node.parent
        return list(reversed(chain))

    def set_args(self, parser: argparse.ArgumentParser) -> None:
        """
        Set up the argument parser for this tool and its subcommands.

        Ancestor persistent flags are registered again with suppressed
        defaults, then this tool's persistent and local flags are added,
        then the subcommand parsers.
        """
        self._arg_prs = parser

        self._inherited_actions = []
        self._suppressed_actions = []
        for ancestor in self.ancestors():
            self._inherited_actions.extend(ancestor._persistent_actions)
            start = len(parser._actions)
            ancestor.add_persistent_args(SuppressDefaultsParser(parser))
            self._suppressed_actions.extend(parser._actions[start:])

        start = len(parser._actions)
        self.add_persistent_args(parser)
        self._persistent_actions = list(parser._actions[start:])

        self.add_args(parser)

        if self._group is not None:
            self._group.add_tool_args(parser)
            self._group.finalize_args(parser)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        """
        Add arguments local to this command.

        Override this method in subclasses to add tool-specific arguments.
        """
        pass

    def add_persistent_args(self, parser: argparse.ArgumentParser) -> None:
        """
        Add flags accepted by this command and by all of its descendants.

        Override this method in subclasses. It is called once per parser in
        the subtree, so it must only add arguments.
        """
        pass

    def setup(self, **kwargs: Any) -> None:
        """Set up this tool and every tool below it."""
        if self._initialized:
            return
        self.setup_lg()
        self.configure()
        for tool in self.tools:
            tool.setup(**kwargs)
        self._initialized = True

    def setup_lg(self) -> None:
        """Set up the logger for this tool."""
        parent_lg = getattr(self.parent, "lg", None) if self.parent else None
        if isinstance(parent_lg, Logger):
            self._logger = LoggerFactory.derive(parent_lg, self.name)
            return

        level: str | bool = os.getenv("MODDOCS_TEST_LOGGING_LEVEL", "info")
        if level.lower() == "false":
            level = False
        self._logger = LoggerFactory.create_root(LogConfig.from_params(level))

    def configure(self) -> None:
        """
        Configure the tool after setup.

        Override this method in subclasses to perform custom configuration.
        """
        pass

    def create_group(self, default: str | None = None) -> ToolGroup:
        """Create a tool group for subcommands."""
        from .group import ToolGroup

        self._group = ToolGroup(self, self.name.replace("-", "_") + "_cmd", default)
        return self._group

    def add_tool(
        self,
        tool: Tool,
        run_func: Callable | None = None,
        default: str | None = None,
    ) -> Tool:
        """Add a subcommand tool, creating the group on first use."""
        if self._group is None:
            self.create_group(default=default)
        assert self._group is not None
        if tool.parent is None:
            tool.set_parent(self)
        return self._group.add_tool(tool, run_func=run_func)

    def node(self) -> CommandNode:
        """
        Snapshot this tool and its subtree as a CommandNode.

        Raises:
            ArgsNotSetError: If set_args() has not run for this tool yet
        """
        parser = self._arg_prs
        if parser is None:
            raise ArgsNotSetError(self.name)

        suppressed = {id(a) for a in self._suppressed_actions}
        own = [a for a in parser._actions if id(a) not in suppressed]
        path = tuple(t.name for t in self.ancestors()) + (self.name,)

        return CommandNode(
            path=path,
            short=self.config.help_text,
            long=self.config.description,
            usage=format_usage(parser),
            example=self.config.example,
            own_flags=FlagSet(own, parser.prog, parser.formatter_class),
            inherited_flags=FlagSet(
                self._inherited_actions, parser.prog, parser.formatter_class
            ),
            runnable=self.runnable,
            hidden=self.config.hidden,
            disable_autogen_tag=self.config.disable_autogen_tag,
            children=tuple(tool.node() for tool in self.tools),
        )

    def run(self, **kwargs: Any) -> int:
        """
        Run the tool by dispatching to the selected subcommand.

        Raises:
            UndefGroupError: If no group is defined
        """
        if self._group is None:
            raise UndefGroupError(self)
        return self._group.run(**kwargs)
