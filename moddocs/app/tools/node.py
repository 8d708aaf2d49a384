"""
Read-only view of the command tree.

A CommandNode snapshots the metadata of one tool (name path, descriptions,
usage line, flags, children) once its argument parser has been built, so
consumers such as the documentation generator never touch argparse or the
tools themselves.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

# Fixed width so flag and usage text does not depend on the terminal size
HELP_WIDTH = 100


class FlagSet:
    """
    Ordered set of optional arguments of one command.

    Example:
        flags = node.own_flags
        if flags.has_available_flags():
            print(flags.print_defaults())
    """

    def __init__(
        self,
        actions: Iterable[argparse.Action] = (),
        prog: str = "",
        formatter_class: type[argparse.HelpFormatter] = argparse.HelpFormatter,
    ):
        self._actions = tuple(a for a in actions if a.option_strings)
        self._prog = prog
        self._formatter_class = formatter_class

    def __iter__(self) -> Iterator[argparse.Action]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    @property
    def names(self) -> list[str]:
        """All option strings, in definition order."""
        return [opt for action in self._actions for opt in action.option_strings]

    def has_available_flags(self) -> bool:
        """True when at least one flag is not hidden from help."""
        return any(a.help is not argparse.SUPPRESS for a in self._actions)

    def print_defaults(self) -> str:
        """
        Render the flags the way the parser's help output lists them.

        Returns:
            One line (or more, when wrapped) per flag, ending with a newline
        """
        formatter = self._formatter_class(prog=self._prog, width=HELP_WIDTH)
        formatter.start_section(None)
        formatter.add_arguments(
            [a for a in self._actions if a.help is not argparse.SUPPRESS]
        )
        formatter.end_section()
        return formatter.format_help()


def format_usage(parser: argparse.ArgumentParser) -> str:
    """Usage line of a parser without the "usage:" prefix, on a single line."""
    formatter = parser.formatter_class(prog=parser.prog, width=HELP_WIDTH)
    formatter.add_usage(
        parser.usage, parser._actions, parser._mutually_exclusive_groups, prefix=""
    )
    return " ".join(formatter.format_help().split())


@dataclass(frozen=True)
class CommandNode:
    """
    One command of the tree.

    Attributes:
        path: Command names from the root to this command
        short: One-line summary
        long: Long description (may be empty)
        usage: Usage line
        example: Verbatim example text (may be empty)
        own_flags: Flags defined by this command, including its persistent ones
        inherited_flags: Persistent flags of the ancestors
        runnable: Whether the command has an action of its own
        hidden: Whether the command is hidden from help and documentation
        disable_autogen_tag: Suppresses the generated-by footer in docs
        children: Subcommands, in registration order
    """

    path: tuple[str, ...]
    short: str = ""
    long: str = ""
    usage: str = ""
    example: str = ""
    own_flags: FlagSet = field(default_factory=FlagSet)
    inherited_flags: FlagSet = field(default_factory=FlagSet)
    runnable: bool = False
    hidden: bool = False
    disable_autogen_tag: bool = False
    children: tuple[CommandNode, ...] = ()

    @property
    def name(self) -> str:
        return self.path[-1]

    @property
    def command_path(self) -> str:
        """Full command path, e.g. "moddocs markdown table"."""
        return " ".join(self.path)

    @property
    def long_description(self) -> str:
        """Long description, falling back to the short one."""
        return self.long or self.short

    @property
    def is_help_topic(self) -> bool:
        """A non-runnable command without documentable subcommands."""
        if self.runnable:
            return False
        return not any(child.is_documentable for child in self.children)

    @property
    def is_documentable(self) -> bool:
        """Whether the command gets its own page in generated documentation."""
        return not self.hidden and not self.is_help_topic

    def walk(self) -> Iterator[CommandNode]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
