"""
Tests for app/tools/node.py.
"""

import argparse

import pytest

from moddocs.app.args import DefaultsHelpFormatter
from moddocs.app.tools.node import CommandNode, FlagSet, format_usage


def _node(path, runnable=False, hidden=False, children=()):
    return CommandNode(
        path=tuple(path.split()),
        short=f"Run {path}",
        runnable=runnable,
        hidden=hidden,
        children=tuple(children),
    )


# =============================================================================
# FlagSet
# =============================================================================


@pytest.mark.unit
class TestFlagSet:
    """Test FlagSet."""

    def _parser(self):
        parser = argparse.ArgumentParser(prog="demo", formatter_class=DefaultsHelpFormatter)
        parser.add_argument("path")
        parser.add_argument("--indent", type=int, default=2, help="heading level")
        parser.add_argument("--secret", help=argparse.SUPPRESS)
        return parser

    def test_only_optionals(self):
        parser = self._parser()
        flags = FlagSet(parser._actions, "demo", DefaultsHelpFormatter)
        assert flags.names == ["-h", "--help", "--indent", "--secret"]
        assert len(flags) == 3

    def test_empty(self):
        assert FlagSet().has_available_flags() is False
        assert len(FlagSet()) == 0

    def test_only_suppressed(self):
        parser = argparse.ArgumentParser(add_help=False)
        parser.add_argument("--secret", help=argparse.SUPPRESS)
        assert FlagSet(parser._actions).has_available_flags() is False

    def test_print_defaults(self):
        parser = self._parser()
        flags = FlagSet(parser._actions, "demo", DefaultsHelpFormatter)

        text = flags.print_defaults()

        lines = text.splitlines()
        assert lines[0].strip().startswith("-h, --help")
        assert lines[1].strip().startswith("--indent INDENT")
        assert lines[1].endswith("heading level (default: 2)")
        assert "--secret" not in text
        assert text.endswith("\n")

    def test_print_defaults_stable(self):
        parser = self._parser()
        flags = FlagSet(parser._actions, "demo", DefaultsHelpFormatter)
        assert flags.print_defaults() == flags.print_defaults()


@pytest.mark.unit
class TestFormatUsage:
    """Test format_usage()."""

    def test_single_line_without_prefix(self):
        parser = argparse.ArgumentParser(prog="demo json")
        parser.add_argument("path", metavar="PATH")
        assert format_usage(parser) == "demo json [-h] PATH"


# =============================================================================
# CommandNode
# =============================================================================


@pytest.mark.unit
class TestCommandNode:
    """Test CommandNode classification."""

    def test_names(self):
        node = _node("moddocs markdown table")
        assert node.name == "table"
        assert node.command_path == "moddocs markdown table"

    def test_long_description_falls_back(self):
        assert _node("moddocs json").long_description == "Run moddocs json"
        node = CommandNode(path=("x",), short="s", long="l")
        assert node.long_description == "l"

    def test_runnable_is_documentable(self):
        assert _node("moddocs json", runnable=True).is_documentable is True

    def test_hidden_is_not_documentable(self):
        assert _node("moddocs docs", runnable=True, hidden=True).is_documentable is False

    def test_help_topic(self):
        topic = _node("moddocs topic")
        assert topic.is_help_topic is True
        assert topic.is_documentable is False

    def test_group_with_documentable_child(self):
        group = _node(
            "moddocs markdown",
            children=[_node("moddocs markdown table", runnable=True)],
        )
        assert group.is_help_topic is False
        assert group.is_documentable is True

    def test_group_with_only_hidden_children(self):
        group = _node(
            "moddocs internal",
            children=[_node("moddocs internal x", runnable=True, hidden=True)],
        )
        assert group.is_help_topic is True

    def test_walk_depth_first(self):
        tree = _node(
            "r",
            children=[
                _node("r a", children=[_node("r a b", runnable=True)]),
                _node("r c", runnable=True),
            ],
        )
        assert [n.command_path for n in tree.walk()] == ["r", "r a", "r a b", "r c"]
