"""
Tests for app/tools/group.py.
"""

import argparse
from unittest.mock import Mock

import pytest

from moddocs.app import Tool, ToolConfig, ToolGroup
from moddocs.app.errors import DupToolError


def _tool(name: str, hidden: bool = False) -> Tool:
    return Tool(config=ToolConfig(name=name, hidden=hidden))


@pytest.mark.unit
class TestToolGroup:
    """Test tool registration and lookup."""

    def test_registration_order(self):
        group = ToolGroup(Mock(), "cmd")
        group.add_tool(_tool("b"))
        group.add_tool(_tool("a"))
        assert [t.name for t in group.tools] == ["b", "a"]

    def test_duplicate(self):
        group = ToolGroup(Mock(), "cmd")
        group.add_tool(_tool("a"))
        with pytest.raises(DupToolError, match="'a' is already registered"):
            group.add_tool(_tool("a"))

    def test_get_tool(self):
        group = ToolGroup(Mock(), "cmd")
        tool = group.add_tool(_tool("a"))
        assert group.get_tool("a") is tool
        with pytest.raises(KeyError):
            group.get_tool("missing")

    def test_lg_from_parent(self):
        parent = Mock()
        assert ToolGroup(parent, "cmd").lg is parent.lg


@pytest.mark.unit
class TestRun:
    """Test ToolGroup.run()."""

    def _parent(self, **args):
        parent = Mock()
        parent.args = Mock(spec=[], **args)
        return parent

    def test_runs_selected_tool(self):
        group = ToolGroup(self._parent(cmd="a"), "cmd")
        tool = group.add_tool(_tool("a"))
        tool.run = Mock(return_value=3)

        assert group.run() == 3
        tool.run.assert_called_once_with()

    def test_run_func(self):
        group = ToolGroup(self._parent(cmd="a"), "cmd")
        group.add_tool(_tool("a"), run_func=lambda: 7)

        assert group.run() == 7

    def test_alias_selects_tool(self):
        group = ToolGroup(self._parent(cmd="x"), "cmd")
        tool = Tool(config=ToolConfig(name="a", aliases=["x"]))
        tool.run = Mock(return_value=0)
        group.add_tool(tool)

        assert group.run() == 0
        tool.run.assert_called_once()

    def test_no_command_prints_help(self):
        parent = self._parent(cmd=None)
        group = ToolGroup(parent, "cmd")
        group.add_tool(_tool("a"))

        assert group.run() == 0
        parent.arg_prs.print_help.assert_called_once()

    def test_unknown_command(self):
        parent = self._parent(cmd="zzz")
        group = ToolGroup(parent, "cmd")

        assert group.run() == 127
        parent.lg.error.assert_called_once()


@pytest.mark.unit
class TestArgs:
    """Test subparser creation."""

    def test_hidden_tools_not_listed(self):
        parser = argparse.ArgumentParser(prog="demo")
        group = ToolGroup(Mock(), "cmd")
        group.add_tool(_tool("shown"))
        group.add_tool(_tool("secret", hidden=True))

        group.add_tool_args(parser)
        help_text = parser.format_help()

        assert "{shown}" in help_text
        assert "secret" not in help_text
        assert parser.parse_args(["secret"]).cmd == "secret"

    def test_default_subcommand(self):
        parser = argparse.ArgumentParser(prog="demo")
        group = ToolGroup(Mock(), "cmd", default="a")
        group.add_tool(_tool("a"))

        group.add_tool_args(parser)
        group.finalize_args(parser)

        assert parser.parse_args([]).cmd == "a"
