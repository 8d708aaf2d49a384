"""
Tests for cli/output.py.
"""

from io import StringIO

import pytest

from moddocs.cli.output import BufferedOutput, ConsoleOutput


@pytest.mark.unit
class TestConsoleOutput:
    def test_writes_line(self):
        stream = StringIO()
        ConsoleOutput(stream).write("hello")
        assert stream.getvalue() == "hello\n"


@pytest.mark.unit
class TestBufferedOutput:
    def test_collects(self):
        out = BufferedOutput()
        out.write("a")
        out.write("b\nc")
        assert out.text == "a\nb\nc\n"
        assert out.lines == ["a", "b", "c"]

    def test_clear(self):
        out = BufferedOutput()
        out.write("a")
        out.clear()
        assert out.text == ""
