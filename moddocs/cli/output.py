"""
Output abstraction for CLI tools.

Commands print rendered documents through an OutputWriter so tests can
capture them without redirecting stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for command output."""

    def write(self, text: str = "") -> None:
        """Write text followed by a newline."""
        ...


class ConsoleOutput:
    """
    Writes command output to a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        out.write(JSONFormatter(settings).render(module, settings))
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self._stream)


class BufferedOutput:
    """
    Collects command output in memory.

    Example:
        out = BufferedOutput()
        tool = JSONTool(out=out)
        ...
        assert out.text.startswith("{")
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str = "") -> None:
        self._chunks.append(text + "\n")

    @property
    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._chunks)

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

    def clear(self) -> None:
        self._chunks.clear()
