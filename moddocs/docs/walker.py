"""
Command tree traversal for documentation generation.
"""

from __future__ import annotations

from pathlib import Path

from ..app.tools.node import CommandNode
from ..exceptions import FileCreationError, WriteError
from ..log import LogConfig, Logger, LoggerFactory
from .command import CommandDocRenderer


def doc_basename(command_path: str, root_name: str) -> str:
    """
    File name of a command page.

    The root command name is removed as a leading segment and the remaining
    segments are joined with "-": "moddocs markdown table" gives
    "markdown-table.md".
    """
    parts = command_path.split()
    if len(parts) > 1 and parts[0] == root_name:
        parts = parts[1:]
    return "-".join(parts) + ".md"


class TreeWalker:
    """
    Writes one page per documentable command, children before parents.

    Example:
        walker = TreeWalker(renderer, "moddocs", lg)
        written = walker.generate(app.node(), Path("docs/formats"))
    """

    def __init__(
        self, renderer: CommandDocRenderer, root_name: str, lg: Logger | None = None
    ):
        self.renderer = renderer
        self.root_name = root_name
        self.lg = lg or LoggerFactory.create_root(LogConfig.from_params(False))

    def generate(self, node: CommandNode, output_dir: Path) -> list[Path]:
        """
        Document a command and its documentable descendants.

        Args:
            node: Command to document
            output_dir: Existing directory the pages are written to

        Returns:
            Paths of the written pages, in write order

        Raises:
            FileCreationError: If a page file cannot be created
            WriteError: If a page cannot be written
            FormatterError: If an embedded example fails to render
        """
        written: list[Path] = []
        for child in node.children:
            if not child.is_documentable:
                self.lg.trace("skipped command", extra={"command": child.command_path})
                continue
            written.extend(self.generate(child, output_dir))

        page = self.renderer.render(node)
        path = output_dir / doc_basename(node.command_path, self.root_name)
        self._write(path, page)
        self.lg.debug("wrote page", extra={"command": node.command_path, "path": path})
        written.append(path)
        return written

    def _write(self, path: Path, content: str) -> None:
        try:
            f = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise FileCreationError(f"cannot create file: {e.strerror}", path=path) from e
        with f:
            try:
                f.write(content)
            except OSError as e:
                raise WriteError(f"cannot write file: {e.strerror}", path=path) from e
