"""
Custom YAML loader used for module manifests and configuration files.

This module provides a safe YAML loader that converts date and numeric keys
to strings and supports reading text from a sibling file via the !file tag.
"""

import datetime
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]


class Loader(yaml.SafeLoader):
    """
    Safe YAML loader with key type conversion and text file inclusion.

    Extends the safe YAML loader to:
    1. Convert date and numeric mapping keys to strings
    2. Support reading a text file's content via the !file tag

    Example:
        # In module.yaml:
        header: !file "HEADER.md"

        with open("module.yaml") as f:
            data = load(f, current_file=Path("module.yaml"))
    """

    def __init__(self, stream: Any, current_file: Path | None = None) -> None:
        """
        Initialize the loader.

        Args:
            stream: YAML stream to load
            current_file: Path of the file being loaded (for relative !file paths)
        """
        super().__init__(stream)
        self.current_file = current_file

    def _convert_key_to_string(self, key: Any) -> Any:
        """Convert date and numeric keys to strings."""
        if isinstance(key, datetime.date):
            return str(key)
        if not isinstance(key, bool) and isinstance(key, (int, float)):
            return str(key)
        return key

    def construct_mapping(self, node: Any, deep: bool = False) -> dict[Any, Any]:
        """
        Construct a mapping with date and numeric keys converted to strings.

        Keys are converted pair by pair so that keys equal in Python but
        distinct in YAML (1 and true) do not overwrite each other.
        """
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None,
                None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )
        self.flatten_mapping(node)

        mapping: dict[Any, Any] = {}
        for key_node, value_node in node.value:
            key = self._convert_key_to_string(
                self.construct_object(key_node, deep=deep)
            )
            if not isinstance(key, Hashable):
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found unhashable key",
                    key_node.start_mark,
                )
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping

    def file_constructor(self, node: Any) -> str:
        """
        Construct a string from the content of the file named by a !file tag.

        Relative paths are resolved from the directory of the current file.

        Raises:
            yaml.YAMLError: If the path is relative without a current file,
                or the file cannot be read
        """
        path_str: str = self.construct_scalar(node)
        path = Path(path_str).expanduser()
        if not path.is_absolute():
            if self.current_file is None:
                raise yaml.YAMLError(
                    f"Cannot resolve relative path '{path_str}' without a current file context"
                )
            path = self.current_file.parent / path
        try:
            return path.read_text()
        except OSError as e:
            raise yaml.YAMLError(f"Cannot read file '{path}': {e}") from e


Loader.add_constructor("!file", Loader.file_constructor)


def load(stream: Any, current_file: Path | None = None) -> Any:
    """
    Load a single YAML document.

    Args:
        stream: File object or string to load YAML from
        current_file: Path to the current file (for relative !file paths)

    Returns:
        The loaded data (None for an empty document)

    Raises:
        yaml.YAMLError: On syntax errors or unreadable !file references
    """
    loader = Loader(stream, current_file=current_file)
    try:
        return loader.get_single_data()
    finally:
        loader.dispose()
