"""
Formatter registry for documentation examples.

Maps a format identifier (a command path without the root name, such as
"markdown table") to the formatter that command uses and to the extra flags
its illustrative shell command needs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from types import MappingProxyType

from ..format import (
    Formatter,
    JSONFormatter,
    MarkdownDocumentFormatter,
    MarkdownTableFormatter,
    PrettyFormatter,
    RenderSettings,
    XMLFormatter,
    YAMLFormatter,
)


@dataclass(frozen=True)
class FormatDescriptor:
    """One documented output format."""

    identifier: str
    factory: Callable[[RenderSettings], Formatter]
    extra_flags: str = ""


DEFAULT_FORMATS: tuple[FormatDescriptor, ...] = (
    FormatDescriptor("json", JSONFormatter),
    FormatDescriptor("markdown document", MarkdownDocumentFormatter),
    FormatDescriptor("markdown table", MarkdownTableFormatter),
    FormatDescriptor("pretty", PrettyFormatter, " --no-color"),
    FormatDescriptor("xml", XMLFormatter),
    FormatDescriptor("yaml", YAMLFormatter),
)


class FormatRegistry:
    """
    Lookup of format descriptors by identifier.

    Unknown identifiers resolve to None: the caller documents the command
    without embedded output instead of failing.

    Example:
        registry = FormatRegistry("moddocs")
        registry.extra_flags("moddocs pretty")      # " --no-color"
        registry.resolve("moddocs markdown", settings)  # None
    """

    def __init__(
        self, root_name: str, formats: Iterable[FormatDescriptor] = DEFAULT_FORMATS
    ):
        """
        Initialize the registry.

        Args:
            root_name: Name of the root command, stripped from identifiers
            formats: Format descriptors with unique identifiers

        Raises:
            ValueError: If two descriptors share an identifier
        """
        by_id: dict[str, FormatDescriptor] = {}
        for descriptor in formats:
            if descriptor.identifier in by_id:
                raise ValueError(
                    f"duplicate format identifier '{descriptor.identifier}'"
                )
            by_id[descriptor.identifier] = descriptor
        self._root_name = root_name
        self._formats = MappingProxyType(by_id)

    @property
    def identifiers(self) -> list[str]:
        return list(self._formats)

    def normalize(self, identifier: str) -> str:
        """Strip the root command name as a leading path segment."""
        prefix = self._root_name + " "
        if identifier.startswith(prefix):
            return identifier[len(prefix) :]
        return identifier

    def descriptor(self, identifier: str) -> FormatDescriptor | None:
        return self._formats.get(self.normalize(identifier))

    def resolve(self, identifier: str, settings: RenderSettings) -> Formatter | None:
        """Create the formatter for an identifier, or None if it has none."""
        descriptor = self.descriptor(identifier)
        if descriptor is None:
            return None
        return descriptor.factory(settings)

    def extra_flags(self, identifier: str) -> str:
        """Extra invocation flags for an identifier ("" when none)."""
        descriptor = self.descriptor(identifier)
        return descriptor.extra_flags if descriptor else ""
