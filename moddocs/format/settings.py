"""
Render settings shared by all formatters.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RenderSettings:
    """
    Output preferences for a formatter run.

    Example:
        settings = RenderSettings(sort_by_required=True, show_color=False)
        text = JSONFormatter(settings).render(module, settings)
    """

    escape_characters: bool = True
    indent_level: int = 2
    show_color: bool = True
    show_header: bool = True
    show_inputs: bool = True
    show_outputs: bool = True
    show_providers: bool = True
    show_requirements: bool = True
    sort_by_name: bool = True
    sort_by_required: bool = False

    def replace(self, **changes: Any) -> RenderSettings:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def for_docs(self) -> RenderSettings:
        """Settings for output embedded in static documentation (no color)."""
        return self.replace(show_color=False)

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> RenderSettings:
        """
        Build settings from a mapping such as the "settings" config section.

        Raises:
            ValueError: On unknown keys, or a value whose type does not match
                the field (booleans are not accepted as integers)
        """
        fields = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(values) - set(fields))
        if unknown:
            raise ValueError(f"unknown settings: {', '.join(unknown)}")

        for name, value in values.items():
            expected = type(fields[name].default)
            if isinstance(value, bool) != (expected is bool) or not isinstance(
                value, expected
            ):
                raise ValueError(
                    f"setting '{name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        return cls(**values)
