"""
Resolution of render settings from configuration and command-line flags.
"""

from __future__ import annotations

import argparse

from ..config import Config
from ..exceptions import ConfigError
from ..format import RenderSettings

# Flags that hide a section, mapped to the setting they turn off
_HIDE_FLAGS = (
    ("no_header", "show_header"),
    ("no_inputs", "show_inputs"),
    ("no_outputs", "show_outputs"),
    ("no_providers", "show_providers"),
    ("no_requirements", "show_requirements"),
    ("no_sort", "sort_by_name"),
    ("no_color", "show_color"),
    ("no_escape", "escape_characters"),
)


def resolve_settings(args: argparse.Namespace, config: Config) -> RenderSettings:
    """
    Build the render settings of a run.

    The "settings" section of the configuration provides the defaults and
    flags given on the command line override them. Flags a command does not
    define are simply absent from args.

    Raises:
        ConfigError: If the settings section names unknown settings or
            holds a value of the wrong type
    """
    try:
        settings = RenderSettings.from_mapping(config.section("settings"))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid settings: {e}", path=config.path) from e

    changes: dict[str, object] = {}
    for flag, field in _HIDE_FLAGS:
        if getattr(args, flag, False):
            changes[field] = False
    if getattr(args, "sort_by_required", False):
        changes["sort_by_required"] = True
    indent = getattr(args, "indent", None)
    if indent is not None:
        changes["indent_level"] = indent
    return settings.replace(**changes)
