"""
Tests for cli/settings.py.
"""

import argparse

import pytest

from moddocs.cli.settings import resolve_settings
from moddocs.config import Config
from moddocs.exceptions import ConfigError
from moddocs.format import RenderSettings


def _config(settings=None) -> Config:
    data = {"settings": settings} if settings is not None else {}
    return Config(data, enable_env_overrides=False)


@pytest.mark.unit
class TestResolveSettings:
    """Test resolve_settings()."""

    def test_defaults(self):
        assert resolve_settings(argparse.Namespace(), _config()) == RenderSettings()

    def test_config_section(self):
        settings = resolve_settings(
            argparse.Namespace(), _config({"indent_level": 3, "sort_by_required": True})
        )
        assert settings.indent_level == 3
        assert settings.sort_by_required is True

    def test_flags_override_config(self):
        args = argparse.Namespace(
            no_header=True,
            no_inputs=False,
            no_sort=True,
            sort_by_required=True,
            no_color=True,
            indent=4,
            no_escape=True,
        )

        settings = resolve_settings(args, _config({"indent_level": 3}))

        assert settings == RenderSettings(
            show_header=False,
            sort_by_name=False,
            sort_by_required=True,
            show_color=False,
            indent_level=4,
            escape_characters=False,
        )

    def test_section_flags(self):
        args = argparse.Namespace(no_outputs=True, no_providers=True, no_requirements=True)

        settings = resolve_settings(args, _config())

        assert settings.show_outputs is False
        assert settings.show_providers is False
        assert settings.show_requirements is False
        assert settings.show_inputs is True

    def test_unknown_setting(self):
        with pytest.raises(ConfigError, match="unknown settings: colour"):
            resolve_settings(argparse.Namespace(), _config({"colour": False}))

    def test_mistyped_setting(self):
        with pytest.raises(ConfigError, match="setting 'indent_level' must be int"):
            resolve_settings(argparse.Namespace(), _config({"indent_level": "abc"}))
