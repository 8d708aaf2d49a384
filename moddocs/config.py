"""
Configuration loading for moddocs.

Configuration is read from a YAML file and can be overridden through
environment variables using the MODDOCS_ prefix.

Environment Variable Override Format:
    MODDOCS_<SECTION>_<KEY>=value

Examples:
    MODDOCS_LOGGING_LEVEL=debug
    MODDOCS_SETTINGS_SORT_BY_REQUIRED=true
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigError
from .yaml import load as yaml_load

DEFAULT_CONFIG_FILENAME = ".moddocs.yml"
ENV_PREFIX = "MODDOCS_"

# Sections that accept environment overrides
_SECTIONS = ("logging", "settings")


def _parse_env_value(value: str) -> Any:
    """Parse an environment value as a YAML scalar ("true" -> True, "3" -> 3)."""
    try:
        return yaml.safe_load(value)
    except yaml.YAMLError:
        return value


class Config:
    """
    Loaded configuration with dotted-path access.

    Example:
        config = Config.load(Path(".moddocs.yml"))
        level = config.get("logging.level", "info")
        sort_by_name = config.get("settings.sort_by_name", True)
    """

    def __init__(
        self,
        data: dict[str, Any] | None = None,
        path: Path | None = None,
        enable_env_overrides: bool = True,
        env: dict[str, str] | None = None,
    ):
        """
        Initialize configuration from already-parsed data.

        Args:
            data: Parsed configuration mapping
            path: File the data was loaded from (None when not file-backed)
            enable_env_overrides: Apply MODDOCS_* environment overrides
            env: Environment to read overrides from (defaults to os.environ)
        """
        self.path = path
        self._data: dict[str, Any] = dict(data or {})
        for section in _SECTIONS:
            value = self._data.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigError(
                    f"section '{section}' must be a mapping",
                    path=path,
                    type=type(value).__name__,
                )
        if enable_env_overrides:
            self._apply_env_overrides(os.environ if env is None else env)

    @classmethod
    def load(cls, path: Path, **kwargs: Any) -> Config:
        """
        Load configuration from a YAML file.

        Raises:
            ConfigError: If the file cannot be read or is not a YAML mapping
        """
        try:
            with open(path) as f:
                data = yaml_load(f, current_file=path)
        except OSError as e:
            raise ConfigError(f"cannot read config file: {e.strerror}", path=path) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", path=path) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("config file must contain a mapping", path=path)
        return cls(data, path=path, **kwargs)

    @classmethod
    def discover(cls, explicit: str | None = None, cwd: Path | None = None) -> Config:
        """
        Find and load the configuration for a run.

        Uses the explicit path when given, else .moddocs.yml in the working
        directory when it exists, else an empty configuration.
        """
        if explicit:
            return cls.load(Path(explicit))
        candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        if candidate.is_file():
            return cls.load(candidate)
        return cls()

    def _apply_env_overrides(self, env: Any) -> None:
        """Apply MODDOCS_<SECTION>_<KEY> environment overrides."""
        for name, raw in env.items():
            if not name.startswith(ENV_PREFIX):
                continue
            rest = name[len(ENV_PREFIX) :].lower()
            for section in _SECTIONS:
                if rest.startswith(section + "_"):
                    key = rest[len(section) + 1 :]
                    self._data.setdefault(section, {})
                    if self._data[section] is None:
                        self._data[section] = {}
                    self._data[section][key] = _parse_env_value(raw)
                    break

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a value by dotted path.

        Args:
            key: Dotted path such as "logging.level"
            default: Value returned when any path segment is missing
        """
        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def section(self, name: str) -> dict[str, Any]:
        """Get a top-level section as a dict (empty when absent)."""
        value = self._data.get(name)
        return dict(value) if isinstance(value, dict) else {}

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)
