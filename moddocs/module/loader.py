"""
Module loader.

Turns a module directory containing a module.yaml manifest into a Module,
applying the requested sort order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import LoaderError
from ..yaml import load as yaml_load
from .model import Input, Module, Output, Provider, Requirement

MANIFEST_NAMES = ("module.yaml", "module.yml")

_SECTIONS = ("requirements", "providers", "inputs", "outputs")


@dataclass(frozen=True)
class LoadOptions:
    """Where to load a module from and how to order its entries."""

    path: Path
    sort_by_name: bool = True
    sort_by_required: bool = False


def _find_manifest(path: Path) -> Path:
    """Find the manifest file inside a module directory."""
    if not path.is_dir():
        raise LoaderError("module directory not found", path=path)
    for name in MANIFEST_NAMES:
        candidate = path / name
        if candidate.is_file():
            return candidate
    raise LoaderError(
        f"no module manifest ({' or '.join(MANIFEST_NAMES)}) found", path=path
    )


def _read_manifest(manifest: Path) -> dict[str, Any]:
    """Parse the manifest into a mapping."""
    try:
        with open(manifest) as f:
            data = yaml_load(f, current_file=manifest)
    except OSError as e:
        raise LoaderError(f"cannot read manifest: {e.strerror}", path=manifest) from e
    except yaml.YAMLError as e:
        raise LoaderError(f"invalid YAML: {e}", path=manifest) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoaderError("manifest must contain a mapping", path=manifest)
    return data


def _entries(data: dict[str, Any], section: str, manifest: Path) -> list[dict]:
    """Get the entries of a manifest section, validating their shape."""
    value = data.get(section) or []
    if not isinstance(value, list):
        raise LoaderError(f"'{section}' must be a list", path=manifest)
    for index, entry in enumerate(value):
        if not isinstance(entry, dict):
            raise LoaderError(
                f"'{section}' entries must be mappings", path=manifest, index=index
            )
        if not entry.get("name"):
            raise LoaderError(
                f"'{section}' entry has no name", path=manifest, index=index
            )
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _build_input(entry: dict[str, Any]) -> Input:
    return Input(
        name=str(entry["name"]),
        type=_text(entry.get("type")) or "any",
        description=_text(entry.get("description")),
        default=entry.get("default"),
        required="default" not in entry,
    )


def _sort_inputs(inputs: list[Input], options: LoadOptions) -> list[Input]:
    """Order inputs: required first when requested, then by name."""
    if options.sort_by_required:
        return sorted(inputs, key=lambda i: (not i.required, i.name))
    if options.sort_by_name:
        return sorted(inputs, key=lambda i: i.name)
    return inputs


def _parse(data: dict[str, Any], manifest: Path, options: LoadOptions) -> Module:
    unknown = [k for k in data if k not in _SECTIONS and k != "header"]
    if unknown:
        raise LoaderError("unknown manifest keys", path=manifest, keys=sorted(unknown))

    requirements = [
        Requirement(name=str(e["name"]), version=_text(e.get("version")))
        for e in _entries(data, "requirements", manifest)
    ]
    providers = [
        Provider(
            name=str(e["name"]),
            alias=_text(e.get("alias")),
            version=_text(e.get("version")),
        )
        for e in _entries(data, "providers", manifest)
    ]
    inputs = [_build_input(e) for e in _entries(data, "inputs", manifest)]
    outputs = [
        Output(name=str(e["name"]), description=_text(e.get("description")))
        for e in _entries(data, "outputs", manifest)
    ]

    if options.sort_by_name:
        requirements.sort(key=lambda r: r.name)
        providers.sort(key=lambda p: p.full_name)
        outputs.sort(key=lambda o: o.name)

    return Module(
        header=_text(data.get("header")),
        requirements=tuple(requirements),
        providers=tuple(providers),
        inputs=tuple(_sort_inputs(inputs, options)),
        outputs=tuple(outputs),
    )


def load(options: LoadOptions) -> Module:
    """
    Load a module from its directory.

    Args:
        options: Module path and sort order

    Returns:
        The parsed Module

    Raises:
        LoaderError: If the directory or manifest is missing or malformed
    """
    manifest = _find_manifest(Path(options.path))
    return _parse(_read_manifest(manifest), manifest, options)
