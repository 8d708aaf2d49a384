"""
Module model.

Immutable representation of an infrastructure module as described by its
module.yaml manifest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Requirement:
    """A tool or provider version constraint required by the module."""

    name: str
    version: str = ""


@dataclass(frozen=True)
class Provider:
    """A provider used by the module, optionally aliased."""

    name: str
    alias: str = ""
    version: str = ""

    @property
    def full_name(self) -> str:
        """Provider name with its alias appended ("aws.ident")."""
        if self.alias:
            return f"{self.name}.{self.alias}"
        return self.name


@dataclass(frozen=True)
class Input:
    """
    An input variable.

    An input is required when its manifest entry has no default; an explicit
    null default makes it optional with a null default value.
    """

    name: str
    type: str = "any"
    description: str = ""
    default: Any = None
    required: bool = True


@dataclass(frozen=True)
class Output:
    """An output value exported by the module."""

    name: str
    description: str = ""


@dataclass(frozen=True)
class Module:
    """A parsed module: header text plus its interface sections."""

    header: str = ""
    requirements: tuple[Requirement, ...] = field(default_factory=tuple)
    providers: tuple[Provider, ...] = field(default_factory=tuple)
    inputs: tuple[Input, ...] = field(default_factory=tuple)
    outputs: tuple[Output, ...] = field(default_factory=tuple)

    @property
    def required_inputs(self) -> tuple[Input, ...]:
        return tuple(i for i in self.inputs if i.required)

    @property
    def optional_inputs(self) -> tuple[Input, ...]:
        return tuple(i for i in self.inputs if not i.required)
