"""
Module model and loader.

Example:
    from moddocs.module import LoadOptions, load

    module = load(LoadOptions(Path("./examples"), sort_by_required=True))
"""

from .loader import LoadOptions, load
from .model import Input, Module, Output, Provider, Requirement

__all__ = [
    "Input",
    "LoadOptions",
    "Module",
    "Output",
    "Provider",
    "Requirement",
    "load",
]
