"""
The moddocs command-line interface.
"""

from .cli import ModdocsApp, build_app, main
from .output import BufferedOutput, ConsoleOutput, OutputWriter
from .settings import resolve_settings

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "ModdocsApp",
    "OutputWriter",
    "build_app",
    "main",
    "resolve_settings",
]
