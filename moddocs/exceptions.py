"""
Unified exception hierarchy for moddocs.

This module provides a consistent exception hierarchy for all moddocs errors,
making it easy to catch every failure of a run with a single except clause.
"""

from typing import Any


class ModdocsError(Exception):
    """
    Base exception for all moddocs errors.

    Example:
        try:
            generator.generate(root, Path("docs/formats"))
        except ModdocsError as e:
            lg.error(f"generation failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(ModdocsError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found
        - Invalid YAML syntax
        - Section of the wrong type
    """

    pass


class LoaderError(ModdocsError):
    """
    Module loading errors.

    Raised when a module directory cannot be turned into a Module model.

    Examples:
        - Module directory or manifest missing
        - Invalid YAML syntax in the manifest
        - Entry without a name
    """

    pass


class FormatterError(ModdocsError):
    """Raised when a formatter fails to render a module."""

    pass


class GenerationError(ModdocsError):
    """Base class for documentation output errors."""

    pass


class FileCreationError(GenerationError):
    """Raised when a documentation file cannot be created or truncated."""

    pass


class WriteError(GenerationError):
    """Raised when rendered documentation cannot be written to its file."""

    pass
