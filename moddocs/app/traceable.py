"""
Traceable base class for hierarchical attribute access.
"""

from typing import Any, Optional


class Traceable:
    """
    Base class for objects that live in a parent/child hierarchy.

    Enables objects to look up attributes from their ancestors.
    """

    def __init__(self, parent: Optional["Traceable"] = None):
        self._parent = parent

    @property
    def parent(self) -> Optional["Traceable"]:
        return self._parent

    def set_parent(self, parent: Optional["Traceable"]) -> None:
        """
        Set the parent object.

        Raises:
            TypeError: If parent is not None and not a Traceable instance
        """
        if parent is not None and not isinstance(parent, Traceable):
            raise TypeError(
                f"Parent must be a Traceable instance, got {type(parent).__name__}"
            )
        self._parent = parent

    def trace_attr(self, name: str) -> Any:
        """
        Find an attribute on this object or the nearest ancestor that has it.

        Raises:
            AttributeError: If no object in the hierarchy has the attribute
        """
        node: Any = self
        while node is not None:
            value = node.__dict__.get(name) if hasattr(node, "__dict__") else None
            if value is not None:
                return value
            node = getattr(node, "parent", None)
        raise AttributeError(f"Attribute '{name}' not found in hierarchy")
