"""
Core application components.
"""

from .app import App

__all__ = ["App"]
