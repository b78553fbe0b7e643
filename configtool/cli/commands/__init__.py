"""CLI command handlers."""

from .apply import apply_theme

__all__ = ['apply_theme']
