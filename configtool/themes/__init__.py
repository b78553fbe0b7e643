"""
Theme substitution module.
Applies a theme's literal key/value replacements to target files.
"""

from .substitution import ThemeSubstitutor

__all__ = ['ThemeSubstitutor']
