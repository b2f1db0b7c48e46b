"""Exception types raised by themr-lite."""

from __future__ import annotations


class ThemrError(Exception):
    """Base class for every themr-lite error."""


class ThemeConfigurationError(ThemrError, ValueError):
    """Raised when a composition option or options file is invalid."""


class ThemeValidationError(ThemrError, TypeError):
    """Raised when a theme object is not a flat ``str -> str`` mapping."""


__all__ = ["ThemeConfigurationError", "ThemeValidationError", "ThemrError"]
