"""themr-lite package initialization."""

from .compose import DEFAULT_MODE, ComposeMode, compose, parse_compose_mode
from .config import load_options, merge_options, options_from_env, resolve_options
from .errors import ThemeConfigurationError, ThemeValidationError, ThemrError
from .validators import ThemrOptions, validate_sources, validate_theme
from .wrapper import ThemeContext, resolve_theme, themr

__all__ = [
    "ComposeMode",
    "DEFAULT_MODE",
    "ThemeConfigurationError",
    "ThemeContext",
    "ThemeValidationError",
    "ThemrError",
    "ThemrOptions",
    "compose",
    "load_options",
    "merge_options",
    "options_from_env",
    "parse_compose_mode",
    "resolve_options",
    "resolve_theme",
    "themr",
    "validate_sources",
    "validate_theme",
]
