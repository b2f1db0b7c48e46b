"""Load themr options from YAML files and the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import ThemeConfigurationError
from .modes import ComposeMode, parse_compose_mode
from .validators import ThemrOptions

ENV_COMPOSE_THEME = "THEMR_COMPOSE_THEME"
_ENV_FALSE = {"0", "false", "False", "no", "off"}


def load_options(path: Path | str) -> ThemrOptions:
    """Load options from a YAML file.

    Parameters
    ----------
    path
        Path to the YAML file.

    Returns
    -------
    ThemrOptions
        Parsed options. Default options are returned when the file does not
        exist or is empty.
    """

    path = Path(path)
    if not path.exists():
        return ThemrOptions()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ThemeConfigurationError(
            f"Could not parse options file {path}: {exc}"
        ) from exc
    if data is None:
        return ThemrOptions()
    if not isinstance(data, Mapping):
        raise ThemeConfigurationError(
            f"Options file {path} must contain a mapping at the top level"
        )
    return ThemrOptions.from_mapping(data, owner=str(path))


def options_from_env(environ: Mapping[str, str] | None = None) -> ComposeMode | None:
    """Return the compose mode forced through ``THEMR_COMPOSE_THEME``."""

    env = os.environ if environ is None else environ
    value = env.get(ENV_COMPOSE_THEME)
    if value is None:
        return None
    if value in _ENV_FALSE:
        return ComposeMode.DISABLED
    return parse_compose_mode(value, owner=ENV_COMPOSE_THEME)


def merge_options(base: ThemrOptions, override: ThemrOptions | None) -> ThemrOptions:
    """Return new options where fields explicitly set on ``override`` win."""

    if override is None:
        return base
    updates = {name: getattr(override, name) for name in override.model_fields_set}
    return base.model_copy(update=updates)


def _coerce(
    options: ThemrOptions | Mapping[str, Any] | None, owner: str | None
) -> ThemrOptions | None:
    if options is None or isinstance(options, ThemrOptions):
        return options
    return ThemrOptions.from_mapping(options, owner=owner)


def resolve_options(
    options: ThemrOptions | Mapping[str, Any] | None = None,
    *,
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    owner: str | None = None,
) -> ThemrOptions:
    """Resolve options with precedence env > ``options`` > file > defaults.

    ``owner`` names the component in configuration errors.
    """

    resolved = load_options(path) if path is not None else ThemrOptions()
    resolved = merge_options(resolved, _coerce(options, owner))
    forced = options_from_env(environ)
    if forced is not None:
        resolved = resolved.model_copy(update={"compose_theme": forced})
    return resolved


__all__ = [
    "ENV_COMPOSE_THEME",
    "load_options",
    "merge_options",
    "options_from_env",
    "resolve_options",
]
