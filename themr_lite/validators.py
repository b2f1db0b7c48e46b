"""Validation helpers for theme objects and themr options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .errors import ThemeConfigurationError, ThemeValidationError
from .modes import DEFAULT_MODE, ComposeMode, parse_compose_mode

_THEME_ADAPTER: TypeAdapter[Dict[str, str]] = TypeAdapter(Dict[StrictStr, StrictStr])


def _configuration_error(exc: ValidationError) -> ThemeConfigurationError:
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, ThemeConfigurationError):
            return cause
    return ThemeConfigurationError(str(exc))


class ThemrOptions(BaseModel):
    """Options bound to a themed component.

    Invalid options raise :class:`ThemeConfigurationError` whether the model
    is built directly or through :meth:`from_mapping`.
    """

    compose_theme: ComposeMode = Field(default=DEFAULT_MODE, alias="composeTheme")

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc

    @field_validator("compose_theme", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any, info: ValidationInfo) -> ComposeMode:
        owner = (info.context or {}).get("owner")
        return parse_compose_mode(value, owner=owner)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any] | None, *, owner: str | None = None
    ) -> "ThemrOptions":
        """Build options from a plain mapping, naming ``owner`` in errors."""

        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ThemeConfigurationError(
                f"themr options must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data), context={"owner": owner})
        except ValidationError as exc:
            raise _configuration_error(exc) from exc


def _describe_errors(name: str, exc: ValidationError) -> list[str]:
    issues: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        where = f"{name}[{loc[0]!r}]" if loc else name
        if len(loc) > 1 and loc[1] == "[key]":
            issues.append(f"{where}: keys must be strings")
        else:
            issues.append(f"{where}: {error.get('msg')}")
    return issues


def validate_theme(
    theme: Optional[Mapping[str, Any]], *, name: str = "theme"
) -> Optional[Mapping[str, str]]:
    """Check that ``theme`` is a flat mapping of strings to strings.

    ``None`` passes through. The theme is returned as given, never copied or
    coerced; numbers, ``None`` values and nested objects are rejected.
    """

    if theme is None:
        return None
    if not isinstance(theme, Mapping):
        raise ThemeValidationError(
            f"{name} must be a mapping of class names, got {type(theme).__name__}"
        )
    try:
        _THEME_ADAPTER.validate_python(dict(theme))
    except ValidationError as exc:
        raise ThemeValidationError("; ".join(_describe_errors(name, exc))) from exc
    return theme


def validate_sources(
    sources: Iterable[Optional[Mapping[str, Any]]],
) -> list[Optional[Mapping[str, str]]]:
    """Validate an ordered list of theme sources, naming each by position."""

    return [
        validate_theme(source, name=f"theme source #{index}")
        for index, source in enumerate(sources)
    ]


__all__ = ["ThemrOptions", "validate_sources", "validate_theme"]
