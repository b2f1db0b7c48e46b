"""Bind composed themes to presentation components.

``themr`` wraps a component callable so that each call receives a ``theme``
prop composed from three sources, lowest precedence first:

1. the entry for the component's identifier in the ambient
   :class:`ThemeContext` passed as ``context=``;
2. the local theme bound when decorating;
3. the ``theme`` prop given to the call.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from .compose import ThemeDict, compose
from .config import resolve_options
from .logging_utils import get_logger
from .modes import ComposeMode, parse_compose_mode
from .validators import ThemrOptions, validate_theme

logger = get_logger(__name__)

THEME_PROP = "theme"
COMPOSE_PROPS = ("compose_theme", "composeTheme")

R = TypeVar("R")


@dataclass(frozen=True)
class ThemeContext:
    """Ambient themes keyed by component identifier."""

    theme: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def for_identifier(self, identifier: str) -> Optional[Mapping[str, str]]:
        return self.theme.get(identifier)


def resolve_theme(
    identifier: str,
    *,
    context: ThemeContext | None = None,
    local_theme: Mapping[str, str] | None = None,
    instance_theme: Mapping[str, str] | None = None,
    mode: Any = None,
) -> ThemeDict:
    """Compose the context, local and instance themes of ``identifier``."""

    context_theme = context.for_identifier(identifier) if context else None
    return compose(mode, [context_theme, local_theme, instance_theme])


def _pop_override(props: dict[str, Any]) -> Any:
    # a None override counts as absent
    value: Any = None
    for name in COMPOSE_PROPS:
        candidate = props.pop(name, None)
        if candidate is not None:
            value = candidate
    return value


def themr(
    identifier: str,
    local_theme: Mapping[str, str] | None = None,
    options: ThemrOptions | Mapping[str, Any] | None = None,
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Return a decorator that injects a composed ``theme`` prop.

    Options are resolved and validated here, so an invalid ``composeTheme``
    fails when the component is defined rather than when it is first called.
    ``THEMR_COMPOSE_THEME`` overrides the mode given in ``options``.

    Parameters
    ----------
    identifier
        Key of the component's theme inside :class:`ThemeContext`.
    local_theme
        Theme bound to the component definition.
    options
        :class:`ThemrOptions` or a mapping with ``compose_theme`` /
        ``composeTheme`` (``"deeply"``, ``"softly"`` or ``False``).
    """

    def decorator(component: Callable[..., R]) -> Callable[..., R]:
        owner = getattr(component, "__name__", identifier)
        bound = resolve_options(options, owner=owner)
        validate_theme(local_theme, name=f"local theme of {owner}")

        @functools.wraps(component)
        def themed(
            *args: Any, context: ThemeContext | None = None, **props: Any
        ) -> R:
            instance_theme = props.pop(THEME_PROP, None)
            override = _pop_override(props)
            mode: ComposeMode = bound.compose_theme
            if override is not None:
                mode = parse_compose_mode(override, owner=owner)
            props[THEME_PROP] = resolve_theme(
                identifier,
                context=context,
                local_theme=local_theme,
                instance_theme=instance_theme,
                mode=mode,
            )
            return component(*args, **props)

        themed.themr_identifier = identifier  # type: ignore[attr-defined]
        themed.themr_options = bound  # type: ignore[attr-defined]
        themed.local_theme = local_theme  # type: ignore[attr-defined]
        logger.debug(
            "Bound %s to theme %r (compose=%s)",
            owner,
            identifier,
            bound.compose_theme.value,
        )
        return themed

    return decorator


__all__ = ["COMPOSE_PROPS", "THEME_PROP", "ThemeContext", "resolve_theme", "themr"]
