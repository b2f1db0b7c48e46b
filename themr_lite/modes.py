"""Composition modes and parsing of ``composeTheme`` options."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import ThemeConfigurationError
from .logging_utils import get_logger

logger = get_logger(__name__)


class ComposeMode(str, Enum):
    """Policy used to combine theme sources of increasing precedence."""

    DEEP = "deep"
    SOFT = "soft"
    DISABLED = "disabled"


DEFAULT_MODE = ComposeMode.DEEP

_MODE_ALIASES: dict[str, ComposeMode] = {
    "deep": ComposeMode.DEEP,
    "deeply": ComposeMode.DEEP,
    "soft": ComposeMode.SOFT,
    "softly": ComposeMode.SOFT,
    "disabled": ComposeMode.DISABLED,
}


def parse_compose_mode(value: Any, *, owner: str | None = None) -> ComposeMode:
    """Normalise a ``composeTheme`` option into a :class:`ComposeMode`.

    Parameters
    ----------
    value
        ``ComposeMode`` member, one of ``"deep"``/``"deeply"``,
        ``"soft"``/``"softly"``, ``"disabled"``, ``False`` (disabled) or
        ``None`` (default mode).
    owner
        Optional component name used in the error message.

    Raises
    ------
    ThemeConfigurationError
        When ``value`` is not a recognised composition option.
    """

    if value is None:
        return DEFAULT_MODE
    if isinstance(value, ComposeMode):
        return value
    # bool is checked before str/int so that True is never accepted
    if isinstance(value, bool):
        if value is False:
            return ComposeMode.DISABLED
    elif isinstance(value, str) and value in _MODE_ALIASES:
        return _MODE_ALIASES[value]

    target = f" for {owner}" if owner else ""
    message = (
        f"Invalid composeTheme option{target}: {value!r}. Valid composition "
        "options are deeply, softly and False (or deep, soft, disabled)."
    )
    logger.warning(message)
    raise ThemeConfigurationError(message)



__all__ = ["ComposeMode", "DEFAULT_MODE", "parse_compose_mode"]
