"""Theme composition: merge ordered theme sources under a composition mode."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from .logging_utils import get_logger
from .modes import DEFAULT_MODE, ComposeMode, parse_compose_mode
from .validators import validate_sources

logger = get_logger(__name__)

ThemeDict = Dict[str, str]
ThemeSource = Optional[Mapping[str, str]]


def _present(sources: Iterable[ThemeSource]) -> list[Mapping[str, str]]:
    return [source for source in sources if source]


def _compose_deep(sources: list[Mapping[str, str]]) -> ThemeDict:
    result: ThemeDict = {}
    for source in sources:
        for key, value in source.items():
            if key in result:
                result[key] = f"{result[key]} {value}"
            else:
                result[key] = value
    return result


def _compose_soft(sources: list[Mapping[str, str]]) -> ThemeDict:
    result: ThemeDict = {}
    for source in sources:
        result.update(source)
    return result


def compose(mode: Any, sources: Iterable[ThemeSource] | None) -> ThemeDict:
    """Merge ``sources`` (lowest precedence first) into a new theme dict.

    ``deep`` appends same-key values separated by one space, ``soft`` lets the
    later value replace the earlier one and ``disabled`` returns a copy of the
    last non-empty source. ``None`` and empty sources contribute nothing.
    Inputs are never mutated.
    """

    resolved = parse_compose_mode(mode)
    present = _present(validate_sources(list(sources or ())))
    logger.debug(
        "Composing %d theme source(s) with mode %s", len(present), resolved.value
    )

    if not present:
        return {}
    if resolved is ComposeMode.DISABLED:
        return dict(present[-1])
    if resolved is ComposeMode.SOFT:
        return _compose_soft(present)
    return _compose_deep(present)


__all__ = [
    "ComposeMode",
    "DEFAULT_MODE",
    "ThemeDict",
    "ThemeSource",
    "compose",
    "parse_compose_mode",
]
