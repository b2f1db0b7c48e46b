from __future__ import annotations

from typing import Any

import pytest
from themr_lite.compose import ComposeMode
from themr_lite.config import ENV_COMPOSE_THEME
from themr_lite.errors import ThemeConfigurationError, ThemeValidationError
from themr_lite.validators import ThemrOptions
from themr_lite.wrapper import ThemeContext, resolve_theme, themr


@pytest.fixture(autouse=True)
def _clear_env_mode(monkeypatch) -> None:
    monkeypatch.delenv(ENV_COMPOSE_THEME, raising=False)


def passthrough(**props: Any) -> dict[str, Any]:
    return props


def make_container(*args: Any, **kwargs: Any):
    @themr("Container", *args, **kwargs)
    def Container(**props: Any) -> dict[str, Any]:
        return passthrough(**props)

    return Container


def test_context_theme_is_passed_as_theme_prop() -> None:
    container_theme = {"foo": "foo_1234"}
    context = ThemeContext({"Container": container_theme})
    props = make_container()(context=context)
    assert props["theme"] == container_theme


def test_theme_composed_from_context_local_and_props() -> None:
    context = ThemeContext({"Container": {"foo": "foo_123"}})
    Container = make_container({"foo": "foo_567"})
    props = Container(context=context, theme={"foo": "foo_89"})
    assert props["theme"] == {"foo": "foo_123 foo_567 foo_89"}


def test_disabled_composition_without_props_uses_local_theme() -> None:
    local = {"foo": "foo_567"}
    context = ThemeContext({"Container": {"foo": "foo_123"}})
    Container = make_container(local, {"composeTheme": False})
    assert Container(context=context)["theme"] == local


@pytest.mark.parametrize(
    ("options", "expected"),
    [
        (None, {"foo": "foo_123 foo_567", "bar": "bar_765"}),
        ({"composeTheme": "deeply"}, {"foo": "foo_123 foo_567", "bar": "bar_765"}),
        ({"composeTheme": "softly"}, {"foo": "foo_567", "bar": "bar_765"}),
        ({"composeTheme": False}, {"foo": "foo_567"}),
    ],
)
def test_decorator_options(options: dict | None, expected: dict[str, str]) -> None:
    context = ThemeContext({"Container": {"foo": "foo_123", "bar": "bar_765"}})
    Container = make_container(None, options)
    assert Container(context=context, theme={"foo": "foo_567"})["theme"] == expected


@pytest.mark.parametrize(
    ("override", "expected"),
    [
        ("deeply", {"foo": "foo_123 foo_567", "bar": "bar_765"}),
        ("softly", {"foo": "foo_567", "bar": "bar_765"}),
        (False, {"foo": "foo_567"}),
    ],
)
def test_per_instance_override(override: object, expected: dict[str, str]) -> None:
    context = ThemeContext({"Container": {"foo": "foo_123", "bar": "bar_765"}})
    Container = make_container()
    props = Container(context=context, theme={"foo": "foo_567"}, composeTheme=override)
    assert props["theme"] == expected
    assert "composeTheme" not in props


def test_per_instance_override_beats_decorator_options() -> None:
    context = ThemeContext({"Container": {"foo": "foo_123"}})
    Container = make_container(None, ThemrOptions(compose_theme=ComposeMode.DISABLED))
    props = Container(context=context, theme={"foo": "x"}, compose_theme="deep")
    assert props["theme"] == {"foo": "foo_123 x"}
    assert "compose_theme" not in props


def test_none_override_falls_back_to_configured_mode() -> None:
    context = ThemeContext({"Container": {"foo": "foo_123"}})
    Container = make_container(None, {"composeTheme": "softly"})
    props = Container(context=context, theme={"foo": "x"}, composeTheme=None)
    assert props["theme"] == {"foo": "x"}


def test_invalid_decorator_option_fails_at_definition() -> None:
    with pytest.raises(ThemeConfigurationError, match="composeTheme"):
        make_container(None, {"composeTheme": "foo"})


def test_invalid_instance_override_raises() -> None:
    Container = make_container()
    with pytest.raises(ThemeConfigurationError, match="Container"):
        Container(composeTheme="sideways")


def test_invalid_local_theme_fails_at_definition() -> None:
    with pytest.raises(ThemeValidationError, match="local theme of Container"):
        make_container({"foo": 1})


def test_no_theme_provided_gives_empty_theme() -> None:
    assert make_container()()["theme"] == {}
    assert make_container()(context=ThemeContext())["theme"] == {}


def test_other_props_and_metadata_are_preserved() -> None:
    local = {"foo": "a"}
    Container = make_container(local, {"composeTheme": "softly"})
    props = Container(label="Save", theme=None)
    assert props == {"label": "Save", "theme": {"foo": "a"}}
    assert Container.__name__ == "Container"
    assert Container.themr_identifier == "Container"
    assert Container.themr_options.compose_theme is ComposeMode.SOFT
    assert Container.local_theme is local


def test_inputs_are_reusable_across_calls() -> None:
    context_theme = {"foo": "foo_123"}
    local = {"foo": "foo_567"}
    context = ThemeContext({"Container": context_theme})
    Container = make_container(local)
    first = Container(context=context)["theme"]
    second = Container(context=context)["theme"]
    assert first == second == {"foo": "foo_123 foo_567"}
    assert context_theme == {"foo": "foo_123"}
    assert local == {"foo": "foo_567"}


def test_resolve_theme_without_component() -> None:
    context = ThemeContext({"Button": {"root": "btn"}})
    assert resolve_theme(
        "Button", context=context, instance_theme={"root": "primary"}
    ) == {"root": "btn primary"}
    assert resolve_theme("Missing", context=context) == {}


def test_env_compose_mode_applies_to_decorated_components(monkeypatch) -> None:
    monkeypatch.setenv(ENV_COMPOSE_THEME, "softly")

    @themr("C", {"a": "x"})
    def C(**props: Any) -> dict[str, Any]:
        return props

    assert C.themr_options.compose_theme is ComposeMode.SOFT
    assert C(theme={"a": "y"})["theme"] == {"a": "y"}
    assert C(theme={"a": "y"}, composeTheme="deeply")["theme"] == {"a": "x y"}


def test_env_compose_mode_overrides_decorator_options(monkeypatch) -> None:
    monkeypatch.setenv(ENV_COMPOSE_THEME, "off")
    Container = make_container({"foo": "a"}, {"composeTheme": "deeply"})
    assert Container(theme={"foo": "b"})["theme"] == {"foo": "b"}


def test_invalid_env_compose_mode_fails_at_definition(monkeypatch) -> None:
    monkeypatch.setenv(ENV_COMPOSE_THEME, "sideways")
    with pytest.raises(ThemeConfigurationError, match=ENV_COMPOSE_THEME):
        make_container()
