"""Tests for render option resolution."""

import dataclasses

import pytest

from pages.markdown.config import (
    DEFAULT_OPTIONS,
    RenderOptions,
    get_pandoc_config,
    get_render_options,
    get_static_url,
)


def test_defaults() -> None:
    opts = RenderOptions()
    assert opts.full_render is False
    assert opts.syntax_highlight is True
    assert opts.use_classes is True
    assert opts.line_numbers is True
    assert opts.linkable_line_numbers is True
    assert opts.tab_width == 4
    assert opts.show_language_label is True
    assert opts.copy_button is True
    assert opts.highlight_style == "friendly"


def test_with_overrides_returns_copy() -> None:
    changed = DEFAULT_OPTIONS.with_overrides(full_render=True, tab_width=2)
    assert changed.full_render is True
    assert changed.tab_width == 2
    assert DEFAULT_OPTIONS.full_render is False
    assert DEFAULT_OPTIONS.tab_width == 4


def test_options_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OPTIONS.full_render = True  # type: ignore[misc]


def test_unknown_override_rejected() -> None:
    with pytest.raises(TypeError):
        get_render_options(no_such_option=True)


def test_settings_override(settings) -> None:
    settings.MARKDOWN_RENDER_OPTIONS = {"highlight_style": "monokai", "line_numbers": False}
    opts = get_render_options()
    assert opts.highlight_style == "monokai"
    assert opts.line_numbers is False
    assert DEFAULT_OPTIONS.highlight_style == "friendly"


def test_unknown_settings_option_rejected(settings) -> None:
    settings.MARKDOWN_RENDER_OPTIONS = {"colour": "red"}
    with pytest.raises(TypeError, match="colour"):
        get_render_options()


def test_keyword_overrides_win_over_settings(settings) -> None:
    settings.MARKDOWN_RENDER_OPTIONS = {"highlight_style": "monokai"}
    opts = get_render_options(highlight_style="vim")
    assert opts.highlight_style == "vim"


def test_base_replaces_configured_defaults(settings) -> None:
    settings.MARKDOWN_RENDER_OPTIONS = {"highlight_style": "monokai"}
    base = RenderOptions(copy_button=False)
    opts = get_render_options(base, full_render=True)
    assert opts.highlight_style == "friendly"
    assert opts.copy_button is False
    assert opts.full_render is True
    assert base.full_render is False


def test_pandoc_config_uses_tab_width() -> None:
    config = get_pandoc_config(RenderOptions(tab_width=8))
    assert config["format"] == "commonmark_x+task_lists"
    assert "--tab-stop=8" in config["extra_args"]


def test_static_url(settings) -> None:
    assert get_static_url() == "/_static/"
    settings.MARKDOWN_STATIC_URL = "/assets/"
    assert get_static_url() == "/assets/"
