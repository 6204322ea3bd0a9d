"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from pages.markdown.config import DEFAULT_OPTIONS


@pytest.fixture
def options():
    """Default render options, no settings overrides."""
    return DEFAULT_OPTIONS


@pytest.fixture(autouse=True)
def _no_configured_overrides(settings):
    """Start every test from the fixed defaults."""
    settings.MARKDOWN_RENDER_OPTIONS = {}


@pytest.fixture
def content_dir(tmp_path: Path, settings) -> Path:
    """A content directory holding header.md and footer.md."""
    (tmp_path / "header.md").write_text("# Site title\n\n[Docs](/docs)\n")
    (tmp_path / "footer.md").write_text("Made with *markdown*.\n")
    settings.MARKDOWN_CONTENT_DIR = str(tmp_path)
    return tmp_path


@pytest.fixture
def empty_content_dir(tmp_path: Path, settings) -> Path:
    """A content directory without any components."""
    missing = tmp_path / "nothing-here"
    settings.MARKDOWN_CONTENT_DIR = str(missing)
    return missing
