# pages/markdown/components.py
"""
Markdown sources for page components (header, footer).

A component named ``header`` is read from ``<MARKDOWN_CONTENT_DIR>/header.md``.
Components are optional: a missing directory or file reads as empty content so
pages still render without them.
"""

import logging
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)


def get_content_dir():
    return getattr(settings, "MARKDOWN_CONTENT_DIR", None)


def load_component_source(name, content_dir=None):
    """
    Return the raw markdown of component ``name``, or ``""`` if unavailable.

    Args:
        name: Logical component name, without the ``.md`` suffix
        content_dir: Directory to read from (default: MARKDOWN_CONTENT_DIR)
    """
    content_dir = content_dir or get_content_dir()
    if not content_dir:
        logger.debug("No content directory configured, component %r is empty", name)
        return ""

    path = Path(content_dir) / f"{name}.md"
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("Component %r not available at %s: %s", name, path, e)
        return ""
