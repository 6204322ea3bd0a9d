# pages/markdown/stylesheet.py
"""
Stylesheet for highlighted code blocks.

The output has two parts:
- the Pygments class-to-colour rules for the selected theme, scoped to
  ``.highlight`` (the ``cssclass`` the highlighter formats with)
- fixed layout rules for the code block container, its toolbar, the copy
  button and the line-number table

Inline this in a ``<style>`` tag (the page composer does when classes are
used) or write it to a static file with ``manage.py highlight_css``.
"""

import logging

from pygments.formatters import HtmlFormatter
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS_CLASS = "highlight"
FALLBACK_STYLE = "default"

CODEBLOCK_LAYOUT_CSS = """
/* code block frame */
.codeblock { margin: 1rem 0; border: 1px solid #e5e7eb; border-radius: 0.5rem; overflow: hidden; }
.codeblock-toolbar { display: flex; align-items: center; justify-content: space-between; padding: 0.375rem 0.5rem; font: 12px/1.2 system-ui, sans-serif; background: #f8fafc; border-bottom: 1px solid #e5e7eb; }
.codeblock-lang { opacity: 0.75; letter-spacing: 0.04em; }
.codeblock-copy { border: 0; background: #eef2ff; padding: 0.25rem 0.5rem; border-radius: 0.375rem; cursor: pointer; }
.codeblock-copy.is-copied { background: #dcfce7; }
.codeblock-body { overflow: auto; }
.codeblock-body pre { margin: 0; padding: 0.75rem; }

/* line-number table */
.highlight .highlighttable { border-spacing: 0; width: 100%; }
.highlight .highlighttable td { vertical-align: top; padding: 0; }
.highlight td.linenos { width: 1%; user-select: none; opacity: 0.6; text-align: right; }
.highlight td.linenos a { color: inherit; text-decoration: none; }
.highlight td.code { width: 99%; }
"""


def resolve_style(name):
    """
    Return the Pygments style class registered as ``name``.

    Unknown or empty names resolve to ``FALLBACK_STYLE``; this never raises.
    """
    if name:
        try:
            return get_style_by_name(name)
        except ClassNotFound:
            logger.debug("Unknown highlight style %r, using %r", name, FALLBACK_STYLE)
    return get_style_by_name(FALLBACK_STYLE)


def available_styles():
    return sorted(get_all_styles())


def emit_css(theme_name):
    """Theme rules plus the fixed code block layout for ``theme_name``."""
    formatter = HtmlFormatter(style=resolve_style(theme_name), cssclass=HIGHLIGHT_CSS_CLASS)
    theme_css = formatter.get_style_defs(f".{HIGHLIGHT_CSS_CLASS}")
    return theme_css + "\n" + CODEBLOCK_LAYOUT_CSS
