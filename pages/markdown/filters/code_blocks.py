# pages/markdown/filters/code_blocks.py

import logging

from ..exceptions import HighlightError
from ..highlighting import fallback_plain, highlight

logger = logging.getLogger(__name__)


def code_block_language(node):
    """
    Language hint of a ``CodeBlock`` node.

    Pandoc stores the first word of a fence's info string as the first class,
    so ```` ```go linenos ```` gives ``go``. Indented blocks have no classes.
    """
    (_identifier, classes, _attributes), _text = node["c"]
    if not classes:
        return ""
    return classes[0].strip().lower()


def render_code_block(node, options):
    """
    Replace a ``CodeBlock`` node with a raw HTML block.

    Highlighting is best effort: any HighlightError drops back to the escaped
    plain text rendering.
    """
    _attr, code = node["c"]
    language = code_block_language(node)

    if options.syntax_highlight:
        try:
            fragment = highlight(code, language, options)
        except HighlightError as e:
            logger.warning("Highlighting failed, rendering as plain text: %s", e)
            fragment = fallback_plain(code, language, options)
    else:
        fragment = fallback_plain(code, language, options)

    return {"t": "RawBlock", "c": ["html", fragment]}
