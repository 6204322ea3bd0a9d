# pages/markdown/highlighting.py
"""
Syntax highlighting for code blocks using Pygments.

Every code block, highlighted or not, is wrapped in the same container so the
stylesheet and the copy button behave identically either way:

    <div class="codeblock" data-lang="go">
        <div class="codeblock-toolbar">
            <span class="codeblock-lang">GO</span>
            <button type="button" class="codeblock-copy" aria-label="Copy code">Copy</button>
        </div>
        <div class="codeblock-body">
            ...Pygments output, or <pre><code class="language-go">...</code></pre>
        </div>
    </div>

``data-lang`` is only present when the block has a language hint. The toolbar
is omitted when both the label and the copy button are disabled.
"""

import html
import logging
from io import StringIO

from pygments.formatters import HtmlFormatter
from pygments.lexers import find_lexer_class_by_name, get_lexer_by_name, guess_lexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from .exceptions import HighlightError
from .stylesheet import HIGHLIGHT_CSS_CLASS, resolve_style

logger = logging.getLogger(__name__)

PLAIN_LABEL = "text"
LINE_ANCHOR_PREFIX = "L"

# Stand-ins for quotes while Pygments formats token text
QUOTE_MASKS = {'"': "\ufdd0", "'": "\ufdd1"}

COPY_BUTTON_HTML = (
    '<button type="button" class="codeblock-copy" aria-label="Copy code">Copy</button>'
)


def is_known_language(language):
    """True if a Pygments grammar is registered under ``language``."""
    if not language:
        return False
    try:
        find_lexer_class_by_name(language.lower())
    except ClassNotFound:
        return False
    return True


def language_label(language):
    """Toolbar label: the uppercased hint, or ``TEXT`` for empty/unknown hints."""
    if is_known_language(language):
        return language.upper()
    return PLAIN_LABEL.upper()


def select_lexer(code, language, tab_width=4):
    """
    Pick a lexer for ``code``.

    1. the grammar registered under ``language`` (case-insensitive)
    2. a grammar guessed from the code itself
    3. the plain text lexer
    """
    if language:
        try:
            return get_lexer_by_name(language, tabsize=tab_width)
        except ClassNotFound:
            logger.debug("No grammar registered for %r, guessing from content", language)

    try:
        return guess_lexer(code, tabsize=tab_width)
    except ClassNotFound:
        logger.debug("Could not detect a grammar, using plain text")
        return TextLexer(tabsize=tab_width)


def wrap_code_block(body_html, language, options):
    """Wrap formatted code in the code block container and optional toolbar."""
    parts = ['<div class="codeblock"']
    if language:
        parts.append(f' data-lang="{html.escape(language.lower())}"')
    parts.append(">")

    if options.show_language_label or options.copy_button:
        parts.append('<div class="codeblock-toolbar">')
        if options.show_language_label:
            label = html.escape(language_label(language))
            parts.append(f'<span class="codeblock-lang">{label}</span>')
        if options.copy_button:
            parts.append(COPY_BUTTON_HTML)
        parts.append("</div>")

    parts.append(f'<div class="codeblock-body">{body_html}</div></div>')
    return "".join(parts)


class QuoteEscapingHtmlFormatter(HtmlFormatter):
    """
    HtmlFormatter that always writes quotes in code text as entities.

    Whether Pygments escapes ``"`` and ``'`` depends on its version. Quotes in
    token text are swapped for Unicode noncharacters before formatting and
    replaced by ``&quot;``/``&#x27;`` afterwards, the entities ``html.escape``
    writes. Formatter markup never contains the noncharacters.
    """

    _MASK = {ord('"'): QUOTE_MASKS['"'], ord("'"): QUOTE_MASKS["'"]}
    _UNMASK = {ord(QUOTE_MASKS['"']): "&quot;", ord(QUOTE_MASKS["'"]): "&#x27;"}

    def format(self, tokensource, outfile):
        masked = ((ttype, value.translate(self._MASK)) for ttype, value in tokensource)
        out = StringIO()
        super().format(masked, out)
        outfile.write(out.getvalue().translate(self._UNMASK))


def _build_formatter(options):
    linkable = options.linkable_line_numbers and options.line_numbers
    return QuoteEscapingHtmlFormatter(
        style=resolve_style(options.highlight_style),
        cssclass=HIGHLIGHT_CSS_CLASS,
        noclasses=not options.use_classes,
        linenos="table" if options.line_numbers else False,
        lineanchors=LINE_ANCHOR_PREFIX if linkable else "",
        anchorlinenos=linkable,
        wrapcode=True,
    )


def highlight(code, language, options):
    """
    Render ``code`` as highlighted HTML inside the code block container.

    Args:
        code: Raw source code (not escaped)
        language: Language hint from the fence info string, may be empty
        options: RenderOptions for this render call

    Raises:
        HighlightError: if the lexer or formatter fails on this input
    """
    if any(mask in code for mask in QUOTE_MASKS.values()):
        raise HighlightError(language, ValueError("code contains reserved noncharacters"))

    try:
        lexer = select_lexer(code, language, options.tab_width)
        formatter = _build_formatter(options)
        tokens = list(lexer.get_tokens(code))
        out = StringIO()
        formatter.format(tokens, out)
    except Exception as e:
        raise HighlightError(language, e) from e

    return wrap_code_block(out.getvalue(), language, options)


def fallback_plain(code, language, options):
    """Escaped, unhighlighted rendering of ``code``. Always succeeds."""
    escaped = html.escape(code)
    lang_class = ""
    if language:
        lang_class = f' class="language-{html.escape(language.lower())}"'
    return wrap_code_block(f"<pre><code{lang_class}>{escaped}</code></pre>", language, options)
