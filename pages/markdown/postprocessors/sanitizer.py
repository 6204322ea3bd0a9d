# pages/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache
from html import escape

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup
from bs4.formatter import HTMLFormatter

logger = logging.getLogger(__name__)

# Properties Pygments writes in inline-style mode, plus pandoc's table
# alignment and column widths.
ALLOWED_CSS_PROPERTIES = [
    "color",
    "background",
    "background-color",
    "border",
    "font-style",
    "font-weight",
    "line-height",
    "text-decoration",
    "padding-left",
    "padding-right",
    "text-align",
    "width",
]

ALLOWED_PROTOCOLS = ["http", "https", "mailto", "tel"]

# Elements removed together with their content. Stripping them would leave
# script or stylesheet source behind as text.
DROPPED_ELEMENTS = [
    "script",
    "style",
    "iframe",
    "noscript",
    "noembed",
    "noframes",
    "object",
    "embed",
    "template",
    "textarea",
    "title",
    "xmp",
]

MAX_CLEAN_PASSES = 5

# Re-escape text and attributes with the entities the highlighter writes
ESCAPING_FORMATTER = HTMLFormatter(entity_substitution=escape)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = frozenset(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "wbr",
            "div",
            "span",
            "section",
            "cite",
            "mark",
            "ins",
            "del",
            "s",
            "sup",
            "sub",
            "q",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables (pandoc tables and the line-number layout)
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            "video",
            "audio",
            "source",
            # links and the copy button
            "a",
            "button",
            # task lists
            "input",
            "label",
            # semantic
            "time",
            "abbr",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "role"],
        "a": ["href", "title", "rel", "target", "id", "name"],
        "img": ["src", "alt", "title", "width", "height"],
        "video": ["src", "width", "height", "controls", "poster"],
        "audio": ["src", "controls"],
        "source": ["src", "type"],
        "div": ["class", "data-lang", "style"],
        "span": ["class", "style"],
        "pre": ["class", "style"],
        "code": ["class", "style"],
        "table": ["class", "style"],
        "td": ["class", "style", "colspan", "rowspan"],
        "th": ["style", "colspan", "rowspan", "scope"],
        "col": ["style"],
        "button": ["type", "class", "aria-label"],
        "input": ["type", "checked", "disabled"],
        "ol": ["start", "type", "class"],
        "blockquote": ["class", "cite"],
        "time": ["datetime"],
        "abbr": ["title"],
    }

    css_sanitizer = CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES)

    return allowed_tags, allowed_attrs, ALLOWED_PROTOCOLS, css_sanitizer


def drop_unsafe_elements(html):
    """Remove ``DROPPED_ELEMENTS`` and everything inside them."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(DROPPED_ELEMENTS):
        if not element.decomposed:
            element.decompose()
    return soup.decode(formatter=ESCAPING_FORMATTER)


def _clean_once(html):
    allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer = _get_bleach_config()

    return bleach.clean(
        drop_unsafe_elements(html),
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        css_sanitizer=css_sanitizer,
        strip=True,
    )


def sanitize_html(html, context):
    """
    Sanitize rendered HTML using BeautifulSoup and bleach.

    Runs once on the rendered body, before page composition. Script-like
    elements are removed with their content, then other tags outside the
    whitelist are stripped (their text is kept). ``header``/``footer`` are not
    whitelisted so only the page composer can produce those containers.

    Stripping can leave markup that re-parses differently (foster-parented
    table text, for one), so cleaning repeats until the output is stable.
    """
    if not html:
        return ""

    cleaned = _clean_once(html)
    for _ in range(MAX_CLEAN_PASSES):
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again

    logger.warning("Sanitized HTML still changing after %d passes", MAX_CLEAN_PASSES)
    return cleaned
