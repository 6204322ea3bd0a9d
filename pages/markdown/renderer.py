# pages/markdown/renderer.py

import json
import logging

import pypandoc

from .components import load_component_source
from .config import get_pandoc_config, get_render_options, get_static_url
from .filters import apply_filters
from .postprocessors import apply_postprocessors
from .stylesheet import emit_css

logger = logging.getLogger(__name__)

HEADER_COMPONENT = "header"
FOOTER_COMPONENT = "footer"


def parse_markdown(text, options):
    """Parse markdown into pandoc's JSON AST (a plain dict)."""
    pandoc_config = get_pandoc_config(options)

    ast_json = pypandoc.convert_text(
        text,
        to="json",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )
    return json.loads(ast_json)


def write_html(document):
    """Render a (filtered) pandoc JSON AST to an HTML5 fragment."""
    return pypandoc.convert_text(
        json.dumps(document),
        to="html5",
        format="json",
        extra_args=["--wrap=none"],
    )


def render_fragment(text, options, context=None):
    """
    Render markdown to a sanitized HTML fragment.

    Parse, run the AST filters (code blocks, external links), write HTML and
    sanitize. Fragments never carry a header, footer or asset references;
    ``options.full_render`` is ignored here.
    """
    context = context or {}

    if not text or not text.strip():
        return ""

    document = parse_markdown(text, options)
    document = apply_filters(document, options)
    html = write_html(document)

    return apply_postprocessors(html, context)


def render_component(name, options, loader=load_component_source):
    """Render component ``name`` as a fragment; missing sources render empty."""
    source = loader(name) or ""
    return render_fragment(source, options.with_overrides(full_render=False))


def render_page(text, options, loader=None, context=None):
    """
    Render markdown as a full page, or as a fragment when not ``full_render``.

    A full page is:

        <header>{header.md}</header>{body}<footer>{footer.md}</footer>
        <link rel="stylesheet" href="/_static/style.css"><style>{theme css}</style>
        <script src="/_static/index.js" defer></script>

    The ``<style>`` element is only added when highlighting uses CSS classes.
    """
    body = render_fragment(text, options, context)

    if not options.full_render:
        return body

    loader = loader or load_component_source
    header = "<header>" + render_component(HEADER_COMPONENT, options, loader) + "</header>"
    footer = "<footer>" + render_component(FOOTER_COMPONENT, options, loader) + "</footer>"

    static_url = get_static_url()
    theme_css = ""
    if options.use_classes:
        theme_css = "<style>" + emit_css(options.highlight_style) + "</style>"

    return (
        header
        + body
        + footer
        + f'\n<link rel="stylesheet" href="{static_url}style.css">'
        + theme_css
        + f'\n<script src="{static_url}index.js" defer></script>'
    )


def render_markdown(text, options=None, context=None, loader=None, **overrides):
    """
    Main rendering entry point.

    Args:
        text: Raw markdown text
        options: Base RenderOptions (default: configured defaults)
        context: Optional dict passed through to postprocessors
        loader: Optional callable returning a component's markdown by name
        **overrides: RenderOptions fields to change for this call only

    Example:
        >>> render_markdown("# Hi", full_render=True)
    """
    options = get_render_options(options, **overrides)
    logger.debug("Rendering %d chars of markdown (full_render=%s)", len(text or ""), options.full_render)
    return render_page(text, options, loader=loader, context=context)
