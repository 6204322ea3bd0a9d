# pages/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from pages.markdown.config import get_render_options
from pages.markdown.renderer import render_markdown
from pages.markdown.stylesheet import emit_css

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value, full_render=False))


@register.filter(name="markdown_page")
def markdown_page_filter(value):
    """Render markdown as a full page (header, body, footer and assets)"""
    return mark_safe(render_markdown(value, full_render=True))


@register.simple_tag
def highlight_css(style=None):
    """Theme stylesheet for highlighted code, e.g. ``{% highlight_css "monokai" %}``"""
    style = style or get_render_options().highlight_style
    return mark_safe(emit_css(style))
