# pages/markdown/postprocessors/__init__.py

from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    # Anything appended here runs on sanitized HTML and must only emit
    # markup the sanitizer would accept.
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
