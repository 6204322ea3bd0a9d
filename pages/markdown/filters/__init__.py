# pages/markdown/filters/__init__.py
"""
Filters over the pandoc JSON AST.

Pandoc's JSON AST is a tree of tagged nodes, each a dict of the form
``{"t": <kind>, "c": <content>}``. The filters below run between parsing and
HTML rendering and only touch two node kinds:

- ``CodeBlock`` (fenced and indented) is replaced by a ``RawBlock`` holding the
  highlighted HTML, so pandoc emits it verbatim and never renders the code
  text itself
- ``Link`` gets target/rel attributes when it points off-site

Every other node falls through to pandoc's own HTML writer.
"""

from .code_blocks import render_code_block
from .external_links import decorate_link


def walk(node, action):
    """
    Depth-first walk over a pandoc JSON value.

    ``action`` is called for every tagged node in a list. Returning ``None``
    keeps the node and walks into its children; returning a node replaces it
    and its children are not visited.
    """
    if isinstance(node, list):
        result = []
        for item in node:
            if isinstance(item, dict) and "t" in item:
                replacement = action(item)
                if replacement is not None:
                    result.append(replacement)
                    continue
            result.append(walk(item, action))
        return result
    if isinstance(node, dict):
        return {key: walk(value, action) for key, value in node.items()}
    return node


def apply_filters(document, options):
    """Run the code block and link filters over a parsed pandoc document."""

    def action(node):
        kind = node["t"]
        if kind == "CodeBlock":
            return render_code_block(node, options)
        if kind == "Link":
            decorate_link(node)
        return None

    document["blocks"] = walk(document.get("blocks", []), action)
    return document
