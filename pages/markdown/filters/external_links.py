# pages/markdown/filters/external_links.py

EXTERNAL_PREFIXES = ("http://", "https://")

LINK_TARGET = "_blank"
LINK_REL = "nofollow noopener noreferrer"


def is_external(url):
    return url.lower().startswith(EXTERNAL_PREFIXES)


def decorate_link(node):
    """
    Add target="_blank" and rel="nofollow ..." to an external ``Link`` node.

    A pandoc Link is ``[[id, classes, key_values], inlines, [url, title]]``.
    Attributes already set in the source (``{target=_self}``) are kept.
    Relative and fragment links are left alone.
    """
    (_identifier, _classes, key_values), _inlines, (url, _title) = node["c"]
    if not is_external(url):
        return node

    present = {key for key, _value in key_values}
    if "target" not in present:
        key_values.append(["target", LINK_TARGET])
    if "rel" not in present:
        key_values.append(["rel", LINK_REL])
    return node
