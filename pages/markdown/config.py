# pages/markdown/config.py

from dataclasses import dataclass, fields, replace

from django.conf import settings


@dataclass(frozen=True)
class RenderOptions:
    """
    Options for a single markdown render call.

    Instances are immutable. Use ``with_overrides`` to derive a modified
    copy; the module-level ``DEFAULT_OPTIONS`` is never changed.
    """

    full_render: bool = False
    syntax_highlight: bool = True
    highlight_style: str = "friendly"  # any Pygments style name
    use_classes: bool = True  # False => inline style attributes
    line_numbers: bool = True
    linkable_line_numbers: bool = True  # adds L-<n> anchors to each line
    tab_width: int = 4
    show_language_label: bool = True
    copy_button: bool = True

    def with_overrides(self, **changes):
        return replace(self, **changes)


DEFAULT_OPTIONS = RenderOptions()

OPTION_NAMES = frozenset(f.name for f in fields(RenderOptions))


def get_render_options(base=None, **overrides):
    """
    Resolve the options for one render call.

    Precedence (lowest first): fixed defaults, ``MARKDOWN_RENDER_OPTIONS``
    from Django settings, ``base`` (replaces both when given), keyword
    overrides.

    Raises:
        TypeError: if an override names an unknown option
    """
    if base is None:
        configured = getattr(settings, "MARKDOWN_RENDER_OPTIONS", None) or {}
        unknown = set(configured) - OPTION_NAMES
        if unknown:
            raise TypeError(
                f"MARKDOWN_RENDER_OPTIONS has unknown option(s): {', '.join(sorted(unknown))}"
            )
        base = DEFAULT_OPTIONS.with_overrides(**configured)

    if overrides:
        base = base.with_overrides(**overrides)

    return base


def get_pandoc_config(options):
    """
    Configuration for pypandoc/Pandoc markdown parsing.

    ``commonmark_x`` is CommonMark plus pandoc's extensions (pipe tables,
    footnotes, strikeout, auto identifiers, raw HTML), here with task lists
    switched on. Its fenced code parsing takes the first word of the info
    string as the language, so ``go linenos`` still yields ``go``.
    """
    return {
        "format": "commonmark_x+task_lists",
        "extra_args": [
            f"--tab-stop={options.tab_width}",
        ],
    }


def get_static_url():
    """Prefix for the stylesheet and script references of a full page."""
    return getattr(settings, "MARKDOWN_STATIC_URL", "/_static/")
