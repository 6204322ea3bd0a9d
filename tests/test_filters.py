"""Tests for the pandoc AST filters (code blocks and external links)."""

from pages.markdown.exceptions import HighlightError
from pages.markdown.filters import apply_filters, code_blocks, walk
from pages.markdown.filters.code_blocks import code_block_language, render_code_block
from pages.markdown.filters.external_links import decorate_link, is_external


def code_block(text, classes=()):
    return {"t": "CodeBlock", "c": [["", list(classes), []], text]}


def link(url, key_values=None):
    return {
        "t": "Link",
        "c": [["", [], key_values or []], [{"t": "Str", "c": "text"}], [url, ""]],
    }


def paragraph(*inlines):
    return {"t": "Para", "c": list(inlines)}


def document(*blocks):
    return {"pandoc-api-version": [1, 23, 1], "meta": {}, "blocks": list(blocks)}


# ── walk() ────────────────────────────────────────────────────────────────────


def test_walk_replaces_nested_nodes() -> None:
    tree = [{"t": "BlockQuote", "c": [code_block("x")]}]
    result = walk(tree, lambda node: {"t": "Null"} if node["t"] == "CodeBlock" else None)
    assert result == [{"t": "BlockQuote", "c": [{"t": "Null"}]}]


def test_walk_does_not_descend_into_replacements() -> None:
    seen = []

    def action(node):
        seen.append(node["t"])
        if node["t"] == "Div":
            return {"t": "RawBlock", "c": ["html", ""]}
        return None

    walk([{"t": "Div", "c": [["", [], []], [code_block("x")]]}], action)
    assert seen == ["Div"]


def test_walk_leaves_other_nodes_alone() -> None:
    tree = [paragraph({"t": "Str", "c": "hello"})]
    assert walk(tree, lambda node: None) == tree


# ── code blocks ───────────────────────────────────────────────────────────────


def test_code_block_language() -> None:
    assert code_block_language(code_block("x", ["Go", "numberLines"])) == "go"
    assert code_block_language(code_block("x")) == ""


def test_render_code_block_highlights(options) -> None:
    raw = render_code_block(code_block('fmt.Println("hi")', ["go"]), options)
    assert raw["t"] == "RawBlock"
    fmt, html = raw["c"]
    assert fmt == "html"
    assert 'data-lang="go"' in html
    assert 'class="highlight"' in html


def test_render_indented_code_block(options) -> None:
    _fmt, html = render_code_block(code_block("x = 1"), options)["c"]
    assert html.startswith('<div class="codeblock">')
    assert '<span class="codeblock-lang">TEXT</span>' in html


def test_render_code_block_without_highlighting(options) -> None:
    opts = options.with_overrides(syntax_highlight=False)
    _fmt, html = render_code_block(code_block("a < b", ["python"]), opts)["c"]
    assert '<pre><code class="language-python">a &lt; b</code></pre>' in html
    assert 'class="highlight"' not in html


def test_render_code_block_falls_back_on_highlight_error(monkeypatch, options, caplog) -> None:
    def broken(code, language, options):
        raise HighlightError(language, RuntimeError("boom"))

    monkeypatch.setattr(code_blocks, "highlight", broken)
    _fmt, html = render_code_block(code_block("x := 1", ["go"]), options)["c"]
    assert '<pre><code class="language-go">x := 1</code></pre>' in html
    assert "GO" in html
    assert "Highlighting failed" in caplog.text


# ── links ─────────────────────────────────────────────────────────────────────


def test_is_external() -> None:
    assert is_external("https://example.com")
    assert is_external("HTTP://example.com")
    assert not is_external("/docs")
    assert not is_external("#section")
    assert not is_external("mailto:a@example.com")


def test_decorate_external_link() -> None:
    node = decorate_link(link("https://example.com"))
    key_values = node["c"][0][2]
    assert ["target", "_blank"] in key_values
    assert ["rel", "nofollow noopener noreferrer"] in key_values


def test_decorate_keeps_explicit_attributes() -> None:
    node = decorate_link(link("https://example.com", [["target", "_self"]]))
    key_values = node["c"][0][2]
    assert ["target", "_self"] in key_values
    assert ["target", "_blank"] not in key_values
    assert ["rel", "nofollow noopener noreferrer"] in key_values


def test_relative_link_untouched() -> None:
    node = decorate_link(link("/docs"))
    assert node["c"][0][2] == []


# ── apply_filters() ───────────────────────────────────────────────────────────


def test_apply_filters(options) -> None:
    doc = document(
        paragraph(link("https://example.com")),
        {"t": "BulletList", "c": [[code_block("print(1)", ["python"])]]},
    )
    result = apply_filters(doc, options)

    para, bullet_list = result["blocks"]
    assert ["target", "_blank"] in para["c"][0]["c"][0][2]
    raw = bullet_list["c"][0][0]
    assert raw["t"] == "RawBlock"
    assert "PYTHON" in raw["c"][1]
    assert result["pandoc-api-version"] == [1, 23, 1]


def test_apply_filters_empty_document(options) -> None:
    assert apply_filters(document(), options)["blocks"] == []
