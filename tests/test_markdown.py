import pytest

from bookrender.markdown import (
    bracket_escape,
    collapse_whitespace,
    id_from_content,
    normalize_id,
    render_markdown,
    render_markdown_with_path,
    unique_id_from_content,
)


def test_preserves_external_links():
    assert (
        render_markdown("[example](https://www.rust-lang.org/)", False)
        == '<p><a href="https://www.rust-lang.org/">example</a></p>\n'
    )


def test_it_can_adjust_markdown_links():
    assert (
        render_markdown("[example](example.md)", False)
        == '<p><a href="example.html">example</a></p>\n'
    )
    assert (
        render_markdown("[example_anchor](example.md#anchor)", False)
        == '<p><a href="example.html#anchor">example_anchor</a></p>\n'
    )
    assert (
        render_markdown("[phantom data](foo.html#phantomdata)", False)
        == '<p><a href="foo.html#phantomdata">phantom data</a></p>\n'
    )


def test_it_can_keep_quotes_straight():
    assert render_markdown("'one'", False) == "<p>'one'</p>\n"


def test_it_can_make_quotes_curly_except_when_they_are_in_code():
    source = "\n'one'\n```\n'two'\n```\n`'three'` 'four'"
    expected = (
        "<p>\u2018one\u2019</p>\n"
        "<pre><code>'two'\n</code></pre>\n"
        "<p><code>'three'</code> \u2018four\u2019</p>\n"
    )
    assert render_markdown(source, True) == expected


def test_curly_double_quotes_and_dashes():
    assert render_markdown('"hi"', True) == "<p>\u201chi\u201d</p>\n"
    assert render_markdown("a -- b", True) == "<p>a \u2013 b</p>\n"


def test_whitespace_outside_of_codeblock_header_is_preserved():
    source = (
        "\nsome text with spaces\n```rust\nfn main() {\n"
        "// code inside is unchanged\n}\n```\nmore text with spaces\n"
    )
    expected = (
        "<p>some text with spaces</p>\n"
        '<pre><code class="language-rust">fn main() {\n'
        "// code inside is unchanged\n}\n</code></pre>\n"
        "<p>more text with spaces</p>\n"
    )
    assert render_markdown(source, False) == expected
    assert render_markdown(source, True) == expected


@pytest.mark.parametrize("curly", [False, True])
def test_rust_code_block_properties_are_passed_as_class(curly):
    source = "\n```rust,no_run,should_panic,property_3\n```\n"
    expected = (
        '<pre><code class="language-rust,no_run,should_panic,property_3">'
        "</code></pre>\n"
    )
    assert render_markdown(source, curly) == expected


@pytest.mark.parametrize("curly", [False, True])
def test_rust_code_block_properties_with_whitespace(curly):
    source = "\n```rust,    no_run,,,should_panic , ,property_3\n```\n"
    expected = (
        '<pre><code class="language-rust,,,,,no_run,,,should_panic,,,,property_3">'
        "</code></pre>\n"
    )
    assert render_markdown(source, curly) == expected


@pytest.mark.parametrize("curly", [False, True])
def test_rust_code_block_without_properties_has_proper_html_class(curly):
    source = "\n```rust\n```\n"
    expected = '<pre><code class="language-rust"></code></pre>\n'
    assert render_markdown(source, curly) == expected


def test_links_relative_to_page_path():
    assert (
        render_markdown_with_path("[a](other.md)", False, "dir/page.md")
        == '<p><a href="dir/other.html">a</a></p>\n'
    )
    assert (
        render_markdown_with_path("[a](#frag)", False, "dir/page.md")
        == '<p><a href="dir/page.html#frag">a</a></p>\n'
    )
    assert (
        render_markdown_with_path("[a](#frag)", False, None)
        == '<p><a href="#frag">a</a></p>\n'
    )


def test_inline_html_links_are_adjusted():
    out = render_markdown('<a href="x.md">y</a>', False)
    assert 'href="x.html"' in out
    assert "x.md" not in out


def test_it_generates_anchors():
    assert id_from_content("## Method-call expressions") == "method-call-expressions"
    assert id_from_content("## **Bold** title") == "bold-title"
    assert id_from_content("## `Code` title") == "code-title"
    assert id_from_content("## title <span dir=rtl>foo</span>") == "title-foo"


def test_it_generates_anchors_from_non_ascii_initial():
    assert (
        id_from_content("## `--passes`: add more rustdoc passes")
        == "--passes-add-more-rustdoc-passes"
    )
    assert id_from_content("## 中文標題 CJK title") == "中文標題-cjk-title"
    assert id_from_content("## Über") == "Über"


def test_it_normalizes_ids():
    assert (
        normalize_id("`--passes`: add more rustdoc passes")
        == "--passes-add-more-rustdoc-passes"
    )
    assert (
        normalize_id("Method-call 🐙 expressions \U0001f47c")
        == "method-call--expressions-"
    )
    assert normalize_id("_-_12345") == "_-_12345"
    assert normalize_id("12345") == "12345"
    assert normalize_id("中文") == "中文"
    assert normalize_id("にほんご") == "にほんご"
    assert normalize_id("한국어") == "한국어"
    assert normalize_id("") == ""


def test_it_generates_unique_ids_from_content():
    assert unique_id_from_content("## 中文標題 CJK title", {}) == "中文標題-cjk-title"
    assert unique_id_from_content("## 中文標題 CJK title", {}) == "中文標題-cjk-title"

    counter: dict[str, int] = {}
    assert unique_id_from_content("## Über", counter) == "Über"
    assert unique_id_from_content("## 中文標題 CJK title", counter) == "中文標題-cjk-title"
    assert unique_id_from_content("## Über", counter) == "Über-1"
    assert unique_id_from_content("## Über", counter) == "Über-2"


def test_escaped_brackets():
    assert bracket_escape("") == ""
    assert bracket_escape("<") == "&lt;"
    assert bracket_escape(">") == "&gt;"
    assert bracket_escape("<>") == "&lt;&gt;"
    assert bracket_escape("<test>") == "&lt;test&gt;"
    assert bracket_escape("a<test>b") == "a&lt;test&gt;b"


def test_collapse_whitespace():
    assert collapse_whitespace("a  b\n\n c") == "a b c"
    assert collapse_whitespace("a b") == "a b"