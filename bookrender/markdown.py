"""Markdown rendering and helpers for building HTML anchors."""

from __future__ import annotations

import html
import os
import re
from typing import Any

import mistune

_WHITESPACE_RUN = re.compile(r"\s\s+")
_HTML_TAG = re.compile(r"(<.*?>)")
_ENTITIES = ("&lt;", "&gt;", "&amp;", "&#39;", "&quot;")
_SCHEME_LINK = re.compile(r"^[a-z][a-z0-9+.-]*:")
_MD_LINK = re.compile(r"(?P<link>.*)\.md(?P<anchor>#.*)?")
_HTML_LINK = re.compile(r'(<(?:a|img) [^>]*?(?:src|href)=")([^"]+?)"')
_DASHES = re.compile(r"-{2,}")

_PLUGINS = ["table", "footnotes", "strikethrough", "task_lists"]
_BLOCK_TYPES = frozenset(
    {
        "paragraph",
        "heading",
        "block_text",
        "block_quote",
        "list_item",
        "table_cell",
        "footnote_item",
        "block_code",
    }
)
_OPENERS = set("([{-\u2013\u2014\"'\u201c\u2018")

PathLike = str | os.PathLike[str]


def collapse_whitespace(text: str) -> str:
    """Replace runs of two or more whitespace characters by a single space."""
    return _WHITESPACE_RUN.sub(" ", text)


def normalize_id(content: str) -> str:
    """Turn ``content`` into an HTML element id without ASCII whitespace."""
    out: list[str] = []
    for ch in content:
        if ch.isalnum() or ch in "_-":
            out.append(ch.lower() if ch.isascii() else ch)
        elif ch.isspace():
            out.append("-")
    return "".join(out)


def id_from_content(content: str) -> str:
    """Derive an anchor id from heading content, ignoring tags and entities."""
    content = _HTML_TAG.sub("", content)
    for entity in _ENTITIES:
        content = content.replace(entity, "")
    trimmed = content.strip().lstrip("#").strip()
    return normalize_id(trimmed)


def unique_id_from_content(content: str, id_counter: dict[str, int]) -> str:
    """Derive an anchor id, made unique by the counts kept in ``id_counter``."""
    base = id_from_content(content)
    count = id_counter.get(base, 0)
    id_counter[base] = count + 1
    return base if count == 0 else f"{base}-{count}"


def bracket_escape(text: str) -> str:
    """Escape ``<`` and ``>`` as HTML entities."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _fix_link(dest: str, path: PathLike | None) -> str:
    if dest.startswith("#"):
        if path is None:
            return dest
        base = os.fspath(path)
        if base.endswith(".md"):
            base = base[:-3] + ".html"
        return base + dest

    if _SCHEME_LINK.match(dest):
        return dest

    fixed = ""
    if path is not None:
        parent = os.path.dirname(os.fspath(path))
        if parent:
            fixed = parent + "/"

    found = _MD_LINK.search(dest)
    if found:
        fixed += found.group("link") + ".html" + (found.group("anchor") or "")
    else:
        fixed += dest
    return fixed


def _fix_html(fragment: str, path: PathLike | None) -> str:
    return _HTML_LINK.sub(
        lambda m: f'{m.group(1)}{_fix_link(m.group(2), path)}"', fragment
    )


def _clean_info(info: str) -> str:
    return "".join(
        "," if ch in " \t" else ch
        for ch in info
        if ch in " \t" or not ch.isspace()
    )


def _dashes(match: re.Match[str]) -> str:
    count = len(match.group(0))
    if count % 3 == 0:
        em, en = count // 3, 0
    elif count % 2 == 0:
        em, en = 0, count // 2
    elif count % 3 == 2:
        em, en = (count - 2) // 3, 1
    else:
        em, en = (count - 4) // 3, 2
    return "\u2014" * em + "\u2013" * en


class _BookRenderer(mistune.HTMLRenderer):
    """HTML renderer that rewrites links and tidies code block headers."""

    def __init__(self, curly_quotes: bool, path: PathLike | None) -> None:
        super().__init__(escape=False)
        self._curly = curly_quotes
        self._path = path
        self._prev: str | None = None

    def render_token(self, token: dict[str, Any], state: Any) -> str:
        if token["type"] in _BLOCK_TYPES:
            self._prev = None
        return super().render_token(token, state)

    def _smarten(self, text: str) -> str:
        text = text.replace("...", "\u2026")
        text = _DASHES.sub(_dashes, text)
        out: list[str] = []
        prev = self._prev
        for position, ch in enumerate(text):
            if ch in "'\"":
                nxt = text[position + 1] if position + 1 < len(text) else None
                opening = (prev is None or prev.isspace() or prev in _OPENERS) and (
                    nxt is not None and not nxt.isspace()
                )
                if ch == "'":
                    ch = "\u2018" if opening else "\u2019"
                else:
                    ch = "\u201c" if opening else "\u201d"
            out.append(ch)
            prev = ch
        return "".join(out)

    def text(self, text: str) -> str:
        if self._curly:
            text = self._smarten(text)
        if text:
            self._prev = text[-1]
        return super().text(text)

    def codespan(self, text: str) -> str:
        if text:
            self._prev = text[-1]
        return super().codespan(text)

    def softbreak(self) -> str:
        self._prev = "\n"
        return super().softbreak()

    def linebreak(self) -> str:
        self._prev = "\n"
        return super().linebreak()

    def link(self, text: str, url: str, title: str | None = None) -> str:
        return super().link(text, _fix_link(url, self._path), title)

    def image(self, text: str, url: str, title: str | None = None) -> str:
        return super().image(text, _fix_link(url, self._path), title)

    def inline_html(self, html_text: str) -> str:
        return _fix_html(html_text, self._path)

    def block_html(self, html_text: str) -> str:
        return _fix_html(html_text, self._path)

    def block_code(self, code: str, info: str | None = None) -> str:
        opening = "<pre><code"
        if info:
            cleaned = _clean_info(info)
            if cleaned:
                opening += f' class="language-{html.escape(cleaned)}"'
        return opening + ">" + html.escape(code, quote=False) + "</code></pre>\n"


def render_markdown_with_path(
    text: str, curly_quotes: bool, path: PathLike | None = None
) -> str:
    """Render Markdown to HTML, resolving links relative to ``path`` if given.

    ``.md`` link targets become ``.html``; links with a scheme are kept.
    """
    renderer = _BookRenderer(curly_quotes, path)
    markdown = mistune.create_markdown(renderer=renderer, plugins=_PLUGINS)
    return markdown(text)


def render_markdown(text: str, curly_quotes: bool) -> str:
    """Render Markdown to HTML."""
    return render_markdown_with_path(text, curly_quotes, None)