"""Hiding of boilerplate lines in rendered code blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bookrender.postprocess import (
    Playground,
    RustEdition,
    add_playground_pre,
    build_header_links,
    fix_code_blocks,
)

_CODE_BLOCK = re.compile(r'(<code[^>]?class="([^"]+)".*?>(.*?)</code>)', re.DOTALL)
_LANGUAGE = re.compile(r"\blanguage-(\w+)\b")
_HIDELINES = re.compile(r"\bhidelines=(\S+)")
_BORING_LINE = re.compile(r"^(\s*)#(.?)(.*)$")

_BORING_OPEN = '<span class="boring">'
_BORING_CLOSE = "</span>"


@dataclass
class CodeConfig:
    """Code block settings: the hidden-line prefix for each language."""

    hidelines: dict[str, str] = field(default_factory=dict)


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def hide_lines_rust(content: str) -> str:
    """Wrap Rust lines starting with ``#`` in a "boring" span.

    ``##`` escapes to a literal ``#``; ``#!`` and ``#[`` lines are kept.
    """
    result: list[str] = []
    for line in _lines(content):
        found = _BORING_LINE.match(line)
        if found:
            indent, marker, rest = found.group(1), found.group(2), found.group(3)
            if marker == "#":
                result.append(f"{indent}{marker}{rest}\n")
                continue
            if marker not in ("!", "["):
                shown = "" if marker == " " else marker
                result.append(f"{_BORING_OPEN}{indent}{shown}{rest}\n{_BORING_CLOSE}")
                continue
        result.append(line + "\n")
    return "".join(result)


def hide_lines_with_prefix(content: str, prefix: str) -> str:
    """Wrap lines whose first non-blank text is ``prefix`` in a "boring" span."""
    result: list[str] = []
    for line in _lines(content):
        if line.lstrip().startswith(prefix):
            position = line.find(prefix)
            indent, rest = line[:position], line[position + len(prefix):]
            result.append(f"{_BORING_OPEN}{indent}{rest}\n{_BORING_CLOSE}")
        else:
            result.append(line + "\n")
    return "".join(result)


def _prefix_for(classes: str, code_config: CodeConfig) -> str | None:
    explicit = _HIDELINES.search(classes)
    if explicit:
        return explicit.group(1)
    language = _LANGUAGE.search(classes)
    if language:
        return code_config.hidelines.get(language.group(1))
    return None


def hide_lines(html: str, code_config: CodeConfig) -> str:
    """Mark hidden lines in every classed code block of ``html``."""

    def replace(match: re.Match[str]) -> str:
        text, classes, code = match.group(1), match.group(2), match.group(3)
        if "language-rust" in classes:
            return f'<code class="{classes}">{hide_lines_rust(code)}</code>'
        prefix = _prefix_for(classes, code_config)
        if prefix is None:
            return text
        return f'<code class="{classes}">{hide_lines_with_prefix(code, prefix)}</code>'

    return _CODE_BLOCK.sub(replace, html)


def post_process(
    rendered: str,
    playground: Playground,
    code_config: CodeConfig,
    edition: RustEdition | None = None,
) -> str:
    """Apply header links, code class fixes, playground wrapping and line hiding."""
    rendered = build_header_links(rendered)
    rendered = fix_code_blocks(rendered)
    rendered = add_playground_pre(rendered, playground, edition)
    return hide_lines(rendered, code_config)