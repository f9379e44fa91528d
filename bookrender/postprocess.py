"""Post-processing of rendered HTML pages: header anchors and playground blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from bookrender.markdown import unique_id_from_content

_HEADER = re.compile(r"<h(\d)>(.*?)</h\d>")
_CODE_CLASSES = re.compile(r'<code([^>]+)class="([^"]+)"([^>]*)>')
_CODE_BLOCK = re.compile(r'(<code[^>]?class="([^"]+)".*?>(.*?)</code>)', re.DOTALL)


class RustEdition(Enum):
    """Rust language edition used to mark playground code blocks."""

    E2015 = "2015"
    E2018 = "2018"
    E2021 = "2021"

    @property
    def css_class(self) -> str:
        return f"edition{self.value}"


@dataclass
class Playground:
    """Settings that control how runnable code blocks are emitted."""

    editable: bool = False
    copyable: bool = True
    copy_js: bool = True
    line_numbers: bool = False
    languages: list[str] = field(default_factory=lambda: ["rust"])


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def insert_link_into_header(level: int, content: str, id_counter: dict[str, int]) -> str:
    """Wrap header ``content`` in a self-link with an id unique within ``id_counter``."""
    anchor = unique_id_from_content(content, id_counter)
    return (
        f'<h{level} id="{anchor}"><a class="header" href="#{anchor}">'
        f"{content}</a></h{level}>"
    )


def build_header_links(html: str) -> str:
    """Give every header tag an id and a link to itself."""
    id_counter: dict[str, int] = {}
    return _HEADER.sub(
        lambda m: insert_link_into_header(int(m.group(1)), m.group(2), id_counter),
        html,
    )


def fix_code_blocks(html: str) -> str:
    """Replace commas with spaces in the class attribute of code tags."""
    return _CODE_CLASSES.sub(
        lambda m: f'<code{m.group(1)}class="{m.group(2).replace(",", " ")}"{m.group(3)}>',
        html,
    )


def partition_source(source: str) -> tuple[str, str]:
    """Split code into its leading crate attributes/blank lines and the rest."""
    before: list[str] = []
    after: list[str] = []
    after_header = False
    for line in _lines(source):
        trimmed = line.strip()
        header = trimmed == "" or trimmed.startswith("#![")
        if not header or after_header:
            after_header = True
            after.append(line + "\n")
        else:
            before.append(line + "\n")
    return "".join(before), "".join(after)


def add_playground_pre_rust(
    playground: Playground,
    edition: RustEdition | None,
    classes: str,
    text: str,
    code: str,
) -> str:
    """Wrap a Rust code block in a playground ``<pre>``, adding ``main`` if needed."""
    runnable = (
        "ignore" not in classes
        and "noplayground" not in classes
        and "noplaypen" not in classes
    ) or "mdbook-runnable" in classes
    if not runnable:
        return f'<code class="{classes}">{code}</code>'

    forced = any(
        e.css_class in classes for e in (RustEdition.E2015, RustEdition.E2018, RustEdition.E2021)
    )
    edition_class = "" if forced or edition is None else " " + edition.css_class
    all_classes = classes + edition_class

    if (
        (playground.editable and "editable" in classes)
        or "fn main" in text
        or "quick_main!" in text
    ):
        content = code
    else:
        attrs, body = partition_source(code)
        content = f"\n# #![allow(unused)]\n{attrs}#fn main() {{\n{body}#}}"

    return f'<pre class="playground"><code class="{all_classes}">{content}</code></pre>'


def add_playground_pre(
    html: str, playground: Playground, edition: RustEdition | None = None
) -> str:
    """Wrap code blocks in configured playground languages in ``<pre class="playground">``."""

    def replace(match: re.Match[str]) -> str:
        text, classes, code = match.group(1), match.group(2), match.group(3)
        if not any(f"language-{lang}" in classes for lang in playground.languages):
            return text
        if "language-rust" in classes:
            return add_playground_pre_rust(playground, edition, classes, text, code)
        return f'<pre class="playground"><code class="{classes}">{code}</code></pre>'

    return _CODE_BLOCK.sub(replace, html)