"""Rendering of the table of contents sidebar."""

from __future__ import annotations

from typing import Any

from bookrender.fsutil import path_to_root
from bookrender.markdown import bracket_escape


def _chapters(data: dict[str, Any]) -> list[dict[str, str]]:
    chapters = data.get("chapters")
    if not isinstance(chapters, list) or not all(
        isinstance(item, dict)
        and all(isinstance(k, str) and isinstance(v, str) for k, v in item.items())
        for item in chapters
    ):
        raise ValueError("Could not decode the JSON data")
    return chapters


def _html_link(path: str) -> str:
    path = path.replace("\\", "/")
    head, sep, name = path.rpartition("/")
    dot = name.rfind(".")
    stem = name[:dot] if dot > 0 else name
    return f"{head}{sep}{stem}.html"


def _li_open_tag(is_expanded: bool, is_affix: bool) -> str:
    classes = "chapter-item "
    if is_expanded:
        classes += "expanded "
    if is_affix:
        classes += "affix "
    return f'<li class="{classes}">'


def render_toc(data: dict[str, Any], no_section_label: bool = False) -> str:
    """Render the chapter list in ``data`` as nested ``<ol>`` HTML.

    ``data`` holds ``chapters``, ``path``, ``fold_enable``, ``fold_level``
    and optionally ``section`` for the page being rendered.
    """
    chapters = _chapters(data)

    current_path = data.get("path")
    if not isinstance(current_path, str):
        raise ValueError("Type error for `path`, string expected")
    current_path = current_path.replace('"', "")

    section_value = data.get("section")
    current_section = section_value if isinstance(section_value, str) else ""

    fold_enable = data.get("fold_enable")
    if not isinstance(fold_enable, bool):
        raise ValueError("Type error for `fold_enable`, bool expected")

    fold_level = data.get("fold_level")
    if isinstance(fold_level, bool) or not isinstance(fold_level, int) or fold_level < 0:
        raise ValueError("Type error for `fold_level`, u64 expected")

    out = ['<ol class="chapter">']
    current_level = 1

    for item in chapters:
        if "spacer" in item:
            out.append('<li class="spacer"></li>')
            continue

        section = item.get("section")
        if section is not None:
            level = section.count(".")
        else:
            section, level = "", 1

        if not fold_enable or (section and current_section.startswith(section)):
            is_expanded = True
        else:
            is_expanded = level - 1 < fold_level

        if level > current_level:
            while level > current_level:
                out.append('<li><ol class="section">')
                current_level += 1
            out.append(_li_open_tag(is_expanded, False))
        elif level < current_level:
            while level < current_level:
                out.append("</ol></li>")
                current_level -= 1
            out.append(_li_open_tag(is_expanded, False))
        else:
            out.append(_li_open_tag(is_expanded, "section" not in item))

        if "part" in item:
            out.append(f'<li class="part-title">{bracket_escape(item["part"])}</li>')
            continue

        path = item.get("path")
        if path:
            out.append('<a href="')
            out.append(path_to_root(current_path))
            out.append(_html_link(path))
            out.append('"')
            if path == current_path:
                out.append(' class="active"')
            out.append(">")
        else:
            out.append("<div>")

        if not no_section_label and "section" in item:
            out.append(f'<strong aria-hidden="true">{item["section"]}</strong> ')

        if "name" in item:
            out.append(bracket_escape(item["name"]))

        out.append("</a>" if path else "</div>")

        if fold_enable and item.get("has_sub_items") == "true":
            out.append('<a class="toggle"><div>❱</div></a>')
        out.append("</li>")

    while current_level > 1:
        out.append("</ol></li>")
        current_level -= 1

    out.append("</ol>")
    return "".join(out)