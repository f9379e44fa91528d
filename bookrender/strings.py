"""Helpers for pulling ranges and anchored sections out of text."""

from __future__ import annotations

import re

_ANCHOR_START = re.compile(r"ANCHOR:\s*(?P<anchor_name>[\w_-]+)")
_ANCHOR_END = re.compile(r"ANCHOR_END:\s*(?P<anchor_name>[\w_-]+)")


def _lines(text: str) -> list[str]:
    """Split text into lines on ``\\n``, dropping a trailing ``\\r`` from each.

    A final newline does not produce an empty trailing line.
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _in_range(index: int, start: int | None, stop: int | None) -> bool:
    lower = 0 if start is None else start
    return index >= lower and (stop is None or index < stop)


def take_lines(text: str, start: int | None = None, stop: int | None = None) -> str:
    """Return lines ``start`` (inclusive) to ``stop`` (exclusive) joined by newlines."""
    lower = 0 if start is None else start
    selected = _lines(text)[lower:stop] if stop is None or stop > lower else []
    return "\n".join(selected)


def _anchor_name(pattern: re.Pattern[str], line: str) -> str | None:
    found = pattern.search(line)
    return found.group("anchor_name") if found else None


def take_anchored_lines(text: str, anchor: str) -> str:
    """Return the lines between ``ANCHOR: anchor`` and ``ANCHOR_END: anchor``.

    Lines carrying any anchor marker are left out.
    """
    retained: list[str] = []
    anchor_found = False

    for line in _lines(text):
        if anchor_found:
            end_name = _anchor_name(_ANCHOR_END, line)
            if end_name is not None:
                if end_name == anchor:
                    break
            elif not _ANCHOR_START.search(line):
                retained.append(line)
        elif _anchor_name(_ANCHOR_START, line) == anchor:
            anchor_found = True

    return "\n".join(retained)


def take_rustdoc_include_lines(
    text: str, start: int | None = None, stop: int | None = None
) -> str:
    """Keep lines in the range as they are; prefix every other line with ``# ``."""
    return "\n".join(
        line if _in_range(index, start, stop) else "# " + line
        for index, line in enumerate(_lines(text))
    )


def take_rustdoc_include_anchored_lines(text: str, anchor: str) -> str:
    """Keep lines inside the named anchor as they are; hide the rest with ``# ``.

    Anchor marker lines themselves are dropped.
    """
    output: list[str] = []
    within_section = False

    for line in _lines(text):
        if within_section:
            end_name = _anchor_name(_ANCHOR_END, line)
            if end_name is not None:
                if end_name == anchor:
                    within_section = False
            elif not _ANCHOR_START.search(line):
                output.append(line)
            continue

        start_name = _anchor_name(_ANCHOR_START, line)
        if start_name is not None:
            if start_name == anchor:
                within_section = True
        elif not _ANCHOR_END.search(line):
            output.append("# " + line)

    return "\n".join(output)