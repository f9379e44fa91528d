"""Dotted-key access into nested TOML-style tables (plain dicts)."""

from __future__ import annotations

from typing import Any


def _split(key: str) -> tuple[str, str] | None:
    head, dot, tail = key.partition(".")
    return (head, tail) if dot else None


def read(value: Any, key: str) -> Any:
    """Look up a dotted ``key`` such as ``"output.html.theme"``.

    Returns ``None`` when any step of the path is missing or not a table.
    """
    if not isinstance(value, dict):
        return None
    parts = _split(key)
    if parts is None:
        return value.get(key)
    head, tail = parts
    return read(value.get(head), tail)


def insert(value: Any, key: str, item: Any) -> dict:
    """Set ``item`` at a dotted ``key``, creating tables along the way.

    If ``value`` is not a table it is replaced by a new one. The table that
    now holds the data is returned; when ``value`` was already a table it is
    modified in place and returned.
    """
    table = value if isinstance(value, dict) else {}
    parts = _split(key)
    if parts is None:
        table[key] = item
    else:
        head, tail = parts
        table[head] = insert(table.get(head), tail, item)
    return table


def delete(value: Any, key: str) -> Any:
    """Remove the entry at a dotted ``key`` and return it, or ``None`` if absent."""
    if not isinstance(value, dict):
        return None
    parts = _split(key)
    if parts is None:
        return value.pop(key, None)
    head, tail = parts
    return delete(value.get(head), tail)