"""Previous/next chapter lookup and theme-picker labels for page templates."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from bookrender.fsutil import path_to_root

log = logging.getLogger(__name__)

Chapter = dict[str, str]


class NavTarget(Enum):
    """Which neighbour of the current page to look for."""

    PREVIOUS = "previous"
    NEXT = "next"

    def find(
        self,
        base_path: str,
        current_path: str,
        current_item: Chapter,
        previous_item: Chapter,
    ) -> Chapter | None:
        """Return the target chapter if this pair of chapters reveals it."""
        if self is NavTarget.NEXT:
            previous_path = previous_item.get("path")
            if previous_path is None:
                raise ValueError("No path found for chapter in JSON data")
            if previous_path == base_path:
                return dict(current_item)
        elif current_path == base_path:
            return dict(previous_item)
        return None


def _chapters(data: dict[str, Any]) -> list[Chapter]:
    chapters = data.get("chapters")
    if not isinstance(chapters, list) or not all(
        isinstance(item, dict)
        and all(isinstance(k, str) and isinstance(v, str) for k, v in item.items())
        for item in chapters
    ):
        raise ValueError("Could not decode the JSON data")
    return chapters


def _base_path(data: dict[str, Any]) -> str:
    path = data.get("path")
    if not isinstance(path, str):
        raise ValueError("Type error for `path`, string expected")
    return path.replace('"', "")


def _html_link(path: str) -> str:
    head, sep, name = path.rpartition("/")
    dot = name.rfind(".")
    stem = name[:dot] if dot > 0 else name
    return f"{head}{sep}{stem}.html".replace("\\", "/")


def find_chapter(data: dict[str, Any], target: NavTarget) -> Chapter | None:
    """Find the chapter before or after the page described by ``data``."""
    chapters = _chapters(data)
    base_path = _base_path(data)

    if "is_index" in data:
        # The index page may be synthetic, so it has no entry of its own to match.
        if target is NavTarget.PREVIOUS:
            return None
        with_path = [chapter for chapter in chapters if "path" in chapter]
        return dict(with_path[1]) if len(with_path) > 1 else None

    previous: Chapter | None = None
    for item in chapters:
        path = item.get("path")
        if not path:
            continue
        if previous is not None:
            found = target.find(base_path, path, item, previous)
            if found is not None:
                return found
        previous = item
    return None


def chapter_link(data: dict[str, Any], chapter: Chapter) -> dict[str, str]:
    """Template values for a link from the current page to ``chapter``."""
    base_path = _base_path(data)
    name = chapter.get("name")
    if name is None:
        raise ValueError("No title found for chapter in JSON data")
    path = chapter.get("path")
    if path is None:
        raise ValueError("No path found for chapter in JSON data")
    return {
        "path_to_root": path_to_root(base_path),
        "title": name,
        "link": _html_link(path),
    }


def previous_chapter(data: dict[str, Any]) -> dict[str, str] | None:
    """Link values for the chapter before the current page, if any."""
    chapter = find_chapter(data, NavTarget.PREVIOUS)
    return chapter_link(data, chapter) if chapter is not None else None


def next_chapter(data: dict[str, Any]) -> dict[str, str] | None:
    """Link values for the chapter after the current page, if any."""
    chapter = find_chapter(data, NavTarget.NEXT)
    return chapter_link(data, chapter) if chapter is not None else None


def theme_option(param: Any, data: dict[str, Any]) -> str:
    """Label for a theme in the picker, marked ``(default)`` for the default one."""
    if not isinstance(param, str):
        raise ValueError("Param 0 with String type is required for theme_option helper.")
    default_theme = data.get("default_theme")
    if not isinstance(default_theme, str):
        raise ValueError("Type error for `default_theme`, string expected")
    if param.lower() == default_theme.lower():
        return param + " (default)"
    return param