"""Site-level steps of the HTML build: titles, print page, static files, redirects."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from bookrender.fsutil import path_to_root, write_file
from bookrender.theme import Theme

log = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]
RedirectRenderer = Callable[[dict[str, Any]], str]

_NOJEKYLL = b"This file makes sure that Github Pages doesn't process mdBook's output.\n"
_NOT_FOUND = "Page not found"


def maybe_wrong_theme_dir(directory: PathLike) -> bool:
    """Tell whether ``directory`` looks like a theme directory placed under the sources.

    It does when it exists and holds no Markdown files directly inside it.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return False
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                continue
            if is_file and Path(entry.name).suffix == ".md":
                return False
    return True


def edit_url(template: str, src: PathLike, source_path: PathLike | None) -> str:
    """Fill the ``{path}`` placeholder of an edit-URL template for a chapter."""
    relative = os.fspath(source_path) if source_path is not None else ""
    full_path = f"{os.fspath(src)}/{relative}"
    return template.replace("{path}", full_path)


def chapter_title(
    name: str,
    book_title: str,
    chapter_titles: Mapping[Any, str],
    path: PathLike,
) -> str:
    """Page title of a chapter: an explicit override, or the name plus the book title."""
    for key in (path, Path(path), os.fspath(path)):
        if key in chapter_titles:
            return chapter_titles[key]
    if not book_title:
        return name
    return f"{name} - {book_title}"


def not_found_title(book_title: str | None) -> str:
    """Title of the 404 page."""
    if book_title is None:
        return _NOT_FOUND
    return f"{_NOT_FOUND} - {book_title}"


def configure_print_version(data: dict[str, Any], print_content: str) -> None:
    """Turn page template ``data`` into data for the print page, in place."""
    data.pop("title", None)
    data["is_print"] = True
    data["path"] = "print.md"
    data["content"] = print_content
    data["path_to_root"] = path_to_root("print.md")


def write_theme_files(
    destination: PathLike,
    theme: Theme,
    print_enable: bool,
    cname: str | None,
) -> None:
    """Write the theme's static files, plus ``.nojekyll`` and an optional ``CNAME``."""
    write_file(destination, ".nojekyll", _NOJEKYLL)
    if cname is not None:
        write_file(destination, "CNAME", f"{cname}\n".encode())

    write_file(destination, "book.js", theme.js)
    write_file(destination, "css/general.css", theme.general_css)
    write_file(destination, "css/chrome.css", theme.chrome_css)
    if print_enable:
        write_file(destination, "css/print.css", theme.print_css)
    write_file(destination, "css/variables.css", theme.variables_css)
    if theme.favicon_png is not None:
        write_file(destination, "favicon.png", theme.favicon_png)
    if theme.favicon_svg is not None:
        write_file(destination, "favicon.svg", theme.favicon_svg)
    write_file(destination, "highlight.css", theme.highlight_css)
    write_file(destination, "tomorrow-night.css", theme.tomorrow_night_css)
    write_file(destination, "ayu-highlight.css", theme.ayu_highlight_css)
    write_file(destination, "highlight.js", theme.highlight_js)
    write_file(destination, "clipboard.min.js", theme.clipboard_js)


def copy_additional_files(
    files: Iterable[PathLike], root: PathLike, destination: PathLike
) -> None:
    """Copy extra CSS/JS files from the book root into the output directory."""
    root = Path(root)
    destination = Path(destination)
    log.debug("Copying additional CSS and JS")
    for custom_file in files:
        input_location = root / custom_file
        output_location = destination / custom_file
        parent = output_location.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OSError(f"Unable to create {parent}") from exc
        log.debug("Copying %s -> %s", input_location, output_location)
        try:
            shutil.copyfile(input_location, output_location)
        except OSError as exc:
            raise OSError(
                f"Unable to copy {input_location} to {output_location}"
            ) from exc


def emit_redirect(
    original: PathLike, destination: str, render: RedirectRenderer
) -> None:
    """Write a redirect page at ``original`` pointing to ``destination``.

    ``render`` turns the template context ``{"url": destination}`` into HTML.
    Raises ``FileExistsError`` rather than overwrite an existing file.
    """
    original = Path(original)
    if original.exists():
        raise FileExistsError(
            f'Not redirecting "{original}" to "{destination}" because it already '
            "exists. Are you sure it needs to be redirected?"
        )
    try:
        original.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f'Unable to ensure "{original.parent}" exists') from exc

    with original.open("w", encoding="utf-8") as handle:
        try:
            handle.write(render({"url": destination}))
        except Exception as exc:
            raise RuntimeError(
                f'Unable to create a redirect file at "{original}"'
            ) from exc


def emit_redirects(
    root: PathLike, redirects: Mapping[str, str], render: RedirectRenderer
) -> None:
    """Write a redirect page for every ``original -> new`` entry under ``root``.

    A leading slash on an original path is ignored.
    """
    if not redirects:
        return
    log.debug("Emitting redirects")
    root = Path(root)
    for original, new in redirects.items():
        log.debug('Redirecting "%s" -> "%s"', original, new)
        emit_redirect(root / original.lstrip("/"), new, render)