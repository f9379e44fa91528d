"""File-system helpers used when writing rendered output."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import BinaryIO

log = logging.getLogger(__name__)

_SEPARATORS = {sep for sep in (os.sep, os.altsep) if sep}


def normalize_path(path: str) -> str:
    """Replace every path separator of this platform with ``/``."""
    return "".join("/" if ch in _SEPARATORS else ch for ch in path)


def create_file(path: str | os.PathLike[str]) -> BinaryIO:
    """Create (or truncate) a file for binary writing, making parent directories."""
    path = Path(path)
    log.debug("Creating %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("wb")


def write_file(
    build_dir: str | os.PathLike[str],
    filename: str | os.PathLike[str],
    content: bytes,
) -> None:
    """Write ``content`` to ``build_dir/filename``, creating directories as needed."""
    with create_file(Path(build_dir) / filename) as handle:
        handle.write(content)


def path_to_root(path: str | os.PathLike[str]) -> str:
    """Return enough ``../`` to climb from the directory of ``path`` to its root.

    >>> path_to_root("some/relative/path")
    '../../'
    """
    parent = PurePath(path).parent
    return "".join(
        "../" for part in parent.parts if part not in (parent.anchor, ".", "..")
    )


def remove_dir_content(directory: str | os.PathLike[str]) -> None:
    """Delete everything inside ``directory`` but keep the directory itself."""
    for item in Path(directory).iterdir():
        if item.is_dir() and not item.is_symlink():
            shutil.rmtree(item)
        else:
            item.unlink()


def copy_files_except_ext(
    source: str | os.PathLike[str],
    target: str | os.PathLike[str],
    recursive: bool,
    avoid_dir: str | os.PathLike[str] | None,
    ext_blacklist: Iterable[str],
) -> None:
    """Copy files from ``source`` to ``target``, skipping blacklisted extensions.

    Subdirectories are copied when ``recursive`` is set, except ``target``
    itself and ``avoid_dir``.
    """
    source = Path(source)
    target = Path(target)
    avoid = Path(avoid_dir) if avoid_dir is not None else None
    blacklist = set(ext_blacklist)
    log.debug(
        "Copying all files from %s to %s (blacklist: %s), avoiding %s",
        source,
        target,
        sorted(blacklist),
        avoid,
    )

    if source == target:
        return

    for entry in source.iterdir():
        try:
            is_dir = entry.is_dir()
            is_file = entry.is_file()
            entry.stat()
        except OSError as exc:
            raise OSError(f"Failed to read {entry}") from exc

        if is_dir and recursive:
            if entry == target or (avoid is not None and entry == avoid):
                continue
            destination = target / entry.name
            if not destination.exists():
                destination.mkdir()
            copy_files_except_ext(entry, destination, True, avoid, blacklist)
        elif is_file:
            extension = entry.suffix[1:] if entry.suffix else None
            if extension is not None and extension in blacklist:
                continue
            log.debug("Copying %s to %s", entry, target / entry.name)
            shutil.copy(entry, target / entry.name)


def get_404_output_file(input_404: str | None) -> str:
    """Name of the HTML file produced for the configured 404 input."""
    name = "404.md" if input_404 is None else input_404
    return name.replace(".md", ".html")