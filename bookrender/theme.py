"""Theme files used by the HTML renderer, with per-book overrides."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

# Relative file name inside a theme directory, and the Theme field it fills.
_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("index.hbs", "index"),
    ("head.hbs", "head"),
    ("redirect.hbs", "redirect"),
    ("header.hbs", "header"),
    ("book.js", "js"),
    ("css/chrome.css", "chrome_css"),
    ("css/general.css", "general_css"),
    ("css/print.css", "print_css"),
    ("css/variables.css", "variables_css"),
    ("highlight.js", "highlight_js"),
    ("clipboard.min.js", "clipboard_js"),
    ("highlight.css", "highlight_css"),
    ("tomorrow-night.css", "tomorrow_night_css"),
    ("ayu-highlight.css", "ayu_highlight_css"),
)


def load_file_contents(filename: str | os.PathLike[str]) -> bytes:
    """Read the whole of ``filename`` as bytes; raises ``OSError`` on failure."""
    return Path(filename).read_bytes()


def _load_with_warn(filename: Path) -> bytes | None:
    """Contents of ``filename`` if it exists and can be read, else ``None``."""
    if not filename.exists():
        return None
    try:
        return load_file_contents(filename)
    except OSError as exc:
        log.warning("Couldn't load custom file, %s: %s", filename, exc)
        return None


@dataclass
class Theme:
    """The templates, stylesheets and scripts that make up an HTML theme.

    The two favicons are ``None`` when the theme does not provide them.
    """

    index: bytes = b""
    head: bytes = b""
    redirect: bytes = b""
    header: bytes = b""
    chrome_css: bytes = b""
    general_css: bytes = b""
    print_css: bytes = b""
    variables_css: bytes = b""
    favicon_png: bytes | None = b""
    favicon_svg: bytes | None = b""
    js: bytes = b""
    highlight_css: bytes = b""
    tomorrow_night_css: bytes = b""
    ayu_highlight_css: bytes = b""
    highlight_js: bytes = b""
    clipboard_js: bytes = b""

    @classmethod
    def load(
        cls,
        theme_dir: str | os.PathLike[str],
        default: Theme | None = None,
    ) -> Theme:
        """Build a theme from ``default``, overridden by files found in ``theme_dir``.

        If only one favicon is overridden, the other is dropped rather than
        taken from the default.
        """
        base = default if default is not None else cls()
        theme = dataclasses.replace(base)
        theme_dir = Path(theme_dir)

        if not theme_dir.is_dir():
            return theme

        for relative, field_name in _OVERRIDES:
            contents = _load_with_warn(theme_dir / relative)
            if contents is not None:
                setattr(theme, field_name, contents)

        png = _load_with_warn(theme_dir / "favicon.png")
        svg = _load_with_warn(theme_dir / "favicon.svg")
        if png is not None:
            theme.favicon_png = png
        if svg is not None:
            theme.favicon_svg = svg
        if png is not None and svg is None:
            theme.favicon_svg = None
        elif svg is not None and png is None:
            theme.favicon_png = None

        return theme