"""Markdown book rendering: link fixing, anchors, code blocks, TOC, navigation, themes and site output."""

__version__ = "0.1.0"