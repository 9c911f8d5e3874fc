"""
HTML escaping and streaming output.

Text is escaped for one of two contexts: element content, where only
``&``, ``<`` and ``>`` matter, and double-quoted attribute values, where
quotes are escaped as well. ``HtmlWriter`` wraps any object with a ``write``
method so renderers can stream markup without building the whole table in
memory.
"""

from __future__ import annotations

from html import escape
from typing import Any, Optional, TextIO


def encode_text(text: Any) -> str:
    """Escape text for use as HTML element content."""
    if text is None:
        return ""
    return escape(str(text), quote=False)


def encode_attribute(value: Any) -> str:
    """Escape text for use inside a double-quoted HTML attribute."""
    if value is None:
        return ""
    return escape(str(value), quote=True)


class HtmlWriter:
    """Streaming writer that escapes on demand."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def markup(self, markup: str) -> "HtmlWriter":
        """Write trusted markup unchanged."""
        self.out.write(markup)
        return self

    def text(self, text: Any) -> "HtmlWriter":
        self.out.write(encode_text(text))
        return self

    def attribute(self, name: str, value: Optional[Any]) -> "HtmlWriter":
        """Write `` name="value"``, or nothing when value is None."""
        if value is not None:
            self.out.write(f' {name}="{encode_attribute(value)}"')
        return self

    def span_attribute(self, name: str, span: int) -> "HtmlWriter":
        """Write a ``rowspan``/``colspan`` attribute only when it covers more than one cell."""
        if span > 1:
            self.out.write(f' {name}="{span}"')
        return self
