"""Escape text for XLIFF element content and attributes."""

from __future__ import annotations

from html import escape

_QUOTE_ENTITY = "&quot;"
_APOSTROPHE_ENTITY = "&#x27;"


def escape_text(text: str) -> str:
    """Escape ``text`` for element content, keeping literal quotes.

    ``&``, ``<`` and ``>`` stay escaped; the quote and apostrophe entities are
    turned back into ``"`` and ``'``. Escape each raw string once only: the
    result is not idempotent.

    Examples
    --------
    >>> escape_text('He said "hi" & left')
    'He said "hi" &amp; left'
    >>> escape_text("it's <b>")
    "it's &lt;b&gt;"
    """
    return (
        escape(text, quote=True)
        .replace(_QUOTE_ENTITY, '"')
        .replace(_APOSTROPHE_ENTITY, "'")
    )


def escape_attribute(value: str) -> str:
    """Escape ``value`` for a double-quoted attribute."""
    return escape(value, quote=True)


__all__ = ["escape_attribute", "escape_text"]
