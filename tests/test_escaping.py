"""Unit tests for XLIFF text escaping."""

from __future__ import annotations

import pytest

from docs_xliff.escaping import escape_attribute, escape_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('He said "hi" & left', 'He said "hi" &amp; left'),
        ("it's <b>bold</b>", "it's &lt;b&gt;bold&lt;/b&gt;"),
        ("“curly” ‘quotes’", "“curly” ‘quotes’"),
        ("plain", "plain"),
        ("", ""),
    ],
)
def test_escape_text(raw: str, expected: str) -> None:
    """Markup characters are escaped while quotes stay literal."""
    assert escape_text(raw) == expected


def test_escape_text_is_not_idempotent() -> None:
    """Escaping twice double-escapes the remaining entities."""
    once = escape_text("a & b")
    assert escape_text(once) == "a &amp;amp; b"


def test_literal_entity_text_is_escaped_not_unescaped() -> None:
    """Only entities produced by escaping are reversed."""
    assert escape_text("&quot;") == "&amp;quot;"


def test_escape_attribute_keeps_quote_entities() -> None:
    assert escape_attribute('a"b\'c&') == "a&quot;b&#x27;c&amp;"
