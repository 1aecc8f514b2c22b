"""End-to-end tests for XLIFF document assembly.

These tests run ``build_xliff_output`` over a small documentation model and
inspect the resulting document: the fixed envelope, unit markup, escaping,
identifier uniqueness, and byte-identical output on repeated runs.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest
from bs4 import BeautifulSoup

from docs_xliff import build_xliff_output
from docs_xliff.assembler import XliffAssembler
from docs_xliff.config import XliffSettings
from docs_xliff.models import (
    BlockType,
    ContextTag,
    DocumentationGroup,
    DocumentationPage,
    RichText,
    Shortcut,
    TextSpan,
    TranslationUnit,
)
from docs_xliff.models import DocumentationPageBlock as Block

NS = {"x": "urn:oasis:names:tc:xliff:document:1.2"}


def _text_block(block_id: str, text: str, *children: Block) -> Block:
    return Block(
        id=block_id,
        type=BlockType.TEXT,
        children=children,
        text=RichText(spans=(TextSpan(text=text),)),
    )


@pytest.fixture
def pages() -> list[DocumentationPage]:
    """Return two pages with repeated block ids, shortcuts, and markup text."""
    return [
        DocumentationPage(
            "page-1",
            "Getting started",
            description="How to <begin>",
            blocks=(
                _text_block("x", 'He said "hi" & left', _text_block("x", "Nested")),
                Block(
                    id="shortcuts",
                    type=BlockType.SHORTCUTS,
                    shortcuts=(Shortcut(title="Docs", description="Tom's guide"),),
                ),
            ),
        ),
        DocumentationPage("page-2", "Tokens", blocks=(_text_block("x", "Again"),)),
    ]


@pytest.fixture
def groups() -> list[DocumentationGroup]:
    return [
        DocumentationGroup("root", "Root", description="All", is_root=True),
        DocumentationGroup("group-1", "Foundations"),
    ]


@pytest.fixture
def document(
    pages: list[DocumentationPage], groups: list[DocumentationGroup]
) -> str:
    return build_xliff_output(pages, groups)


def _units(document: str) -> list[ET.Element]:
    root = ET.fromstring(document.encode("utf-8"))
    return root.findall(".//x:trans-unit", NS)


def test_document_is_well_formed_xliff(document: str) -> None:
    """The output parses as XML with the XLIFF 1.2 namespace and envelope."""
    assert document.startswith(
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    )
    root = ET.fromstring(document.encode("utf-8"))
    assert root.tag == "{urn:oasis:names:tc:xliff:document:1.2}xliff"
    assert root.get("version") == "1.2"
    file_el = root.find("x:file", NS)
    assert file_el is not None, "expected a file element"
    assert file_el.attrib == {
        "source-language": "en",
        "target-language": "jp",
        "datatype": "plaintext",
        "original": "supernova-documentation.data",
    }
    tool = root.find("x:file/x:header/x:tool", NS)
    assert tool is not None, "expected a header tool element"
    assert tool.get("tool-id") == "supernova.io"
    assert tool.get("tool-name") == "supernova"


def test_unit_ids_are_unique_and_ordered(document: str) -> None:
    ids = [unit.get("id") for unit in _units(document)]
    assert ids == [
        "x",
        "x-1",
        "shortcuts-0-title",
        "shortcuts-0-description",
        "x-2",
        "page-1-title",
        "page-1-description",
        "page-2-title",
        "group-1-title",
    ]
    assert len(ids) == len(set(ids)), f"duplicate unit ids in {ids!r}"


def test_source_text_keeps_quotes_and_escapes_ampersand(document: str) -> None:
    """Quotes stay literal in the serialized document; ``&`` is an entity."""
    assert "<source>He said \"hi\" &amp; left</source>" in document
    assert "<target>He said \"hi\" &amp; left</target>" in document
    assert "<source>How to &lt;begin&gt;</source>" in document
    assert "<source>Tom's guide</source>" in document


def test_source_and_target_match(document: str) -> None:
    for unit in _units(document):
        source = unit.find("x:source", NS)
        target = unit.find("x:target", NS)
        assert source is not None and target is not None
        assert source.text == target.text


def test_context_groups_carry_location(document: str) -> None:
    soup = BeautifulSoup(document, "html.parser")
    unit = soup.find("trans-unit", attrs={"id": "shortcuts-0-description"})
    assert unit is not None, "expected the shortcut description unit"
    group = unit.find("context-group")
    assert group is not None and group.get("purpose") == "location"
    contexts = [
        (context.get("context-type"), context.get_text())
        for context in group.find_all("context")
    ]
    assert contexts == [
        ("blocktype", "Shortcuts"),
        ("index", "0"),
        ("subtype", "Description"),
        ("pageid", "page-1"),
    ]


def test_output_is_byte_identical_across_runs(
    pages: list[DocumentationPage], groups: list[DocumentationGroup]
) -> None:
    """Identifier tracking does not leak from one export into the next."""
    first = build_xliff_output(pages, groups)
    second = build_xliff_output(pages, groups)
    assert first == second


def test_empty_input_renders_empty_body() -> None:
    root = ET.fromstring(build_xliff_output([], []).encode("utf-8"))
    body = root.find("x:file/x:body", NS)
    assert body is not None
    assert list(body) == []


def test_settings_override_envelope() -> None:
    settings = XliffSettings(target_language="de", original="docs.data")
    document = build_xliff_output([], [], settings=settings)
    assert 'target-language="de"' in document
    assert 'original="docs.data"' in document


def test_assembler_escapes_ids_in_attributes() -> None:
    unit = TranslationUnit.seeded(
        'a"b', "text", (ContextTag("pageid", "p&1"),)
    )
    document = XliffAssembler().render([unit])
    assert '<trans-unit id="a&quot;b">' in document
    assert '<context context-type="pageid">p&amp;1</context>' in document
    ET.fromstring(document.encode("utf-8"))
