"""Turn documentation pages and groups into translation units.

Units are produced in a fixed multi-pass order so repeated exports are
byte-identical:

1. For each page: units for its text-bearing blocks in flattened order, then
   units for the entries of its Shortcuts blocks.
2. Title and description units for every page.
3. Title and description units for every non-root group.

Block units take their identifier from a :class:`BlockIdRegistry`; page,
group, and shortcut units derive theirs from the owning id plus a fixed
suffix.
"""

from __future__ import annotations

import enum
import logging
import typing as typ

from .flatten import flatten_page
from .models import BlockType, ContextTag, TranslationUnit

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .disambiguation import BlockIdRegistry
    from .models import DocumentationGroup, DocumentationPage, DocumentationPageBlock

logger = logging.getLogger(__name__)


class BlockRole(enum.Enum):
    """How a block kind takes part in the export."""

    TEXT = "text"
    SHORTCUTS = "shortcuts"
    STRUCTURAL = "structural"


def block_role(block_type: BlockType) -> BlockRole:
    """Return the export role of ``block_type``.

    Every member of :class:`BlockType` is listed so type checkers flag a new
    kind until it is classified here.
    """
    match block_type:
        case (
            BlockType.TEXT
            | BlockType.HEADING
            | BlockType.CALLOUT
            | BlockType.QUOTE
            | BlockType.ORDERED_LIST
            | BlockType.UNORDERED_LIST
        ):
            return BlockRole.TEXT
        case BlockType.SHORTCUTS:
            return BlockRole.SHORTCUTS
        case (
            BlockType.CODE
            | BlockType.DIVIDER
            | BlockType.IMAGE
            | BlockType.EMBED
            | BlockType.LINK
            | BlockType.TOKEN
            | BlockType.TOKEN_LIST
            | BlockType.TOKEN_GROUP
            | BlockType.FIGMA_EMBED
            | BlockType.FIGMA_FRAMES
            | BlockType.STORYBOOK_EMBED
            | BlockType.YOUTUBE_EMBED
            | BlockType.CUSTOM
            | BlockType.RENDER_CODE
            | BlockType.COMPONENT_ASSETS
            | BlockType.COLUMN
            | BlockType.COLUMN_ITEM
            | BlockType.TABS
            | BlockType.TAB_ITEM
            | BlockType.TABLE
            | BlockType.TABLE_ROW
            | BlockType.TABLE_CELL
        ):
            return BlockRole.STRUCTURAL
        case _:
            typ.assert_never(block_type)


def block_plain_text(block: DocumentationPageBlock) -> str:
    """Return the literal text of every span in ``block`` joined together."""
    return "".join(span.text for span in block.text.spans)


def block_unit(
    block: DocumentationPageBlock,
    page: DocumentationPage,
    registry: BlockIdRegistry,
) -> TranslationUnit:
    """Return the unit for a text-bearing ``block`` on ``page``."""
    return TranslationUnit.seeded(
        registry.claim(block.id),
        block_plain_text(block),
        (
            ContextTag("blocktype", block.type.value),
            ContextTag("pageid", page.persistent_id),
        ),
    )


def shortcut_units(
    block: DocumentationPageBlock, page: DocumentationPage
) -> list[TranslationUnit]:
    """Return title and description units for each entry of a Shortcuts block.

    Entries are numbered from zero in order. Empty or missing titles and
    descriptions produce no unit, but the entry still consumes its index.
    """
    units: list[TranslationUnit] = []
    for index, shortcut in enumerate(block.shortcuts):
        for subtype, text in (
            ("Title", shortcut.title),
            ("Description", shortcut.description),
        ):
            if not text:
                continue
            units.append(
                TranslationUnit.seeded(
                    f"{block.id}-{index}-{subtype.lower()}",
                    text,
                    (
                        ContextTag("blocktype", block.type.value),
                        ContextTag("index", str(index)),
                        ContextTag("subtype", subtype),
                        ContextTag("pageid", page.persistent_id),
                    ),
                )
            )
    return units


def page_block_units(
    page: DocumentationPage, registry: BlockIdRegistry
) -> list[TranslationUnit]:
    """Return block units for ``page`` followed by its shortcut units."""
    blocks = flatten_page(page)
    units = [
        block_unit(block, page, registry)
        for block in blocks
        if block_role(block.type) is BlockRole.TEXT
    ]
    for block in blocks:
        if block_role(block.type) is BlockRole.SHORTCUTS:
            units.extend(shortcut_units(block, page))
    logger.debug(
        "page %s: %d blocks flattened, %d units",
        page.persistent_id,
        len(blocks),
        len(units),
    )
    return units


def _metadata_units(
    persistent_id: str, title: str, description: str | None
) -> list[TranslationUnit]:
    """Return the title unit and, when non-empty, the description unit."""
    units = [
        TranslationUnit.seeded(
            f"{persistent_id}-title",
            title,
            (ContextTag("type", "Title"), ContextTag("pageid", persistent_id)),
        )
    ]
    if description:
        units.append(
            TranslationUnit.seeded(
                f"{persistent_id}-description",
                description,
                (
                    ContextTag("type", "Description"),
                    ContextTag("pageid", persistent_id),
                ),
            )
        )
    return units


def page_units(page: DocumentationPage) -> list[TranslationUnit]:
    """Return title/description units for ``page``."""
    return _metadata_units(page.persistent_id, page.title, page.description)


def group_units(group: DocumentationGroup) -> list[TranslationUnit]:
    """Return title/description units for ``group``; root groups yield none."""
    if group.is_root:
        return []
    return _metadata_units(group.persistent_id, group.title, group.description)


def extract_units(
    pages: cabc.Sequence[DocumentationPage],
    groups: cabc.Sequence[DocumentationGroup],
    registry: BlockIdRegistry,
) -> list[TranslationUnit]:
    """Return every translation unit for ``pages`` and ``groups`` in export order.

    Parameters
    ----------
    pages : Sequence[DocumentationPage]
        Pages in the order they should appear in the document.
    groups : Sequence[DocumentationGroup]
        Groups in document order; root groups are skipped.
    registry : BlockIdRegistry
        Identifier table for this run. Pass a fresh registry per export.

    Returns
    -------
    list[TranslationUnit]
        Units with unique identifiers, in the fixed export order.
    """
    units: list[TranslationUnit] = []
    for page in pages:
        units.extend(page_block_units(page, registry))
    for page in pages:
        units.extend(page_units(page))
    for group in groups:
        units.extend(group_units(group))
    return units


__all__ = [
    "BlockRole",
    "block_plain_text",
    "block_role",
    "block_unit",
    "extract_units",
    "group_units",
    "page_block_units",
    "page_units",
    "shortcut_units",
]
