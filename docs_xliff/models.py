"""Typed dataclasses describing the documentation model and translation units."""

from __future__ import annotations

import dataclasses as dc
import enum


class BlockType(enum.StrEnum):
    """Closed set of block kinds that can appear in a documentation page."""

    TEXT = "Text"
    HEADING = "Heading"
    CODE = "Code"
    UNORDERED_LIST = "UnorderedList"
    ORDERED_LIST = "OrderedList"
    QUOTE = "Quote"
    CALLOUT = "Callout"
    DIVIDER = "Divider"
    IMAGE = "Image"
    EMBED = "Embed"
    LINK = "Link"
    SHORTCUTS = "Shortcuts"
    TOKEN = "Token"
    TOKEN_LIST = "TokenList"
    TOKEN_GROUP = "TokenGroup"
    FIGMA_EMBED = "FigmaEmbed"
    FIGMA_FRAMES = "FigmaFrames"
    STORYBOOK_EMBED = "StorybookEmbed"
    YOUTUBE_EMBED = "YoutubeEmbed"
    CUSTOM = "Custom"
    RENDER_CODE = "RenderCode"
    COMPONENT_ASSETS = "ComponentAssets"
    COLUMN = "Column"
    COLUMN_ITEM = "ColumnItem"
    TABS = "Tabs"
    TAB_ITEM = "TabItem"
    TABLE = "Table"
    TABLE_ROW = "TableRow"
    TABLE_CELL = "TableCell"


@dc.dataclass(slots=True, frozen=True)
class TextSpan:
    """A run of literal text with optional styling attributes."""

    text: str
    attributes: tuple[str, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class RichText:
    """Ordered spans that make up the text of a block."""

    spans: tuple[TextSpan, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class Shortcut:
    """One entry of a Shortcuts block."""

    title: str | None = None
    description: str | None = None


@dc.dataclass(slots=True, frozen=True)
class DocumentationPageBlock:
    """A node in a page's content tree.

    Attributes
    ----------
    id : str
        Structural identifier. The same id may appear more than once in a
        flattened page.
    type : BlockType
        Kind of the block.
    children : tuple[DocumentationPageBlock, ...]
        Nested blocks in document order.
    text : RichText
        Span payload for text-bearing kinds; empty for the rest.
    shortcuts : tuple[Shortcut, ...]
        Shortcut entries; only populated for ``BlockType.SHORTCUTS``.
    """

    id: str
    type: BlockType
    children: tuple[DocumentationPageBlock, ...] = ()
    text: RichText = dc.field(default_factory=RichText)
    shortcuts: tuple[Shortcut, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class DocumentationPage:
    """A documentation page and its top-level blocks."""

    persistent_id: str
    title: str
    description: str | None = None
    blocks: tuple[DocumentationPageBlock, ...] = ()


@dc.dataclass(slots=True, frozen=True)
class DocumentationGroup:
    """A folder grouping pages; the tree root is never exported."""

    persistent_id: str
    title: str
    description: str | None = None
    is_root: bool = False


@dc.dataclass(slots=True, frozen=True)
class ContextTag:
    """A ``context`` element inside a unit's location context group."""

    context_type: str
    value: str


@dc.dataclass(slots=True, frozen=True)
class TranslationUnit:
    """One source/target pair plus its location metadata.

    ``source`` and ``target`` hold raw, unescaped text; escaping happens when
    the unit is rendered.
    """

    id: str
    source: str
    target: str
    contexts: tuple[ContextTag, ...] = ()

    @classmethod
    def seeded(
        cls, unit_id: str, text: str, contexts: tuple[ContextTag, ...]
    ) -> TranslationUnit:
        """Return a unit whose target is initialised to its source."""
        return cls(id=unit_id, source=text, target=text, contexts=contexts)


__all__ = [
    "BlockType",
    "ContextTag",
    "DocumentationGroup",
    "DocumentationPage",
    "DocumentationPageBlock",
    "RichText",
    "Shortcut",
    "TextSpan",
    "TranslationUnit",
]
