"""Flatten page block trees into ordered block sequences.

The order is not a canonical depth-first pre-order. A page lists its
top-level blocks first, then each top-level block's descendants; a block's
descendants are its direct children followed by each child's descendants.

Example
-------
>>> from docs_xliff.models import BlockType, DocumentationPage
>>> from docs_xliff.models import DocumentationPageBlock as Block
>>> a = Block("a", BlockType.TEXT, children=(Block("a1", BlockType.TEXT),))
>>> page = DocumentationPage("p", "Page", blocks=(a, Block("b", BlockType.TEXT)))
>>> [block.id for block in flatten_page(page)]
['a', 'b', 'a1']
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .models import DocumentationPage, DocumentationPageBlock


def flatten_page(page: DocumentationPage) -> list[DocumentationPageBlock]:
    """Return every block of ``page``, top-level blocks first.

    Blocks sharing an id are all kept. Recursion depth grows with tree depth,
    so callers are responsible for bounding pathologically deep trees.
    """
    blocks = list(page.blocks)
    for block in page.blocks:
        blocks.extend(flatten_children(block))
    return blocks


def flatten_children(block: DocumentationPageBlock) -> list[DocumentationPageBlock]:
    """Return the descendants of ``block``: direct children, then theirs."""
    descendants = list(block.children)
    for child in block.children:
        descendants.extend(flatten_children(child))
    return descendants


__all__ = ["flatten_children", "flatten_page"]
