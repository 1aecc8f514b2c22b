"""Per-run tracking of structural block ids."""

from __future__ import annotations


class BlockIdRegistry:
    """Hand out unique unit identifiers for possibly repeated block ids.

    Create one registry per export run and pass it to the extractor. The first
    claim of an id returns it unchanged; later claims append the number of
    earlier occurrences.

    Examples
    --------
    >>> registry = BlockIdRegistry()
    >>> [registry.claim("x") for _ in range(3)]
    ['x', 'x-1', 'x-2']
    """

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def claim(self, block_id: str) -> str:
        """Record an occurrence of ``block_id`` and return its unit identifier."""
        prior = self._occurrences.get(block_id, 0)
        self._occurrences[block_id] = prior + 1
        if prior:
            return f"{block_id}-{prior}"
        return block_id

    def occurrences(self, block_id: str) -> int:
        """Return how many times ``block_id`` has been claimed in this run."""
        return self._occurrences.get(block_id, 0)


__all__ = ["BlockIdRegistry"]
