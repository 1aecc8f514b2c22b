r"""Load a documentation export (YAML or JSON) into the in-memory model.

The export is a mapping with ``pages`` and ``groups`` lists. Keys are accepted
in snake_case or in the camelCase used by the documentation store
(``persistentId``, ``isRoot``), and a page or group description may live
either at ``description`` or under ``configuration.header.description``.

Example
-------
>>> from docs_xliff.loader import parse_documentation
>>> pages, groups = parse_documentation(
...     {"pages": [{"persistentId": "p1", "title": "Intro", "blocks": []}]}
... )
>>> pages[0].persistent_id
'p1'
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import (
    BlockType,
    DocumentationGroup,
    DocumentationPage,
    DocumentationPageBlock,
    RichText,
    Shortcut,
    TextSpan,
)

logger = logging.getLogger(__name__)


class DocumentationModelError(ValueError):
    """Raised when a documentation export cannot be turned into the model."""


def load_documentation(
    path: Path,
) -> tuple[list[DocumentationPage], list[DocumentationGroup]]:
    """Read the documentation export at ``path``.

    Parameters
    ----------
    path : Path
        YAML or JSON file produced by the documentation store.

    Returns
    -------
    tuple[list[DocumentationPage], list[DocumentationGroup]]
        Pages and groups in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    DocumentationModelError
        If the file cannot be parsed or does not describe a valid model.
    """
    if not path.exists():
        msg = f"Documentation export '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except YAMLError as exc:
        msg = f"Could not parse documentation export '{path}': {exc}"
        raise DocumentationModelError(msg) from exc
    pages, groups = parse_documentation(loaded or {})
    logger.debug(
        "loaded %d pages and %d groups from %s", len(pages), len(groups), path
    )
    return pages, groups


def parse_documentation(
    payload: object,
) -> tuple[list[DocumentationPage], list[DocumentationGroup]]:
    """Build pages and groups from an already decoded export mapping."""
    raw = _mapping(payload, "documentation export")
    pages = [
        _build_page(entry, f"pages[{idx}]")
        for idx, entry in enumerate(_sequence(raw.get("pages"), "pages"))
    ]
    groups = [
        _build_group(entry, f"groups[{idx}]")
        for idx, entry in enumerate(_sequence(raw.get("groups"), "groups"))
    ]
    return pages, groups


def _mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    if not isinstance(value, dict):
        msg = f"Expected a mapping for {where}, got {type(value).__name__}."
        raise DocumentationModelError(msg)
    return typ.cast("dict[str, typ.Any]", value)


def _sequence(value: object, where: str) -> list[typ.Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Expected a list for {where}, got {type(value).__name__}."
        raise DocumentationModelError(msg)
    return value


def _first(payload: typ.Mapping[str, typ.Any], *keys: str) -> typ.Any:
    """Return the value of the first key present in ``payload``."""
    for key in keys:
        if key in payload:
            return payload[key]
    return None


def _required_str(
    payload: typ.Mapping[str, typ.Any], where: str, *keys: str
) -> str:
    value = _first(payload, *keys)
    if not isinstance(value, str | int) or isinstance(value, bool):
        msg = f"{where} is missing '{keys[0]}'."
        raise DocumentationModelError(msg)
    return str(value)


def _optional_text(value: object, where: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{where} must be a string, got {type(value).__name__}."
        raise DocumentationModelError(msg)
    return value


def _description(payload: typ.Mapping[str, typ.Any], where: str) -> str | None:
    """Return the header description from either supported location."""
    if "description" in payload:
        return _optional_text(payload["description"], f"{where}.description")
    configuration = payload.get("configuration") or {}
    header = _mapping(configuration, f"{where}.configuration").get("header") or {}
    value = _mapping(header, f"{where}.configuration.header").get("description")
    return _optional_text(value, f"{where}.configuration.header.description")


def _build_page(entry: object, where: str) -> DocumentationPage:
    payload = _mapping(entry, where)
    blocks = tuple(
        _build_block(block, f"{where}.blocks[{idx}]")
        for idx, block in enumerate(_sequence(payload.get("blocks"), f"{where}.blocks"))
    )
    return DocumentationPage(
        persistent_id=_required_str(payload, where, "persistent_id", "persistentId"),
        title=_required_str(payload, where, "title"),
        description=_description(payload, where),
        blocks=blocks,
    )


def _build_group(entry: object, where: str) -> DocumentationGroup:
    payload = _mapping(entry, where)
    is_root = _first(payload, "is_root", "isRoot")
    if is_root is not None and not isinstance(is_root, bool):
        msg = f"{where}.is_root must be a boolean."
        raise DocumentationModelError(msg)
    return DocumentationGroup(
        persistent_id=_required_str(payload, where, "persistent_id", "persistentId"),
        title=_required_str(payload, where, "title"),
        description=_description(payload, where),
        is_root=bool(is_root),
    )


def _block_type(value: object, where: str) -> BlockType:
    try:
        return BlockType(value)
    except ValueError as exc:
        known = ", ".join(member.value for member in BlockType)
        msg = f"{where} has unknown block type {value!r}. Known types: {known}"
        raise DocumentationModelError(msg) from exc


def _build_block(entry: object, where: str) -> DocumentationPageBlock:
    payload = _mapping(entry, where)
    children = tuple(
        _build_block(child, f"{where}.children[{idx}]")
        for idx, child in enumerate(
            _sequence(payload.get("children"), f"{where}.children")
        )
    )
    shortcuts = tuple(
        _build_shortcut(item, f"{where}.shortcuts[{idx}]")
        for idx, item in enumerate(
            _sequence(payload.get("shortcuts"), f"{where}.shortcuts")
        )
    )
    return DocumentationPageBlock(
        id=_required_str(payload, where, "id"),
        type=_block_type(payload.get("type"), where),
        children=children,
        text=_build_rich_text(payload.get("text"), f"{where}.text"),
        shortcuts=shortcuts,
    )


def _build_rich_text(value: object, where: str) -> RichText:
    """Accept a ``{spans: [...]}`` mapping, a bare span list, or a string."""
    match value:
        case None:
            return RichText()
        case str():
            return RichText(spans=(TextSpan(text=value),))
        case dict():
            spans = value.get("spans")
        case list():
            spans = value
        case _:
            msg = f"{where} must be a mapping, list, or string."
            raise DocumentationModelError(msg)
    return RichText(
        spans=tuple(
            _build_span(span, f"{where}.spans[{idx}]")
            for idx, span in enumerate(_sequence(spans, f"{where}.spans"))
        )
    )


def _build_span(entry: object, where: str) -> TextSpan:
    payload = _mapping(entry, where)
    text = payload.get("text")
    if not isinstance(text, str):
        msg = f"{where} is missing 'text'."
        raise DocumentationModelError(msg)
    attributes = tuple(
        str(attribute.get("type", "")) if isinstance(attribute, dict) else str(attribute)
        for attribute in _sequence(payload.get("attributes"), f"{where}.attributes")
    )
    return TextSpan(text=text, attributes=attributes)


def _build_shortcut(entry: object, where: str) -> Shortcut:
    payload = _mapping(entry, where)
    return Shortcut(
        title=_optional_text(payload.get("title"), f"{where}.title"),
        description=_optional_text(payload.get("description"), f"{where}.description"),
    )


__all__ = ["DocumentationModelError", "load_documentation", "parse_documentation"]
