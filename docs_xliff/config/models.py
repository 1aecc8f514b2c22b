"""Typed dataclasses describing XLIFF export settings."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docs_xliff._constants import (
    DEFAULT_OUTPUT,
    ORIGINAL_NAME,
    SOURCE_LANGUAGE,
    TARGET_LANGUAGE,
    TOOL_ID,
    TOOL_NAME,
)


class ExportConfigError(ValueError):
    """Raised when the export configuration is invalid."""


@dc.dataclass(slots=True, frozen=True)
class XliffSettings:
    """Attributes written into the XLIFF ``file`` and ``tool`` elements."""

    source_language: str = SOURCE_LANGUAGE
    target_language: str = TARGET_LANGUAGE
    original: str = ORIGINAL_NAME
    tool_id: str = TOOL_ID
    tool_name: str = TOOL_NAME


@dc.dataclass(slots=True, frozen=True)
class ExportConfig:
    """Resolved export configuration: envelope settings and output path."""

    settings: XliffSettings = dc.field(default_factory=XliffSettings)
    output: Path = Path(DEFAULT_OUTPUT)


__all__ = ["ExportConfig", "ExportConfigError", "XliffSettings"]
