"""High-level orchestration for XLIFF exports.

:func:`build_xliff_output` is the pure entry point: it takes in-memory pages
and groups and returns the XLIFF document as a string. :class:`XliffExporter`
adds the surrounding steps used by the CLI, reading a documentation export
from disk and writing the rendered document.

Example
-------
>>> from docs_xliff.models import DocumentationPage
>>> xml = build_xliff_output([DocumentationPage("p1", "Intro")], [])
>>> '<trans-unit id="p1-title">' in xml
True
"""

from __future__ import annotations

import logging
import typing as typ

from .assembler import XliffAssembler
from .disambiguation import BlockIdRegistry
from .extractor import extract_units
from .loader import load_documentation

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import ExportConfig, XliffSettings
    from .models import DocumentationGroup, DocumentationPage

logger = logging.getLogger(__name__)


def build_xliff_output(
    pages: cabc.Sequence[DocumentationPage],
    groups: cabc.Sequence[DocumentationGroup],
    *,
    settings: XliffSettings | None = None,
) -> str:
    """Return an XLIFF 1.2 document listing every translatable string.

    Parameters
    ----------
    pages : Sequence[DocumentationPage]
        Pages to export, in output order.
    groups : Sequence[DocumentationGroup]
        Groups to export, in output order; root groups are skipped.
    settings : XliffSettings, optional
        Envelope attributes; defaults to ``en`` source and ``jp`` target.

    Returns
    -------
    str
        The complete document. Identical inputs give byte-identical output.

    Notes
    -----
    Each call uses its own :class:`BlockIdRegistry`, so concurrent or
    repeated calls never share identifier suffixes.
    """
    registry = BlockIdRegistry()
    units = extract_units(pages, groups, registry)
    logger.info(
        "exporting %d translation units from %d pages and %d groups",
        len(units),
        len(pages),
        len(groups),
    )
    return XliffAssembler(settings).render(units)


class XliffExporter:
    """Load a documentation export and write its XLIFF document to disk."""

    def __init__(self, config: ExportConfig) -> None:
        self.config = config

    def run(self, source: Path, *, output: Path | None = None) -> Path:
        """Export ``source`` and return the path of the written document.

        Parameters
        ----------
        source : Path
            YAML or JSON documentation export.
        output : Path, optional
            Destination file; defaults to the configured output path.

        Raises
        ------
        FileNotFoundError
            If ``source`` does not exist.
        DocumentationModelError
            If ``source`` does not describe a valid documentation model.
        """
        pages, groups = load_documentation(source)
        document = build_xliff_output(pages, groups, settings=self.config.settings)
        output_path = output or self.config.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        return output_path


__all__ = ["XliffExporter", "build_xliff_output"]
