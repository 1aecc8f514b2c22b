"""Render translation units into an XLIFF 1.2 document."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ._constants import DATATYPE, XLIFF_NAMESPACE, XLIFF_VERSION
from .config import XliffSettings
from .escaping import escape_attribute, escape_text

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import TranslationUnit


class XliffAssembler:
    """Wrap translation units in the XLIFF ``file``/``header``/``body`` envelope."""

    def __init__(
        self,
        settings: XliffSettings | None = None,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the assembler and its Jinja environment.

        Parameters
        ----------
        settings : XliffSettings, optional
            Envelope attributes; defaults to the fixed producer values
            (``en`` to ``jp``).
        templates_dir : Path, optional
            Directory containing ``xliff.jinja``; defaults to the package
            templates.
        """
        self.settings = settings or XliffSettings()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        # Text is escaped by the filters below, so Jinja must not escape again.
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["xliff_text"] = escape_text
        self.env.filters["xliff_attr"] = escape_attribute
        self.template = self.env.get_template("xliff.jinja")

    def render(self, units: cabc.Iterable[TranslationUnit]) -> str:
        """Return the complete XLIFF document for ``units``, in the given order."""
        return self.template.render(
            units=list(units),
            settings=self.settings,
            xliff_version=XLIFF_VERSION,
            xliff_namespace=XLIFF_NAMESPACE,
            datatype=DATATYPE,
        )


__all__ = ["XliffAssembler"]
