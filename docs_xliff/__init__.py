"""Export documentation pages and groups as XLIFF 1.2 translation files.

The package flattens each page's block tree, extracts every translatable
string with a unique identifier, and renders the result as an XLIFF document
that translation-management tools can fill in and send back.

Exports
-------
- ``build_xliff_output``: pure function returning the XLIFF document string.
- ``app``: Cyclopts application behind the ``docs-xliff`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docs_xliff import build_xliff_output
>>> build_xliff_output([], []).startswith('<?xml version="1.0"')
True
"""

from __future__ import annotations

from .cli import app, main
from .exporter import build_xliff_output

__all__ = ["app", "build_xliff_output", "main"]
