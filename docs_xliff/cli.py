"""Cyclopts CLI entrypoint for exporting documentation to XLIFF.

The ``docs-xliff`` console script reads a documentation export produced by the
documentation store, builds the XLIFF 1.2 translation file, and writes it to
disk. Options may also be supplied through ``INPUT_*`` environment variables,
which keeps the command usable from CI actions.

Examples
--------
Export with the default settings:

>>> from docs_xliff.cli import app
>>> app.run(["export", "--input", "docs.json"])  # doctest: +SKIP

Write to a custom path with a configuration file:

>>> app.run(
...     ["export", "--input", "docs.yaml", "--config", "config/xliff.yaml",
...      "--output", "dist/ja.xliff"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_export_config
from .exporter import XliffExporter

app = App(name="docs-xliff", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Export documentation pages and groups to an XLIFF 1.2 file.")
def export(
    *,
    input_path: typ.Annotated[
        Path,
        Parameter(
            name="--input",
            help="Documentation export (YAML or JSON)",
            env_var="INPUT_INPUT",
        ),
    ],
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to export config", env_var="INPUT_CONFIG"),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log progress details to stderr")
    ] = False,
) -> None:
    """Export a documentation model to XLIFF.

    Parameters
    ----------
    input_path : Path
        Documentation export file to read.
    config : Path or None, optional
        Optional YAML file overriding languages, tool metadata, and the
        default output path.
    output : Path or None, optional
        Destination file; falls back to the configured ``output``.
    verbose : bool, optional
        Enable DEBUG logging.

    Raises
    ------
    FileNotFoundError
        If the input or configuration file does not exist.
    ValueError
        If either file is malformed.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    export_config = load_export_config(config)
    written = XliffExporter(export_config).run(input_path, output=output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``docs-xliff`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
