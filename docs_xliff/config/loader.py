"""Load export configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docs_xliff._constants import DEFAULT_OUTPUT

from .helpers import _build_xliff_settings
from .models import ExportConfig, ExportConfigError


def load_export_config(path: Path | None) -> ExportConfig:
    """Load the YAML file describing XLIFF envelope settings.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the configuration file. ``None`` returns the
        defaults without touching the filesystem.

    Returns
    -------
    ExportConfig
        Settings for the ``file``/``tool`` elements and the output path.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    ExportConfigError
        If the YAML is not a mapping or a setting has the wrong type.

    Examples
    --------
    >>> from pathlib import Path
    >>> load_export_config(None).settings.target_language
    'jp'
    >>> load_export_config(Path("config/xliff.yaml"))  # doctest: +SKIP
    ExportConfig(...)
    """
    if path is None:
        return ExportConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ExportConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    xliff_raw = raw.get("xliff") or {}
    if not isinstance(xliff_raw, dict):
        msg = "The 'xliff' section must be a mapping."
        raise ExportConfigError(msg)

    output = raw.get("output", DEFAULT_OUTPUT)
    if not isinstance(output, str) or not output.strip():
        msg = "Setting 'output' must be a non-empty string."
        raise ExportConfigError(msg)

    return ExportConfig(
        settings=_build_xliff_settings(xliff_raw),
        output=Path(output.strip()),
    )


__all__ = ["load_export_config"]
