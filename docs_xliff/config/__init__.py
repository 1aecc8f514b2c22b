"""Load and validate XLIFF export configuration.

The configuration file is optional. When present it overrides the envelope
attributes written into the generated document (languages, ``original`` file
name, tool id and name) and the default output path. The primary entry point
is :func:`load_export_config`.

Examples
--------
>>> from pathlib import Path
>>> from docs_xliff.config import load_export_config
>>> config = load_export_config(Path("config/xliff.yaml"))  # doctest: +SKIP
>>> config.settings.source_language  # doctest: +SKIP
'en'
"""

from .loader import load_export_config
from .models import ExportConfig, ExportConfigError, XliffSettings

__all__ = [
    "ExportConfig",
    "ExportConfigError",
    "XliffSettings",
    "load_export_config",
]
