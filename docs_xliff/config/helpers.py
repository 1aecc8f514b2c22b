"""Utility helpers shared by the export configuration loader."""

from __future__ import annotations

import typing as typ

from .models import ExportConfigError, XliffSettings


def _string_setting(
    payload: typ.Mapping[str, typ.Any], key: str, default: str
) -> str:
    """Return ``payload[key]`` as a stripped string, or ``default`` when unset."""
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        msg = f"Setting 'xliff.{key}' must be a string, got {type(value).__name__}."
        raise ExportConfigError(msg)
    text = value.strip()
    if not text:
        msg = f"Setting 'xliff.{key}' must not be empty."
        raise ExportConfigError(msg)
    return text


def _build_xliff_settings(payload: typ.Mapping[str, typ.Any]) -> XliffSettings:
    """Build XliffSettings from a mapping, falling back to the fixed defaults."""
    base = XliffSettings()
    return XliffSettings(
        source_language=_string_setting(
            payload, "source_language", base.source_language
        ),
        target_language=_string_setting(
            payload, "target_language", base.target_language
        ),
        original=_string_setting(payload, "original", base.original),
        tool_id=_string_setting(payload, "tool_id", base.tool_id),
        tool_name=_string_setting(payload, "tool_name", base.tool_name),
    )


__all__ = ["_build_xliff_settings", "_string_setting"]
