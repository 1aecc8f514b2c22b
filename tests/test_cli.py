"""Tests for the ``docs-xliff export`` command."""

from __future__ import annotations

import typing as typ

import pytest

from docs_xliff import cli

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_export(tmp_path: Path) -> Path:
    path = tmp_path / "docs.yaml"
    path.write_text(
        """
pages:
  - persistent_id: page-1
    title: Intro
    blocks:
      - id: b1
        type: Callout
        text: Watch out & read
groups:
  - persistent_id: group-1
    title: Basics
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_export_writes_document(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = _write_export(tmp_path)
    output = tmp_path / "out" / "ja.xliff"

    cli.export(input_path=source, output=output)

    document = output.read_text(encoding="utf-8")
    assert '<trans-unit id="b1">' in document
    assert "<source>Watch out &amp; read</source>" in document
    assert '<trans-unit id="group-1-title">' in document
    printed = capsys.readouterr().out.strip()
    assert printed.startswith("wrote "), f"unexpected CLI output {printed!r}"
    assert printed.endswith("ja.xliff")


def test_export_uses_config_output_and_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = _write_export(tmp_path)
    config = tmp_path / "xliff.yaml"
    config.write_text(
        "output: build/fr.xliff\nxliff:\n  target_language: fr\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    cli.export(input_path=source, config=config)

    written = tmp_path / "build" / "fr.xliff"
    assert written.exists(), "expected the configured output path to be written"
    assert 'target-language="fr"' in written.read_text(encoding="utf-8")


def test_export_missing_input_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.export(input_path=tmp_path / "absent.yaml", output=tmp_path / "x.xliff")
