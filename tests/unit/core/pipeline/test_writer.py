from __future__ import annotations

"""
Unit tests for the Output Persistence Component.

Verifies:
1. Parent directory creation for nested outputs.
2. Exact text persistence (no newline translation).
3. Byte-for-byte asset copies.
"""

from pathlib import Path

import pytest

from elbuilder.core.pipeline.components.writer import copy_asset, write_output_file


def test_write_output_file_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "build" / "deep" / "nested" / "page.html"

    write_output_file(str(target), "<p>ok</p>")

    assert target.read_text(encoding="utf-8") == "<p>ok</p>"


def test_write_output_file_preserves_line_endings(tmp_path: Path) -> None:
    target = tmp_path / "page.html"

    write_output_file(str(target), "a\r\nb\n")

    assert target.read_bytes() == b"a\r\nb\n"


def test_copy_asset_is_byte_identical(tmp_path: Path) -> None:
    src = tmp_path / "logo.png"
    payload = bytes(range(256)) * 4
    src.write_bytes(payload)
    dest = tmp_path / "build" / "img" / "logo.png"

    copy_asset(str(src), str(dest))

    assert dest.read_bytes() == payload


def test_copy_asset_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        copy_asset(str(tmp_path / "missing.bin"), str(tmp_path / "out.bin"))
