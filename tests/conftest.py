"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from msgbin import Table, encode


@pytest.fixture
def hi_bytes() -> bytes:
    """Binary table holding the single entry "Hi"."""
    return b"\x04\x00\x00\x00" + b"H\x00i\x00" + b"\x00\x00"


@pytest.fixture
def sample_table() -> Table:
    """Table with empty, non-ASCII, astral and multi-line entries."""
    return Table.from_texts(
        [
            "New Game",
            "",
            "Wörld & <friends>",
            "Smile \U0001f600",
            "First line\nSecond line",
        ]
    )


@pytest.fixture
def sample_bin(tmp_path: Path, sample_table: Table) -> Path:
    """Binary file written from sample_table."""
    path = tmp_path / "in" / "menu.bin"
    path.parent.mkdir()
    path.write_bytes(encode(sample_table))
    return path
