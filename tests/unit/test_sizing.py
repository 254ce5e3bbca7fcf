"""Unit tests for layout size utilities."""

from __future__ import annotations

from msgbin import Table, encode
from msgbin.utils import encoded_size, entry_size, entry_sizes, header_size


class TestSizing:
    """Test size calculations."""

    def test_header_size(self) -> None:
        assert header_size(0) == 0
        assert header_size(3) == 12

    def test_entry_size(self) -> None:
        """Test text bytes plus terminator."""
        assert entry_size("") == 2
        assert entry_size("Hi") == 6
        assert entry_size("\U0001f600") == 6

    def test_entry_sizes(self) -> None:
        table = Table.from_texts(["a", "bcd"])
        assert entry_sizes(table) == {0: 4, 1: 8}

    def test_encoded_size_empty(self) -> None:
        """Test the empty table still has a first offset."""
        assert encoded_size(Table(count=0)) == 4

    def test_encoded_size_matches_encode(self, sample_table: Table) -> None:
        assert encoded_size(sample_table) == len(encode(sample_table))
