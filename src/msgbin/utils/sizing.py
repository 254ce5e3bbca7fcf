"""Layout size calculation utilities.

This module provides functions to calculate the encoded size of a table
without actually encoding it.
"""

from __future__ import annotations

from ..codec.buffer import OFFSET_SIZE, TERMINATOR, TEXT_ENCODING
from ..models import Table


def header_size(count: int) -> int:
    """Calculate the size of the offset table in bytes.

    Args:
        count: Number of entries

    Returns:
        Size in bytes

    Example:
        >>> header_size(3)
        12
    """
    return count * OFFSET_SIZE


def entry_size(text: str) -> int:
    """Calculate the size of one encoded string, terminator included.

    Example:
        >>> entry_size("Hi")
        6
    """
    return len(text.encode(TEXT_ENCODING)) + len(TERMINATOR)


def entry_sizes(table: Table) -> dict[int, int]:
    """Get the encoded size in bytes of each entry, keyed by index."""
    return {entry.index: entry_size(entry.text) for entry in table.ordered()}


def encoded_size(table: Table) -> int:
    """Calculate the exact length of ``encode(table)`` in bytes.

    Args:
        table: Table to measure

    Returns:
        Size in bytes

    Example:
        >>> encoded_size(Table.from_texts(["Hi"]))
        10
        >>> encoded_size(Table(count=0))
        4
    """
    if table.count == 0:
        return OFFSET_SIZE
    return header_size(table.count) + sum(entry_sizes(table).values())
