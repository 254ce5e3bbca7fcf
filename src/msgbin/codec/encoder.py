"""Binary string-table encoder.

This module provides the encode() function that lays out a Table as an
offset table followed by a blob of UTF-16LE terminated strings.
"""

from __future__ import annotations

from ..exceptions import InvalidTableError
from ..models import Table, find_index_problem
from .buffer import OFFSET_SIZE, ByteWriter


def encode(table: Table) -> bytes:
    """Encode a Table to its binary layout.

    Strings are written in ascending index order no matter how the table
    stores its entries, so equal tables always produce equal bytes.

    Args:
        table: Table to encode

    Returns:
        Offset table followed by the string blob

    Raises:
        InvalidTableError: If the indices are not dense, or a string cannot be laid out

    Example:
        >>> encode(Table.from_texts(["Hi"]))
        b'\\x04\\x00\\x00\\x00H\\x00i\\x00\\x00\\x00'
    """
    # model_construct() skips validation, so check again here
    problem = find_index_problem(table.count, [entry.index for entry in table.entries])
    if problem is not None:
        raise InvalidTableError(problem)

    # An empty table still needs a readable first offset of 0
    if table.count == 0:
        return bytes(OFFSET_SIZE)

    writer = ByteWriter(slot_count=table.count)
    for entry in sorted(table.entries, key=lambda entry: entry.index):
        try:
            writer.append_string(entry.index, entry.text)
        except UnicodeEncodeError as e:
            raise InvalidTableError(f"Entry {entry.index} is not encodable as UTF-16LE: {e}") from e
        except OverflowError as e:
            raise InvalidTableError(f"Entry {entry.index} cannot be placed: {e}") from e

    return writer.to_bytes()
