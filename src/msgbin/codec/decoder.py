"""Binary string-table decoder.

This module provides the decode() function that converts a binary buffer
into a Table.
"""

from __future__ import annotations

from ..exceptions import MalformedInputError
from ..models import Entry, Table
from .buffer import OFFSET_SIZE, TERMINATOR, TEXT_ENCODING, ByteReader


def decode(data: bytes) -> Table:
    """Decode a binary string table.

    The entry count is derived from the first offset, which is also the size
    of the offset table. Each string runs from its offset to the next offset
    (or the end of the buffer for the last one), minus the 2-byte terminator.

    Args:
        data: Binary buffer to decode

    Returns:
        Table with entries in index order

    Raises:
        MalformedInputError: If an offset, span or string does not fit the buffer

    Example:
        >>> table = decode(b"\\x04\\x00\\x00\\x00H\\x00i\\x00\\x00\\x00")
        >>> table.texts
        ['Hi']
    """
    reader = ByteReader(data)

    try:
        first_offset = reader.read_uint32(0)
    except IndexError as e:
        raise MalformedInputError(f"Buffer too short for offset table: {e}") from e

    if first_offset % OFFSET_SIZE != 0:
        raise MalformedInputError(
            f"First offset {first_offset} is not a multiple of {OFFSET_SIZE}"
        )

    count = first_offset // OFFSET_SIZE
    try:
        offsets = reader.read_uint32_array(0, count)
    except IndexError as e:
        raise MalformedInputError(
            f"Offset table of {count} entries exceeds buffer of {len(reader)} bytes"
        ) from e

    # Each string ends where the next begins; the last one ends with the buffer.
    boundaries = offsets[1:] + [len(reader)]

    entries = []
    for index, (start, end) in enumerate(zip(offsets, boundaries)):
        text = _decode_string(reader, index, start, end)
        entries.append(Entry(index=index, text=text))

    return Table(count=count, entries=tuple(entries))


def _decode_string(reader: ByteReader, index: int, start: int, end: int) -> str:
    """Decode the terminated string occupying ``[start, end)``."""
    if end > len(reader):
        raise MalformedInputError(
            f"Entry {index} ends at {end}, past the end of the {len(reader)} byte buffer"
        )
    if end - start < len(TERMINATOR):
        raise MalformedInputError(
            f"Entry {index} span [{start}, {end}) has no room for its terminator"
        )

    try:
        raw = reader.read_span(start, end - len(TERMINATOR))
    except IndexError as e:
        raise MalformedInputError(f"Entry {index} is out of bounds: {e}") from e

    try:
        return raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Entry {index} is not valid UTF-16LE: {e}") from e
