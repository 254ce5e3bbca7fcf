"""Bounds-checked byte buffer access.

This module provides the low-level primitives shared by the encoder and the
decoder: little-endian uint32 slots and UTF-16LE strings with a 2-byte null
terminator.
"""

from __future__ import annotations

import struct

OFFSET_FORMAT = "<I"
OFFSET_SIZE = struct.calcsize(OFFSET_FORMAT)
MAX_OFFSET = 0xFFFFFFFF

TEXT_ENCODING = "utf-16-le"
TERMINATOR = b"\x00\x00"


class ByteReader:
    """Reads slots and spans from a byte buffer with explicit bounds checks.

    Every read validates its range before touching the buffer, so a corrupt
    offset surfaces as an IndexError instead of a short or wrapped slice.

    Example:
        >>> reader = ByteReader(b"\\x04\\x00\\x00\\x00H\\x00i\\x00\\x00\\x00")
        >>> reader.read_uint32(0)
        4
        >>> reader.read_span(4, 8)
        b'H\\x00i\\x00'
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over ``data``.

        Args:
            data: Byte buffer to read from
        """
        self._data = memoryview(data)

    def __len__(self) -> int:
        return len(self._data)

    def read_uint32(self, position: int) -> int:
        """Read a little-endian unsigned 32-bit integer.

        Args:
            position: Byte position of the integer

        Returns:
            Unsigned integer value

        Raises:
            IndexError: If the 4 bytes at ``position`` are not all in the buffer
        """
        self._check_range(position, position + OFFSET_SIZE)
        return struct.unpack_from(OFFSET_FORMAT, self._data, position)[0]

    def read_uint32_array(self, position: int, count: int) -> list[int]:
        """Read ``count`` consecutive little-endian unsigned 32-bit integers.

        Raises:
            IndexError: If the array extends past the end of the buffer
        """
        self._check_range(position, position + count * OFFSET_SIZE)
        return list(struct.unpack_from(f"<{count}I", self._data, position))

    def read_span(self, start: int, end: int) -> bytes:
        """Read the bytes in ``[start, end)``.

        Raises:
            IndexError: If the span is inverted or leaves the buffer
        """
        self._check_range(start, end)
        return bytes(self._data[start:end])

    def _check_range(self, start: int, end: int) -> None:
        if start < 0 or end < start or end > len(self._data):
            raise IndexError(
                f"Range [{start}, {end}) is outside buffer of {len(self._data)} bytes"
            )


class ByteWriter:
    """Builds an offset table followed by a blob of terminated strings.

    The header size is fixed up front; slots are filled in as strings are
    appended and the header is joined to the blob at the end.

    Example:
        >>> writer = ByteWriter(slot_count=1)
        >>> writer.append_string(0, "Hi")
        >>> writer.to_bytes()
        b'\\x04\\x00\\x00\\x00H\\x00i\\x00\\x00\\x00'
    """

    def __init__(self, slot_count: int) -> None:
        """Initialize a writer with ``slot_count`` zeroed header slots.

        Args:
            slot_count: Number of uint32 slots in the header
        """
        self._header = bytearray(slot_count * OFFSET_SIZE)
        self._blob = bytearray()

    def cursor(self) -> int:
        """Return the absolute position where the next string will start."""
        return len(self._header) + len(self._blob)

    def append_string(self, slot: int, text: str) -> None:
        """Record the cursor in ``slot`` and append ``text`` with its terminator.

        Args:
            slot: Header slot that receives the string's offset
            text: Text to encode as UTF-16LE

        Raises:
            IndexError: If ``slot`` is not a header slot
            OverflowError: If the cursor no longer fits in 32 bits
            UnicodeEncodeError: If ``text`` contains lone surrogates
        """
        position = slot * OFFSET_SIZE
        if not 0 <= position < len(self._header):
            raise IndexError(f"Slot {slot} is outside header of {len(self._header)} bytes")

        location = self.cursor()
        if location > MAX_OFFSET:
            raise OverflowError(f"Offset {location} does not fit in 32 bits")

        encoded = text.encode(TEXT_ENCODING)
        struct.pack_into(OFFSET_FORMAT, self._header, position, location)
        self._blob.extend(encoded)
        self._blob.extend(TERMINATOR)

    def to_bytes(self) -> bytes:
        """Return the header followed by the string blob."""
        return bytes(self._header) + bytes(self._blob)
