"""Binary table inspection CLI command."""

from __future__ import annotations

from pathlib import Path

from ..codec import decode
from ..codec.buffer import OFFSET_SIZE
from ..models import Table
from ..utils.sizing import encoded_size, entry_sizes, header_size


def describe_file(file_path: Path) -> None:
    """Decode a binary string table and print its layout.

    Args:
        file_path: Path to the binary file

    Raises:
        MalformedInputError: If the file is not a valid string table
        OSError: If the file cannot be read
    """
    data = file_path.read_bytes()
    table = decode(data)

    print(f"{'=' * 19} {file_path.name} {'=' * 19}")
    for line in describe_table(table, len(data)):
        print(line)


def describe_table(table: Table, file_size: int) -> list[str]:
    """Build the summary lines for a decoded table.

    Args:
        table: Decoded table
        file_size: Size of the file it was decoded from

    Returns:
        Lines of text, without trailing newlines
    """
    # An empty table is still written with a 4-byte first offset
    header = header_size(table.count) if table.count else OFFSET_SIZE
    lines = [
        f"Entries:     {table.count}",
        f"Header:      {header} bytes",
        f"Strings:     {file_size - header} bytes",
        f"Total:       {file_size} bytes",
    ]

    expected = encoded_size(table)
    if expected != file_size:
        lines.append(f"Repacked:    {expected} bytes (layout differs from file)")

    sizes = entry_sizes(table)
    if sizes:
        largest = max(sizes, key=lambda index: sizes[index])
        lines.append(f"Largest:     entry {largest} ({sizes[largest]} bytes)")

    return lines
