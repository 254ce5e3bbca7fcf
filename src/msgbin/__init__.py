"""msgbin: Binary String Table Converter

A Python library and command-line tool for converting "main" binary string
tables to and from editable XML or JSON documents.

The binary format is a header of little-endian uint32 offsets (one per entry;
the first offset is also the header size) followed by UTF-16LE strings, each
ending in a 2-byte null terminator.

Key Features:
- Bounds-checked decoding with clear errors for corrupt files
- Deterministic, byte-exact re-encoding
- Pydantic Table and Entry models
- XML and JSON document formats

Quick Start:
    >>> from msgbin import Table, decode, encode
    >>>
    >>> table = Table.from_texts(["Hello", "World"])
    >>> data = encode(table)
    >>> decode(data).texts
    ['Hello', 'World']
"""

from __future__ import annotations

__version__ = "0.1.0"

from .batch import extract, pack
from .codec import decode, encode
from .config import BatchConfig
from .documents import (
    DocumentFormat,
    get_format,
    table_from_json,
    table_from_xml,
    table_to_json,
    table_to_xml,
)
from .exceptions import (
    FileProcessingError,
    InvalidTableError,
    MalformedInputError,
    MsgbinError,
    UsageError,
)
from .models import Entry, Table
from .utils import encoded_size, entry_sizes, header_size

__all__ = [
    # Core API
    "Table",
    "Entry",
    "encode",
    "decode",
    # Documents
    "DocumentFormat",
    "get_format",
    "table_to_xml",
    "table_from_xml",
    "table_to_json",
    "table_from_json",
    # Batch
    "BatchConfig",
    "extract",
    "pack",
    # Exceptions
    "MsgbinError",
    "UsageError",
    "MalformedInputError",
    "InvalidTableError",
    "FileProcessingError",
    # Sizing
    "encoded_size",
    "entry_sizes",
    "header_size",
    # Version
    "__version__",
]
