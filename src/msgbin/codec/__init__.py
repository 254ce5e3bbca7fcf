"""Binary string-table codec for msgbin.

This module provides encoding and decoding between binary string tables and
Table models.
"""

from __future__ import annotations

from .buffer import ByteReader, ByteWriter
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "ByteReader",
    "ByteWriter",
]
