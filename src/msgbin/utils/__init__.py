"""Utility functions for msgbin.

This module provides size calculation for the binary layout.
"""

from __future__ import annotations

from .sizing import encoded_size, entry_size, entry_sizes, header_size

__all__ = [
    "encoded_size",
    "entry_size",
    "entry_sizes",
    "header_size",
]
