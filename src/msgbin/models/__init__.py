"""Pydantic models for string tables.

This module provides the Entry and Table models passed between the binary
codec and the document formats.
"""

from __future__ import annotations

from .table import Entry, Table, find_index_problem

__all__ = [
    "Entry",
    "Table",
    "find_index_problem",
]
