"""Shared pieces of the document formats.

A document format turns a Table into an editable text document and back.
Formats are registered by name so the CLI can select one with ``--format``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pydantic import ValidationError

from ..exceptions import MalformedInputError
from ..models import Entry, Table, find_index_problem

ROOT_NAME = "Entries"
ENTRY_NAME = "Entry"
COUNT_NAME = "Count"
INDEX_NAME = "Index"

_DECIMAL = re.compile(r"\s*[0-9]+\s*")


@dataclass(frozen=True)
class DocumentFormat:
    """A named document format and its conversion functions.

    Attributes:
        name: Name used on the command line
        extension: File suffix, including the dot
        serialize: Table -> document bytes
        deserialize: document bytes -> Table
    """

    name: str
    extension: str
    serialize: Callable[[Table], bytes]
    deserialize: Callable[[bytes], Table]


_FORMATS: dict[str, DocumentFormat] = {}


def register_format(document_format: DocumentFormat) -> DocumentFormat:
    """Register a document format under its name."""
    _FORMATS[document_format.name] = document_format
    return document_format


def get_format(name: str) -> DocumentFormat:
    """Look up a registered document format.

    Raises:
        ValueError: If no format has that name
    """
    try:
        return _FORMATS[name]
    except KeyError:
        known = ", ".join(sorted(_FORMATS))
        raise ValueError(f"Unknown document format: {name}. Must be one of: {known}") from None


def format_names() -> list[str]:
    return sorted(_FORMATS)


def parse_count(value: object, what: str) -> int:
    """Parse a non-negative decimal count or index from a document.

    Args:
        value: Raw attribute or field value
        what: Name used in the error message

    Raises:
        MalformedInputError: If the value is missing or not a non-negative integer
    """
    if isinstance(value, bool):
        raise MalformedInputError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, str) and _DECIMAL.fullmatch(value):
        return int(value)
    if value is None:
        raise MalformedInputError(f"Missing {what}")
    raise MalformedInputError(f"{what} must be a non-negative integer, got {value!r}")


def build_table(count: int, items: Iterable[tuple[int, str]]) -> Table:
    """Build a Table from (index, text) pairs read out of a document.

    Raises:
        MalformedInputError: If the indices do not cover ``0..count-1`` exactly once
    """
    entries = tuple(Entry(index=index, text=text) for index, text in items)

    problem = find_index_problem(count, [entry.index for entry in entries])
    if problem is not None:
        raise MalformedInputError(problem)

    try:
        return Table(count=count, entries=entries)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid table: {e}") from e
