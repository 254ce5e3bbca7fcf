"""String table models.

A table is the in-memory form shared by the binary codec and the document
formats. It is an immutable value: entries are frozen and the table is
validated once, on construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator


def find_index_problem(count: int, indices: Sequence[int]) -> str | None:
    """Check that ``indices`` is a dense 0-based sequence of ``count`` items.

    Order is not checked, only membership.

    Args:
        count: Declared number of entries
        indices: Entry indices in any order

    Returns:
        Description of the first problem found, or None if the indices are valid
    """
    if count != len(indices):
        return f"Count is {count} but there are {len(indices)} entries"

    seen: set[int] = set()
    for index in indices:
        if not 0 <= index < count:
            return f"Index {index} is out of range [0, {count})"
        if index in seen:
            return f"Duplicate index {index}"
        seen.add(index)

    return None


class Entry(BaseModel):
    """One string of the table, identified by its slot in the offset table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: int = Field(ge=0)
    text: str


class Table(BaseModel):
    """An ordered string table.

    Entries may be stored in any order, but their indices must cover
    ``0..count-1`` exactly once.

    Example:
        >>> table = Table.from_texts(["Hi", "Bye"])
        >>> table.count
        2
        >>> table.texts
        ['Hi', 'Bye']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    count: int = Field(ge=0)
    entries: tuple[Entry, ...] = ()

    @model_validator(mode="after")
    def check_dense_indices(self) -> Table:
        problem = find_index_problem(self.count, [entry.index for entry in self.entries])
        if problem is not None:
            raise ValueError(problem)
        return self

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> Table:
        """Build a table whose entry indices follow the order of ``texts``."""
        entries = tuple(Entry(index=i, text=text) for i, text in enumerate(texts))
        return cls(count=len(entries), entries=entries)

    def ordered(self) -> list[Entry]:
        """Return the entries sorted by index."""
        return sorted(self.entries, key=lambda entry: entry.index)

    @property
    def texts(self) -> list[str]:
        """Entry texts in index order."""
        return [entry.text for entry in self.ordered()]
