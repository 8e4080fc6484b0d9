"""
Module: entries

Purpose:
    Provides the FortuneEntry and FortuneCollection dataclasses - the
    immutable units produced by parsing fortune files and consumed by
    filtering, selection and search.

Key Classes:
    - Category: STANDARD or UNKIND content category
    - FortuneEntry: A single fortune with its provenance
    - FortuneCollection: Ordered, immutable sequence of entries

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - loading.parser: Creates entries
    - loading.loader: Merges collections across sources
    - selection.filters / selection.selector / search.matcher
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple


class Category(str, Enum):
    """Content category a fortune was loaded under."""
    STANDARD = "standard"
    UNKIND = "unkind"  # Off-color fortunes, opt-in only

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class FortuneEntry:
    """
    A single fortune (immutable).

    Attributes:
        text: Fortune body with surrounding blank lines removed.
            Internal line breaks and indentation are kept verbatim.
        category: Category of the source the entry came from
        source: File the entry was parsed from, if any

    Invariants:
        - text is non-empty after whitespace trimming

    Example:
        >>> entry = FortuneEntry("Hello")
        >>> entry.length
        5
    """

    text: str
    category: Category = Category.STANDARD
    source: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate entry on construction."""
        if not self.text.strip():
            raise ValueError("FortuneEntry text must not be blank")

    @property
    def length(self) -> int:
        """Character count of the trimmed text."""
        return len(self.text.strip())

    @property
    def source_name(self) -> str:
        """File name of the source, or empty string for in-memory entries."""
        return self.source.name if self.source is not None else ""


@dataclass(frozen=True)
class FortuneCollection:
    """
    Ordered sequence of fortunes gathered from one or more sources.

    Order follows source discovery order, then position inside each
    source, so a fixed seed always maps to the same entry.

    Example:
        >>> c = FortuneCollection.from_entries([FortuneEntry("X"), FortuneEntry("Y")])
        >>> c.texts
        ('X', 'Y')
    """

    entries: Tuple[FortuneEntry, ...] = ()

    @classmethod
    def from_entries(cls, entries: Iterable[FortuneEntry]) -> FortuneCollection:
        """Build a collection from any iterable of entries."""
        return cls(tuple(entries))

    @classmethod
    def merge(cls, *collections: FortuneCollection) -> FortuneCollection:
        """Concatenate collections, preserving their order."""
        merged: list[FortuneEntry] = []
        for collection in collections:
            merged.extend(collection.entries)
        return cls(tuple(merged))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FortuneEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> FortuneEntry:
        return self.entries[index]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def texts(self) -> Tuple[str, ...]:
        """Entry texts in collection order."""
        return tuple(entry.text for entry in self.entries)
