"""
Module: selection

Purpose:
    Provides the SelectionResult dataclass returned by the selector.
    An empty result is an ordinary value, not an error: callers decide
    how to report that no fortune matched.

Key Functions:
    - SelectionResult.chosen(entry, candidates): Successful pick
    - SelectionResult.empty(): Nothing to pick from

Dependencies:
    - dataclasses (std)
    - .entries.FortuneEntry

Used By:
    - selection.selector
    - controller / cli
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .entries import FortuneEntry


@dataclass(frozen=True)
class SelectionResult:
    """
    Outcome of a random selection (immutable).

    Attributes:
        entry: The chosen fortune, or None when no entries were available
        candidate_count: Number of entries the pick was drawn from
        index: Position of the chosen entry in the candidate collection

    Invariants:
        - entry is None iff candidate_count == 0
        - index is None iff entry is None

    Example:
        >>> SelectionResult.empty().is_empty
        True
    """

    entry: Optional[FortuneEntry] = None
    candidate_count: int = 0
    index: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate result on construction."""
        if self.candidate_count < 0:
            raise ValueError(f"candidate_count must be non-negative: {self.candidate_count}")
        if (self.entry is None) != (self.candidate_count == 0):
            raise ValueError("entry must be set exactly when candidates exist")
        if (self.entry is None) != (self.index is None):
            raise ValueError("index must be set exactly when entry is set")

    @classmethod
    def chosen(cls, entry: FortuneEntry, candidate_count: int, index: int) -> SelectionResult:
        return cls(entry=entry, candidate_count=candidate_count, index=index)

    @classmethod
    def empty(cls) -> SelectionResult:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.entry is None

    @property
    def text(self) -> str:
        """Chosen text, or empty string for the empty outcome."""
        return self.entry.text if self.entry is not None else ""
