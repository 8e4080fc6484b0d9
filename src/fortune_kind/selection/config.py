"""
Module: selection.config

Purpose:
    Filter criteria for the fortune pipeline. Immutable configuration
    with validation on construction, plus the helper that turns the
    repeated ``--short`` flag into a length threshold.

Key Classes:
    - FilterCriteria: Length and category filter settings

Key Functions:
    - short_length_for_level(): Map a short-flag count to max length

Dependencies:
    - dataclasses (std)

Used By:
    - selection.filters: Filter engine
    - controller / cli
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Optional

from fortune_kind.core.models import Category

SHORT_LENGTH = 150
VERY_SHORT_LENGTH = 75


def short_length_for_level(level: int) -> Optional[int]:
    """
    Length threshold for a ``-s`` repeat count.

    Level 1 is "short" (150 characters); every further level halves the
    threshold, so level 2 is "very short" (75). Never drops below 1.

    Args:
        level: Number of times the short flag was given

    Returns:
        Maximum length, or None for level 0 (no limit)

    Example:
        >>> [short_length_for_level(n) for n in range(4)]
        [None, 150, 75, 37]
    """
    if level < 0:
        raise ValueError(f"level must be non-negative: {level}")
    if level == 0:
        return None
    # Large counts saturate at 1
    return max(SHORT_LENGTH >> min(level - 1, 64), 1)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Fortune filter settings (immutable).

    Attributes:
        max_length: Keep fortunes at most this many characters long
            (None = unlimited)
        category: Primary category to draw from
        include_unkind: Also draw from the unkind category. Only ever
            adds entries; standard fortunes are never removed by it.
        source_path: Explicit file or directory. Overrides configured
            default directories when set.

    Invariants:
        - max_length is None or max_length >= 0

    Example:
        >>> Category.UNKIND in FilterCriteria(include_unkind=True).allowed_categories
        True
    """

    max_length: Optional[int] = None
    category: Category = Category.STANDARD
    include_unkind: bool = False
    source_path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_length is not None and self.max_length < 0:
            raise ValueError(f"max_length must be non-negative: {self.max_length}")

    @property
    def allowed_categories(self) -> FrozenSet[Category]:
        """Categories an entry may belong to and still pass the filter."""
        if self.include_unkind:
            return frozenset({self.category, Category.UNKIND})
        return frozenset({self.category})

    def accepts_length(self, length: int) -> bool:
        return self.max_length is None or length <= self.max_length
