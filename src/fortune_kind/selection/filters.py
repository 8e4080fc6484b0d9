"""
Module: selection.filters

Purpose:
    Apply FilterCriteria to a FortuneCollection. Filtering is pure: the
    input collection is never modified and relative order is preserved.

Key Functions:
    - apply_filters(): Length and category filtering
    - filter_by_length(): Length cap only
    - filter_by_category(): Category membership only

Used By:
    - controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from fortune_kind.core.models import Category, FortuneCollection

from .config import FilterCriteria

logger = logging.getLogger(__name__)


def filter_by_length(collection: FortuneCollection, max_length: Optional[int]) -> FortuneCollection:
    """Keep entries whose trimmed length is at most max_length (None = all)."""
    if max_length is None:
        return collection
    return FortuneCollection.from_entries(e for e in collection if e.length <= max_length)


def filter_by_category(collection: FortuneCollection, categories: Iterable[Category]) -> FortuneCollection:
    """Keep entries whose category is one of categories."""
    allowed = frozenset(categories)
    return FortuneCollection.from_entries(e for e in collection if e.category in allowed)


def apply_filters(collection: FortuneCollection, criteria: FilterCriteria) -> FortuneCollection:
    """
    Filter a collection by category and length.

    Args:
        collection: Fortunes to filter
        criteria: Filter settings

    Returns:
        New collection, a subsequence of the input

    Example:
        >>> c = FortuneCollection.from_entries([FortuneEntry("Hi"), FortuneEntry("Hello there")])
        >>> apply_filters(c, FilterCriteria(max_length=5)).texts
        ('Hi',)
    """
    filtered = filter_by_category(collection, criteria.allowed_categories)
    filtered = filter_by_length(filtered, criteria.max_length)

    logger.debug(
        f"Filtered {len(collection)} -> {len(filtered)} fortune(s) "
        f"(max_length={criteria.max_length}, categories={sorted(map(str, criteria.allowed_categories))})"
    )
    return filtered
