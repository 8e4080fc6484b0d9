"""
Module: search.matcher

Purpose:
    Find every fortune whose text matches a regular expression.

Key Functions:
    - compile_pattern(): Validate and compile a search pattern
    - search_fortunes(): Return all matching entries

Key Classes:
    - SearchError: Invalid search pattern

Dependencies:
    - re: Pattern matching

Used By:
    - controller.find_fortunes
"""

from __future__ import annotations

import logging
import re
from typing import Pattern, Union

from fortune_kind.core.models import FortuneCollection

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """Search pattern could not be compiled."""
    pass


def compile_pattern(pattern: str, *, ignore_case: bool = False) -> Pattern[str]:
    """
    Compile a search pattern.

    Raises:
        SearchError: If pattern is empty or not a valid regex
    """
    if not pattern:
        raise SearchError("Search pattern must not be empty")
    flags = re.MULTILINE | (re.IGNORECASE if ignore_case else 0)
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise SearchError(f"Invalid search pattern {pattern!r}: {e}") from e


def search_fortunes(
    collection: FortuneCollection,
    pattern: Union[str, Pattern[str]],
    *,
    ignore_case: bool = False,
) -> FortuneCollection:
    """
    Return every entry whose text matches pattern anywhere.

    Args:
        collection: Fortunes to search
        pattern: Regex string or precompiled pattern
        ignore_case: Case-insensitive matching; only valid with a string
            pattern, a compiled pattern carries its own flags

    Returns:
        Matching entries in collection order (may be empty)

    Raises:
        SearchError: If pattern is invalid
        ValueError: If ignore_case is given with a compiled pattern

    Example:
        >>> search_fortunes(collection, r"Linux").texts
        ('Linux is great', 'Linux is fast')
    """
    if isinstance(pattern, re.Pattern):
        if ignore_case:
            raise ValueError("ignore_case cannot be combined with a compiled pattern; set re.IGNORECASE on it instead")
        regex = pattern
    else:
        regex = compile_pattern(pattern, ignore_case=ignore_case)
    matches = FortuneCollection.from_entries(e for e in collection if regex.search(e.text))
    logger.debug(f"Pattern {regex.pattern!r} matched {len(matches)} of {len(collection)} fortune(s)")
    return matches
