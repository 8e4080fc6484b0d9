"""
Module: loading.parser

Purpose:
    Split raw fortune-file text into FortuneEntry objects. Fortunes are
    separated by a line holding only the delimiter token (``%``).

    Parsing is tolerant: it never raises on malformed input. Doubled
    delimiters, a missing trailing delimiter or a file without any
    delimiter simply produce fewer or more entries.

Key Functions:
    - parse_entries(): Parse text content into entries
    - join_entries(): Render entries back to the fortune-file format

Dependencies:
    - fortune_kind.core.models: FortuneEntry, Category

Used By:
    - loading.loader: Per-file parsing
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from fortune_kind.core.models import Category, FortuneEntry

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "%"


def parse_entries(
    content: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    category: Category = Category.STANDARD,
    source: Optional[Path] = None,
) -> List[FortuneEntry]:
    """
    Parse fortune-file content into entries.

    Rules:
    1. Lines end at ``\\n`` (an optional preceding ``\\r`` is dropped). A
       line equal to ``delimiter`` once trailing whitespace is removed
       ends the current segment
    2. Leading and trailing blank lines of each segment are dropped
    3. Segments that are blank after that produce no entry

    Args:
        content: Raw file text
        delimiter: Boundary token (a whole line)
        category: Category to tag every entry with
        source: Originating file, recorded on each entry

    Returns:
        Entries in file order

    Example:
        >>> [e.text for e in parse_entries("Hello\\n%\\nWorld\\n%\\n")]
        ['Hello', 'World']
    """
    entries: List[FortuneEntry] = []
    segment: List[str] = []
    dropped = 0

    # Only \\n and \\r\\n end a line; form feeds and other separators stay in the text
    for raw_line in content.split("\n"):
        line = raw_line.rstrip("\r")
        if line.rstrip() == delimiter:
            if _append_segment(entries, segment, category, source) is None:
                dropped += 1
            segment = []
        else:
            segment.append(line)

    if segment and _append_segment(entries, segment, category, source) is None:
        dropped += 1

    if dropped:
        logger.debug(f"Dropped {dropped} blank segment(s) from {source or 'content'}")
    return entries


def _append_segment(
    entries: List[FortuneEntry],
    lines: List[str],
    category: Category,
    source: Optional[Path],
) -> Optional[FortuneEntry]:
    """Trim blank edge lines from a segment and append it if non-empty."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1

    if start == end:
        return None

    entry = FortuneEntry(text="\n".join(lines[start:end]), category=category, source=source)
    entries.append(entry)
    return entry


def join_entries(entries: Iterable[FortuneEntry], *, delimiter: str = DEFAULT_DELIMITER) -> str:
    """
    Render entries in the on-disk format, each followed by a delimiter line.

    parse_entries(join_entries(entries)) yields the same texts.

    Example:
        >>> join_entries([FortuneEntry("Hello"), FortuneEntry("World")])
        'Hello\\n%\\nWorld\\n%\\n'
    """
    return "".join(f"{entry.text}\n{delimiter}\n" for entry in entries)
