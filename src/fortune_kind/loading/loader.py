"""
Module: loading.loader

Purpose:
    Resolve a fortune path (single file or directory) into readable text
    sources and load them into one FortuneCollection.

Key Functions:
    - discover_sources(): List the files behind a path, sorted by name
    - load_source(): Read and parse a single file
    - load_collection(): Load and merge every source behind a path

Key Classes:
    - LoaderError: Base exception for loading failures
    - SourceNotFoundError: Requested path does not exist
    - SourceUnreadableError: Path exists but cannot be read

Dependencies:
    - pathlib (std)
    - fortune_kind.core.models: FortuneCollection, Category
    - loading.parser: Entry parsing

Used By:
    - controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List

from fortune_kind.core.models import Category, FortuneCollection

from .parser import DEFAULT_DELIMITER, parse_entries

logger = logging.getLogger(__name__)

# strfile(1) writes binary indexes next to the text files; they are not fortunes.
INDEX_SUFFIXES = frozenset({".dat"})


class LoaderError(Exception):
    """Error loading fortunes from disk."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class SourceNotFoundError(LoaderError):
    """Requested fortune path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"The path {str(path)!r} does not exist", path)


class SourceUnreadableError(LoaderError):
    """Fortune path exists but could not be read."""

    def __init__(self, path: Path, reason: str = "") -> None:
        message = f"Cannot read {str(path)!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message, path)


def _stat_source(path: Path) -> os.stat_result:
    """
    Stat a requested path, mapping failures to loader errors.

    Raises:
        SourceNotFoundError: If path does not exist
        SourceUnreadableError: If path cannot be inspected (e.g. EACCES)
    """
    try:
        return path.stat()
    except FileNotFoundError as e:
        raise SourceNotFoundError(path) from e
    except OSError as e:
        raise SourceUnreadableError(path, e.strerror or str(e)) from e


def _is_fortune_file(path: Path) -> bool:
    """Regular, non-hidden file that is not a strfile index."""
    if path.name.startswith("."):
        return False
    if path.suffix.lower() in INDEX_SUFFIXES:
        return False
    try:
        return stat.S_ISREG(path.stat().st_mode)
    except OSError as e:
        logger.warning(f"Skipping {path}: {e.strerror or e}")
        return False


def discover_sources(path: Path) -> List[Path]:
    """
    Find the text sources behind a path.

    A file is its own sole source. For a directory, every regular file
    directly inside it is a source (no recursion), sorted by name so the
    merged order is reproducible.

    Args:
        path: File or directory of fortunes

    Returns:
        Source file paths, possibly empty

    Raises:
        SourceNotFoundError: If path does not exist
        SourceUnreadableError: If path cannot be inspected or the
            directory cannot be listed

    Example:
        >>> discover_sources(Path("fortunes"))
        [PosixPath('fortunes/a.txt'), PosixPath('fortunes/b.txt')]
    """
    if not stat.S_ISDIR(_stat_source(path).st_mode):
        return [path]

    try:
        children = list(path.iterdir())
    except OSError as e:
        raise SourceUnreadableError(path, e.strerror or str(e)) from e

    sources = sorted((child for child in children if _is_fortune_file(child)), key=lambda p: p.name)
    logger.debug(f"Discovered {len(sources)} source(s) in {path}")
    return sources


def load_source(
    path: Path,
    *,
    category: Category = Category.STANDARD,
    delimiter: str = DEFAULT_DELIMITER,
) -> FortuneCollection:
    """
    Read one fortune file and parse it.

    The file is opened, read in full and closed before returning.

    Raises:
        SourceNotFoundError: If the file vanished
        SourceUnreadableError: On permission or other IO failure
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise SourceNotFoundError(path) from e
    except OSError as e:
        raise SourceUnreadableError(path, e.strerror or str(e)) from e

    entries = parse_entries(content, delimiter=delimiter, category=category, source=path)
    logger.debug(f"Parsed {len(entries)} fortune(s) from {path.name}")
    return FortuneCollection.from_entries(entries)


def load_collection(
    path: Path,
    *,
    category: Category = Category.STANDARD,
    delimiter: str = DEFAULT_DELIMITER,
) -> FortuneCollection:
    """
    Load every fortune behind a path into one collection.

    Process:
    1. Discover sources (file itself, or sorted directory listing)
    2. Read and parse each source in turn
    3. Concatenate entries in source order

    Inside a directory a single unreadable file is skipped with a
    warning. The load only fails when nothing at all could be read.
    An empty directory yields an empty collection.

    Args:
        path: File or directory of fortunes
        category: Category to tag every loaded entry with
        delimiter: Entry delimiter token

    Returns:
        Merged FortuneCollection

    Raises:
        SourceNotFoundError: If path does not exist
        SourceUnreadableError: If path, or every file in it, is unreadable

    Example:
        >>> load_collection(Path("fortunes")).texts
        ('X', 'Y')
    """
    if not stat.S_ISDIR(_stat_source(path).st_mode):
        return load_source(path, category=category, delimiter=delimiter)

    sources = discover_sources(path)

    collections: List[FortuneCollection] = []
    failed = 0

    for source in sources:
        try:
            collections.append(load_source(source, category=category, delimiter=delimiter))
        except LoaderError as e:
            logger.warning(f"Skipping {source}: {e}")
            failed += 1

    if sources and failed == len(sources):
        raise SourceUnreadableError(path, f"none of {len(sources)} file(s) could be read")

    merged = FortuneCollection.merge(*collections)
    logger.info(f"Loaded {len(merged)} {category} fortune(s) from {path}")
    return merged
