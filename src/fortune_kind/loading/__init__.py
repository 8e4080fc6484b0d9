"""
Module: loading

Purpose:
    Fortune file discovery and parsing. Turns a file or directory of
    ``%``-delimited text into a FortuneCollection.

Key Functions:
    - load_collection(): Load all fortunes behind a path
    - discover_sources(): List source files for a path
    - parse_entries(): Split text content into entries

Used By:
    - controller: Pipeline orchestration
"""

from .loader import (
    load_collection,
    load_source,
    discover_sources,
    LoaderError,
    SourceNotFoundError,
    SourceUnreadableError,
)
from .parser import parse_entries, join_entries, DEFAULT_DELIMITER

__all__ = [
    "load_collection",
    "load_source",
    "discover_sources",
    "LoaderError",
    "SourceNotFoundError",
    "SourceUnreadableError",
    "parse_entries",
    "join_entries",
    "DEFAULT_DELIMITER",
]
