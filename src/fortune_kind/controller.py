"""
Module: controller

Purpose:
    Orchestrate the fortune pipeline.
    Resolve sources → Load → Filter → Select (or Search)

Key Functions:
    - resolve_sources(): Decide which paths to load, per category
    - load_fortunes(): Load and merge all needed sources
    - draw_fortune(): Main entry point for picking a fortune
    - find_fortunes(): Main entry point for pattern search

Dependencies:
    - fortune_kind.loading: Source loading
    - fortune_kind.selection: Filtering and selection
    - fortune_kind.search: Pattern search

Used By:
    - fortune_kind.cli: Command line interface
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Tuple

from fortune_kind.core.models import Category, FortuneCollection, SelectionResult

from .config import FortuneConfig
from .loading import load_collection
from .search import compile_pattern, search_fortunes
from .selection import FilterCriteria, apply_filters, select_fortune

logger = logging.getLogger(__name__)


def resolve_sources(config: FortuneConfig, criteria: FilterCriteria) -> List[Tuple[Path, Category]]:
    """
    Work out which paths to load and the category of each.

    An explicit criteria.source_path always wins over the configured
    directories and is loaded under criteria.category. Otherwise one
    configured root is used per allowed category, standard first.

    Args:
        config: Default directories
        criteria: Filter settings (categories, explicit path)

    Returns:
        (path, category) pairs in load order

    Example:
        >>> resolve_sources(config, FilterCriteria(include_unkind=True))
        [(PosixPath('.../fortunes'), <Category.STANDARD: 'standard'>),
         (PosixPath('.../off'), <Category.UNKIND: 'unkind'>)]
    """
    if criteria.source_path is not None:
        return [(criteria.source_path, criteria.category)]

    allowed = criteria.allowed_categories
    return [
        (config.root_for(category), category)
        for category in (Category.STANDARD, Category.UNKIND)
        if category in allowed
    ]


def load_fortunes(config: FortuneConfig, criteria: FilterCriteria) -> FortuneCollection:
    """
    Load every source the criteria call for into one collection.

    Raises:
        SourceNotFoundError: If a required path does not exist
        SourceUnreadableError: If a required path cannot be read
    """
    collections = [
        load_collection(path, category=category, delimiter=config.delimiter)
        for path, category in resolve_sources(config, criteria)
    ]
    merged = FortuneCollection.merge(*collections)
    logger.debug(f"Loaded {len(merged)} fortune(s) from {len(collections)} root(s)")
    return merged


def draw_fortune(
    config: FortuneConfig,
    criteria: FilterCriteria,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> SelectionResult:
    """
    Pick one fortune matching the criteria.

    Pipeline:
    1. Resolve sources (explicit path or configured roots)
    2. Load and merge entries
    3. Apply length and category filters
    4. Select uniformly at random

    Args:
        config: Default directories
        criteria: Filter settings
        rng: Random source to draw with
        seed: Seed for a fresh random source when rng is not given

    Returns:
        SelectionResult, empty if nothing matched

    Raises:
        LoaderError: If loading fails
    """
    collection = load_fortunes(config, criteria)
    candidates = apply_filters(collection, criteria)
    return select_fortune(candidates, rng=rng, seed=seed)


def find_fortunes(
    config: FortuneConfig,
    criteria: FilterCriteria,
    pattern: str,
    *,
    ignore_case: bool = False,
) -> FortuneCollection:
    """
    Return every fortune matching pattern that also passes the criteria.

    Raises:
        LoaderError: If loading fails
        SearchError: If pattern is invalid
    """
    regex = compile_pattern(pattern, ignore_case=ignore_case)
    collection = apply_filters(load_fortunes(config, criteria), criteria)
    return search_fortunes(collection, regex)
