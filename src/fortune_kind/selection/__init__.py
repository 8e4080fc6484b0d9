"""
Module: selection

Purpose:
    Fortune filtering and random selection.

Key Functions:
    - apply_filters(): Filter a collection by length and category
    - select_fortune(): Pick one fortune uniformly at random
    - short_length_for_level(): Map short-flag count to a length cap

Key Classes:
    - FilterCriteria: Filter configuration
    - Selector: Random picker with injectable random source

Used By:
    - controller: Pipeline orchestration
"""

from .config import FilterCriteria, short_length_for_level, SHORT_LENGTH, VERY_SHORT_LENGTH
from .filters import apply_filters, filter_by_length, filter_by_category
from .selector import select_fortune, Selector

__all__ = [
    "FilterCriteria",
    "short_length_for_level",
    "SHORT_LENGTH",
    "VERY_SHORT_LENGTH",
    "apply_filters",
    "filter_by_length",
    "filter_by_category",
    "select_fortune",
    "Selector",
]
