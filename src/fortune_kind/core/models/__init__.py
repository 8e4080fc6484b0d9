"""
Core Models Package

Immutable data models shared by every stage of the fortune pipeline.
Entries are created once by the parser and never mutated; filtering and
selection always return new values.
"""

from .entries import Category, FortuneEntry, FortuneCollection
from .selection import SelectionResult

__all__ = [
    "Category",
    "FortuneEntry",
    "FortuneCollection",
    "SelectionResult",
]
