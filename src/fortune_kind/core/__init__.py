"""
Core package for fortune-kind.

Contains:
- models: FortuneEntry, FortuneCollection, SelectionResult
"""

from .models import Category, FortuneEntry, FortuneCollection, SelectionResult

__all__ = [
    "Category",
    "FortuneEntry",
    "FortuneCollection",
    "SelectionResult",
]
