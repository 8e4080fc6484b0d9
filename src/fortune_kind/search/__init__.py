"""Pattern search across loaded fortunes."""

from .matcher import search_fortunes, compile_pattern, SearchError

__all__ = ["search_fortunes", "compile_pattern", "SearchError"]
