"""
Unit tests for FortuneEntry and FortuneCollection.

Verified: 2026-10-19
"""

import pytest
from pathlib import Path

from fortune_kind.core.models import Category, FortuneEntry, FortuneCollection


class TestFortuneEntry:
    """Tests for FortuneEntry dataclass."""

    def test_init_when_blank_text_then_raises_error(self):
        """Whitespace-only text should raise ValueError."""
        with pytest.raises(ValueError, match="must not be blank"):
            FortuneEntry("  \n\t ")

    def test_length_when_surrounding_whitespace_then_counts_trimmed(self):
        """length should ignore leading and trailing whitespace."""
        entry = FortuneEntry("  Hello  ")
        assert entry.length == 5

    def test_length_when_multiline_then_counts_newlines(self):
        """Internal line breaks count toward length."""
        entry = FortuneEntry("ab\ncd")
        assert entry.length == 5

    def test_defaults_when_not_given_then_standard_without_source(self):
        """Entries default to the standard category and no source."""
        entry = FortuneEntry("Hi")
        assert entry.category is Category.STANDARD
        assert entry.source is None
        assert entry.source_name == ""

    def test_source_name_when_source_set_then_returns_file_name(self):
        entry = FortuneEntry("Hi", source=Path("/data/fortunes/wisdom"))
        assert entry.source_name == "wisdom"

    def test_entry_is_immutable(self):
        """Frozen dataclass should reject attribute assignment."""
        entry = FortuneEntry("Hi")
        with pytest.raises(AttributeError):
            entry.text = "Bye"


class TestFortuneCollection:
    """Tests for FortuneCollection dataclass."""

    def test_from_entries_when_generator_then_keeps_order(self):
        """from_entries should materialize entries in order."""
        # Arrange
        texts = ["one", "two", "three"]

        # Act
        collection = FortuneCollection.from_entries(FortuneEntry(t) for t in texts)

        # Assert
        assert collection.texts == ("one", "two", "three")
        assert len(collection) == 3
        assert collection[1].text == "two"

    def test_merge_when_several_collections_then_concatenates_in_order(self):
        """merge should append collections one after another."""
        # Arrange
        first = FortuneCollection.from_entries([FortuneEntry("a"), FortuneEntry("b")])
        second = FortuneCollection.from_entries([FortuneEntry("c")])

        # Act
        merged = FortuneCollection.merge(first, FortuneCollection(), second)

        # Assert
        assert merged.texts == ("a", "b", "c")
        assert first.texts == ("a", "b")

    def test_is_empty_when_no_entries_then_true(self):
        assert FortuneCollection().is_empty is True
        assert FortuneCollection.merge().is_empty is True

    def test_iter_when_entries_then_yields_entries(self):
        entries = [FortuneEntry("x"), FortuneEntry("y")]
        collection = FortuneCollection.from_entries(entries)
        assert list(collection) == entries
