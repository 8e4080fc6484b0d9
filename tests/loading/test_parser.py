"""
Unit tests for the fortune-file entry parser.

Verified: 2026-10-19
"""

from pathlib import Path

from fortune_kind.core.models import Category, FortuneEntry
from fortune_kind.loading import parse_entries, join_entries


def texts(content: str, **kwargs) -> list[str]:
    """Helper returning parsed entry texts."""
    return [entry.text for entry in parse_entries(content, **kwargs)]


class TestParseEntries:
    """Tests for parse_entries()."""

    def test_parse_when_trailing_delimiter_then_two_entries(self):
        """The canonical two-entry file should parse to exactly two entries."""
        assert texts("Hello\n%\nWorld\n%\n") == ["Hello", "World"]

    def test_parse_when_no_trailing_delimiter_then_keeps_last_entry(self):
        """A final segment without delimiter is still an entry."""
        assert texts("Hello\n%\nWorld") == ["Hello", "World"]

    def test_parse_when_no_delimiter_then_single_entry(self):
        assert texts("Just one fortune\nover two lines\n") == ["Just one fortune\nover two lines"]

    def test_parse_when_consecutive_delimiters_then_drops_empty_segments(self):
        """Doubled delimiters should not produce empty entries."""
        assert texts("%\n%\nA\n%\n%\n\n%\nB\n%\n%\n") == ["A", "B"]

    def test_parse_when_empty_content_then_no_entries(self):
        assert texts("") == []
        assert texts("\n\n   \n") == []
        assert texts("%\n%\n") == []

    def test_parse_when_blank_edge_lines_then_trimmed(self):
        """Leading and trailing blank lines of a segment are removed."""
        assert texts("\n\n  \nHello\n\n%\n") == ["Hello"]

    def test_parse_when_internal_formatting_then_preserved(self):
        """Internal line breaks, blank lines and indentation are verbatim."""
        content = "Roses are red,\n\n    violets are blue.\n\t\t-- Anon\n%\n"
        assert texts(content) == ["Roses are red,\n\n    violets are blue.\n\t\t-- Anon"]

    def test_parse_when_delimiter_has_trailing_whitespace_then_still_splits(self):
        assert texts("A\n%   \nB\n%\t\n") == ["A", "B"]

    def test_parse_when_delimiter_has_leading_whitespace_then_not_a_boundary(self):
        """Only trailing whitespace is ignored on delimiter lines."""
        assert texts("A\n  %\nB\n") == ["A\n  %\nB"]

    def test_parse_when_percent_inside_line_then_not_a_boundary(self):
        assert texts("100% sure\n%\n") == ["100% sure"]

    def test_parse_when_crlf_line_endings_then_splits(self):
        """Windows line endings should be handled like Unix ones."""
        assert texts("Hello\r\n%\r\nWorld\r\n%\r\n") == ["Hello", "World"]

    def test_parse_when_form_feed_around_delimiter_then_one_entry(self):
        """A form feed is not a line break, so "%" between them is plain text."""
        assert texts("Page one\x0c%\x0cstill same fortune\n%\n") == [
            "Page one\x0c%\x0cstill same fortune"
        ]

    def test_parse_when_unicode_line_separator_then_kept_in_text(self):
        """U+2028 and friends stay inside the entry untouched."""
        assert texts("first\u2028second\n%\n") == ["first\u2028second"]
        assert texts("a\x1c%\x1db\x85c\n%\n") == ["a\x1c%\x1db\x85c"]

    def test_parse_when_custom_delimiter_then_uses_it(self):
        assert texts("A\n%%\nB\n%\nC\n", delimiter="%%") == ["A", "B\n%\nC"]

    def test_parse_when_category_and_source_then_tags_entries(self):
        """Every entry should carry the category and source given."""
        # Arrange
        source = Path("/fortunes/off/rude")

        # Act
        entries = parse_entries("A\n%\nB\n%\n", category=Category.UNKIND, source=source)

        # Assert
        assert all(e.category is Category.UNKIND for e in entries)
        assert all(e.source == source for e in entries)

    def test_parse_when_any_content_then_entries_never_blank(self):
        """No entry should be blank after trimming."""
        content = "\n%\n \n%\nX\n%\n\t\n%\n\n\n%\nY"
        for entry in parse_entries(content):
            assert entry.text.strip()


class TestJoinEntries:
    """Tests for join_entries() and the parse/join round trip."""

    def test_join_when_entries_then_fortune_file_format(self):
        result = join_entries([FortuneEntry("Hello"), FortuneEntry("World")])
        assert result == "Hello\n%\nWorld\n%\n"

    def test_join_when_no_entries_then_empty_string(self):
        assert join_entries([]) == ""

    def test_round_trip_when_messy_content_then_same_entries(self):
        """Parsing, joining and reparsing should give the same entry set."""
        # Arrange
        content = (
            "\n%\nFirst\n  indented second line\n\n%\n%\n"
            "  \n\nSecond\n\n\nwith gap\n%\nThird without delimiter"
        )
        entries = parse_entries(content)

        # Act
        reparsed = parse_entries(join_entries(entries))

        # Assert
        assert [e.text for e in reparsed] == [e.text for e in entries]
        assert len(entries) == 3
