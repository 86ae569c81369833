"""
Unit tests for the phrase grammar.

Covers production dispatch, token aliases, whitespace handling and the
furthest-failure diagnostics carried by TimeSyntaxError.
"""

import pytest

from htp.errors import TimeSyntaxError
from htp.grammar import GRAMMAR_VERSION, PRODUCTIONS, match, token_display_name


class TestProductions:
    """Tests for dispatching text to the right top-level production."""

    @pytest.mark.parametrize(
        "text, production",
        [
            ("now", "now"),
            ("2020-12-25T19:43:42", "iso"),
            ("2020/12/25T19:43:42", "iso"),
            ("25/12/2020", "date"),
            ("25-12-2020", "date"),
            ("4 min ago", "relative"),
            ("2 months ago", "relative"),
            ("in 2 weeks", "relative_future"),
            ("9", "time"),
            ("19:43:42", "time"),
            ("7pm", "time"),
            ("last friday at 19", "day_at"),
            ("next mon", "day_at"),
            ("sunday at 8:15 am", "day_at"),
            ("tomorrow", "day_at"),
            ("yesterday at 19:43:00", "day_at"),
        ],
    )
    def test_production_dispatch(self, text, production):
        """Test that each phrase shape lands on its production."""
        assert match(text).production == production

    def test_priority_order(self):
        """Test the fixed order productions are tried in."""
        assert PRODUCTIONS == ("now", "iso", "date", "relative", "relative_future", "time", "day_at")

    def test_grammar_is_versioned(self):
        """Test that the grammar carries a version string."""
        assert GRAMMAR_VERSION

    def test_tree_is_tagged_with_production(self):
        """Test that the parse tree root is the matched production."""
        assert match("in 3 days").tree.data == "relative_future"

    @pytest.mark.parametrize(
        "text",
        ["2020-12-25", "1234", "12:", "last today", "next", "in 2 days ago", "2 years ago", "now now"],
    )
    def test_rejected_phrases(self, text):
        """Test phrases that match no production."""
        with pytest.raises(TimeSyntaxError):
            match(text)

    def test_two_digit_year_rejected(self):
        """Test that dates need a four-digit year."""
        with pytest.raises(TimeSyntaxError):
            match("25/12/20")


class TestDiagnostics:
    """Tests for syntax error position and expected tokens."""

    def test_truncated_after_at(self):
        """Test that 'last friday at' points at the end and expects hms."""
        with pytest.raises(TimeSyntaxError) as exc_info:
            match("last friday at")

        error = exc_info.value
        assert error.line == 1
        assert error.column == 15
        assert error.expected == ("hms",)

    def test_truncated_after_quantity(self):
        """Test that every unit is offered after 'in 2'."""
        with pytest.raises(TimeSyntaxError) as exc_info:
            match("in 2")

        assert exc_info.value.expected == ("days", "hours", "minutes", "months", "weeks")
        assert "expected days, hours, minutes, months, weeks" in str(exc_info.value)

    def test_union_of_expected_tokens(self):
        """Test that productions failing at the same point pool their expectations."""
        with pytest.raises(TimeSyntaxError) as exc_info:
            match("9 xm")

        error = exc_info.value
        assert error.column == 3
        assert {"date_sep", "minutes", "colon", "meridiem"} <= set(error.expected)

    def test_multiline_position(self):
        """Test that line and column are counted across newlines."""
        with pytest.raises(TimeSyntaxError) as exc_info:
            match("last\nfriday at")

        assert exc_info.value.line == 2
        assert exc_info.value.column == 10

    def test_rendering(self):
        """Test the pointer line and expected line of the rendered error."""
        with pytest.raises(TimeSyntaxError) as exc_info:
            match("last friday at")

        rendered = str(exc_info.value).split("\n")
        assert rendered[0] == " --> 1:15"
        assert rendered[2] == "1 | last friday at"
        assert rendered[3] == "  | " + " " * 14 + "^---"
        assert rendered[-1] == "  = expected hms"

    def test_token_display_name(self):
        """Test that filtered terminals display without their underscore."""
        assert token_display_name("_AT") == "at"
        assert token_display_name("HMS") == "hms"
        assert token_display_name("_DATE_SEP") == "date_sep"
