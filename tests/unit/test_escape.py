#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_escape.py
"""Tests for text escaping helpers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from doxy2md.utils.escape import (
    escape_html,
    escape_markdown,
    render_text,
    sanitize_anonymous_namespace,
    split_lines,
    strip_leading_and_trailing_newlines,
)


@pytest.mark.unit
class TestEscapeHtml:
    """Test HTML escaping."""

    def test_entities(self):
        """Test the characters that become entities."""
        assert escape_html("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"

    def test_quotes_untouched(self):
        """Test that quotes are left alone in element content."""
        assert escape_html("\"x\" 'y'") == "\"x\" 'y'"

    def test_empty(self):
        """Test empty input."""
        assert escape_html("") == ""


@pytest.mark.unit
class TestEscapeMarkdown:
    """Test Markdown escaping."""

    def test_punctuation(self):
        """Test Markdown punctuation."""
        assert escape_markdown("a_b [c] *d* ~e~") == "a\\_b \\[c\\] \\*d\\* \\~e\\~"

    def test_backslash_first(self):
        """Test that backslashes are escaped before the characters they precede."""
        assert escape_markdown("\\_") == "\\\\\\_"

    def test_html_entities_too(self):
        """Test that HTML characters are escaped as well."""
        assert escape_markdown("<T>") == "&lt;T&gt;"

    @given(st.text(alphabet=st.characters(exclude_characters="\\[]*_~<>&")))
    def test_plain_text_unchanged(self, text):
        """Test that text without special characters passes through."""
        assert escape_markdown(text) == text


@pytest.mark.unit
class TestRenderText:
    """Test escaping by render mode."""

    @pytest.mark.parametrize(
        "mode,expected",
        [("markdown", "a\\_b &lt;c&gt;"), ("html", "a_b &lt;c&gt;"), ("text", "a_b <c>")],
    )
    def test_modes(self, mode, expected):
        """Test each mode on the same text."""
        assert render_text("a_b <c>", mode) == expected

    def test_unknown_mode(self):
        """Test that an unknown mode is rejected."""
        with pytest.raises(ValueError):
            render_text("x", "latex")


@pytest.mark.unit
class TestHelpers:
    """Test the small string helpers."""

    def test_strip_newlines(self):
        """Test that leading newlines and trailing whitespace go, inner content stays."""
        assert strip_leading_and_trailing_newlines("\n\n  code\n \n") == "  code"

    def test_anonymous_namespace(self):
        """Test the anonymous namespace rewrite."""
        assert sanitize_anonymous_namespace("anonymous_namespace{foo.cpp}::f") == "anonymous{foo.cpp}::f"

    def test_split_lines(self):
        """Test line splitting."""
        assert split_lines("") == []
        assert split_lines("a") == ["a"]
        assert split_lines("a\n\nb") == ["a", "", "b"]
        assert split_lines("\n") == ["", ""]
