#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_special_chars.py
"""Tests for the special character table.

Most Doxygen names are HTML 4 entity names, so the standard library's entity
table serves as the reference. The few Doxygen-specific spellings are mapped
to their HTML names first.
"""

import logging
from html.entities import name2codepoint

import pytest

from doxy2md.ast import SpecialCharacter
from doxy2md.utils.special_chars import SPECIAL_CHARACTERS, special_character

# Doxygen spelling -> HTML entity name
DOXYGEN_ALIASES = {
    "registered": "reg",
    "imaginary": "image",
    "trademark": "trade",
    "tm": "trade",
    "nzwj": "zwnj",
}


def html_entity_name(name: str) -> str:
    if name in DOXYGEN_ALIASES:
        return DOXYGEN_ALIASES[name]
    return name.replace("umlaut", "uml")


@pytest.mark.unit
class TestSpecialCharacterTable:
    """Test the entity name to character table."""

    def test_size(self):
        """Test that every Doxygen name is present."""
        assert len(SPECIAL_CHARACTERS) == 249

    @pytest.mark.parametrize("name", sorted(SPECIAL_CHARACTERS))
    def test_matches_html_entity(self, name):
        """Test that each name maps to the single character of its HTML entity."""
        char = SPECIAL_CHARACTERS[name]
        assert len(char) == 1
        assert ord(char) == name2codepoint[html_entity_name(name)]

    @pytest.mark.parametrize(
        "name,codepoint",
        [
            ("copy", 0x00A9),
            ("euro", 0x20AC),
            ("trademark", 0x2122),
            ("rsquo", 0x2019),
            ("lsquo", 0x2018),
            ("Aumlaut", 0x00C4),
            ("szlig", 0x00DF),
            ("alpha", 0x03B1),
            ("ne", 0x2260),
        ],
    )
    def test_well_known(self, name, codepoint):
        """Test a few characters by value."""
        assert special_character(name) == chr(codepoint)

    def test_unknown_name(self):
        """Test that an unknown name has no character."""
        assert special_character("nosuchchar") is None


@pytest.mark.unit
class TestSpecialCharacterRenderer:
    """Test rendering special character elements."""

    def test_renders_character(self, dispatcher):
        """Test a known name."""
        assert dispatcher.render_inline(SpecialCharacter(name="copy")) == "©"

    def test_unknown_is_logged_and_empty(self, dispatcher, caplog):
        """Test that an unknown name renders nothing and is logged."""
        with caplog.at_level(logging.WARNING):
            assert dispatcher.render_inline(SpecialCharacter(name="nosuchchar")) == ""
        assert "nosuchchar" in caplog.text
