#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_lists.py
"""Tests for itemized, ordered and variable list rendering."""

import logging

import pytest
from utils import bold, count_prefixed, item, make_list, para

from doxy2md.ast import ItemizedList, ListItem, OrderedList, SimpleSection, Term, Text, VariableList, VarListEntry
from doxy2md.exceptions import MalformedNodeError
from doxy2md.renderers.lists import VariableListPair, pair_variable_list


def term(value: str) -> VarListEntry:
    return VarListEntry(term=Term(children=(Text(value),)))


@pytest.mark.unit
class TestItemizedList:
    """Test unordered list output."""

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_one_li_per_item(self, dispatcher, count):
        """Test that N items give N <li> lines between the container lines."""
        lines = dispatcher.render_block(make_list(count))

        assert lines[1] == '<ul class="doxyList">'
        assert lines[-1] == "</ul>"
        assert count_prefixed(lines, "<li") == count
        assert all(line.startswith("<li") for line in lines[2:-1])

    def test_item_content(self, dispatcher):
        """Test that item paragraphs are not wrapped in <p>."""
        lines = dispatcher.render_block(ItemizedList(items=(item(para("a ", bold("b"))),)))
        assert lines == ["", '<ul class="doxyList">', "<li>a <b>b</b></li>", "</ul>"]

    def test_multiple_paragraphs_in_item(self, dispatcher):
        """Test that paragraphs inside one item are separated by a blank line."""
        lines = dispatcher.render_block(ItemizedList(items=(item("one", "two"),)))
        assert lines == ["", '<ul class="doxyList">', "<li>one", "", "two</li>", "</ul>"]
        assert count_prefixed(lines, "<li") == 1

    def test_empty_item(self, dispatcher):
        """Test that an item without content still renders one element."""
        lines = dispatcher.render_block(ItemizedList(items=(ListItem(),)))
        assert lines[2] == "<li></li>"

    def test_check_list(self, dispatcher):
        """Test that check box items mark the list and themselves."""
        node = ItemizedList(items=(item("done", override="checked"), item("todo", override="unchecked")))
        lines = dispatcher.render_block(node)

        assert lines[1] == '<ul class="doxyList check">'
        assert lines[2] == '<li class="checked">done</li>'
        assert lines[3] == '<li class="unchecked">todo</li>'

    def test_nested_list(self, dispatcher):
        """Test a list inside a list item."""
        inner = make_list(2)
        outer = ItemizedList(items=(item(para("outer", inner)),))
        lines = dispatcher.render_block(outer)

        assert count_prefixed(lines, "<ul") == 2
        assert count_prefixed(lines, "</ul>") == 2
        assert lines[2].startswith("<li>outer")
        assert lines[-2].endswith("</li>")


@pytest.mark.unit
class TestOrderedList:
    """Test ordered list output."""

    def test_default_type(self, dispatcher):
        """Test that numbering defaults to decimal."""
        lines = dispatcher.render_block(make_list(3, ordered=True))
        assert lines[1] == '<ol class="doxyList" type="1">'
        assert lines[-1] == "</ol>"
        assert count_prefixed(lines, "<li") == 3

    def test_type_and_start(self, dispatcher):
        """Test numbering type and start value."""
        lines = dispatcher.render_block(make_list(2, ordered=True, type="a", start=3))
        assert lines[1] == '<ol class="doxyList" type="a" start="3">'

    def test_item_value(self, dispatcher):
        """Test an explicit item number."""
        lines = dispatcher.render_block(OrderedList(items=(item("x", value=7),)))
        assert lines[2] == '<li value="7">x</li>'


@pytest.mark.unit
class TestPairVariableList:
    """Test pairing of alternating terms and definitions."""

    def test_well_formed(self):
        """Test that alternating children pair up in order."""
        alpha, beta = term("alpha"), term("beta")
        first, second = item("first"), item("second")
        pairs = pair_variable_list([alpha, first, Text("\n"), beta, second])

        assert pairs == [VariableListPair(alpha, first), VariableListPair(beta, second)]

    def test_term_without_definition(self, caplog):
        """Test that a term followed by another term is logged and kept."""
        alpha, beta, definition = term("alpha"), term("beta"), item("text")
        with caplog.at_level(logging.WARNING):
            pairs = pair_variable_list([alpha, beta, definition])

        assert pairs == [VariableListPair(alpha, None), VariableListPair(beta, definition)]
        assert "no definition" in caplog.text

    def test_trailing_term(self, caplog):
        """Test that a dangling last term is logged and kept."""
        alpha = term("alpha")
        with caplog.at_level(logging.WARNING):
            pairs = pair_variable_list([alpha])
        assert pairs == [VariableListPair(alpha, None)]
        assert "ends with a term" in caplog.text

    def test_definition_without_term(self, caplog):
        """Test that an orphan definition is logged and kept."""
        definition = item("text")
        with caplog.at_level(logging.WARNING):
            pairs = pair_variable_list([definition])
        assert pairs == [VariableListPair(None, definition)]
        assert "no preceding term" in caplog.text

    def test_unexpected_child(self):
        """Test that a foreign element is rejected."""
        with pytest.raises(MalformedNodeError):
            pair_variable_list([term("alpha"), bold("x")])

    def test_empty(self):
        """Test an empty list."""
        assert pair_variable_list([]) == []


@pytest.mark.unit
class TestVariableListRenderer:
    """Test variable list output."""

    def test_definition_list(self, dispatcher):
        """Test that each pair becomes a dt/dd couple."""
        node = VariableList(children=(term("alpha"), item("first"), term("beta"), item("second")))
        assert dispatcher.render_block(node) == [
            "",
            '<dl class="doxyVariableList">',
            "<dt>alpha</dt>",
            "<dd><p>first</p></dd>",
            "<dt>beta</dt>",
            "<dd><p>second</p></dd>",
            "</dl>",
        ]

    def test_multiline_definition(self, dispatcher):
        """Test that a definition with several paragraphs spans several lines."""
        node = VariableList(children=(term("alpha"), item("one", "two")))
        lines = dispatcher.render_block(node)
        assert lines[3] == "<dd>"
        assert lines[-2] == "</dd>"
        assert "<p>one</p>" in lines
        assert "<p>two</p>" in lines

    def test_malformed_pair_renders_empty_side(self, dispatcher, caplog):
        """Test that a term without a definition still renders."""
        node = VariableList(children=(term("alpha"), term("beta"), item("text")))
        with caplog.at_level(logging.WARNING):
            lines = dispatcher.render_block(node)

        assert lines[2:4] == ["<dt>alpha</dt>", "<dd></dd>"]
        assert lines[4:6] == ["<dt>beta</dt>", "<dd><p>text</p></dd>"]


@pytest.mark.unit
class TestBlocksNestedInItems:
    """Test that only an item's own paragraphs lose their <p> wrappers."""

    def test_variable_list_in_item(self, dispatcher):
        """Test that definitions keep <p> inside a list item."""
        nested = VariableList(children=(term("alpha"), item("def")))
        lines = dispatcher.render_block(ItemizedList(items=(item(para("lead", nested)),)))

        assert lines[2] == "<li>lead"
        assert "<dd><p>def</p></dd>" in lines
        assert "<dd>def</dd>" not in lines

    def test_simple_section_in_item(self, dispatcher):
        """Test that paragraphs of a nested section stay separate."""
        section = SimpleSection(section_kind="return", children=(para("one"), para("two")))
        lines = dispatcher.render_block(ItemizedList(items=(item(para(section)),)))

        assert "<p>one</p>" in lines
        assert "<p>two</p>" in lines
        assert "one" not in lines

    def test_item_paragraphs_still_unwrapped(self, dispatcher):
        """Test that the item's own text next to a nested block has no <p>."""
        nested = VariableList(children=(term("alpha"), item("def")))
        lines = dispatcher.render_block(ItemizedList(items=(item(para("lead", nested)),)))
        assert not any(line.startswith("<li><p>") for line in lines)
