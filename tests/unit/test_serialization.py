#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_serialization.py
"""Tests for JSON serialization of documentation trees."""

import json

import pytest
from utils import bold, make_list, para, title

from doxy2md.ast import (
    CodeLine,
    Highlight,
    OrderedList,
    Paragraph,
    ProgramListing,
    Sect2,
    SimpleSection,
    Text,
)
from doxy2md.ast.serialization import KIND_TO_TYPE, dict_to_tree, json_to_tree, tree_to_dict, tree_to_json
from doxy2md.exceptions import MalformedNodeError


@pytest.mark.unit
class TestTreeToDict:
    """Test conversion to dictionaries."""

    def test_text(self):
        """Test a text run."""
        assert tree_to_dict(Text("hi")) == {"text": "hi"}

    def test_defaults_omitted(self):
        """Test that default-valued fields are left out."""
        assert tree_to_dict(Paragraph()) == {"kind": "para"}

    def test_nested(self):
        """Test a paragraph with markup."""
        assert tree_to_dict(para("a ", bold("b"))) == {
            "kind": "para",
            "children": [{"text": "a "}, {"kind": "bold", "children": [{"text": "b"}]}],
        }

    def test_scalar_fields(self):
        """Test that non-default scalars are kept."""
        assert tree_to_dict(make_list(0, ordered=True, type="A", start=2)) == {
            "kind": "orderedlist",
            "type": "A",
            "start": 2,
        }

    def test_kind_table_is_complete(self):
        """Test that every kind can be looked up."""
        assert KIND_TO_TYPE["sect3"].__name__ == "Sect3"
        assert KIND_TO_TYPE["s"].__name__ == "StrikeS"


@pytest.mark.unit
class TestDictToTree:
    """Test conversion from dictionaries."""

    def test_round_trip(self):
        """Test a tree mixing several field shapes."""
        tree = Sect2(
            id="classfoo_1a",
            title=title("T"),
            children=(
                para("x", make_list(2)),
                SimpleSection(section_kind="note", children=(para("n"),)),
                ProgramListing(
                    lines=(CodeLine(lineno=1, highlights=(Highlight(classification="keyword", children=(Text("int"),)),)),)
                ),
            ),
        )
        assert json_to_tree(tree_to_json(tree, indent=2)) == tree

    def test_string_shorthand_in_lists(self):
        """Test that bare strings inside lists become text runs."""
        tree = dict_to_tree({"kind": "para", "children": ["a", {"kind": "bold", "children": ["b"]}]})
        assert tree == para("a", bold("b"))

    def test_scalar_string_field(self):
        """Test that string fields stay strings."""
        tree = dict_to_tree({"kind": "orderedlist", "type": "i"})
        assert tree == OrderedList(type="i")

    def test_unknown_kind(self):
        """Test an unknown element kind."""
        with pytest.raises(MalformedNodeError, match="Unknown node kind"):
            dict_to_tree({"kind": "blink"})

    def test_unknown_field(self):
        """Test a field the kind does not have."""
        with pytest.raises(MalformedNodeError, match="no field"):
            dict_to_tree({"kind": "para", "colour": "red"})

    def test_missing_kind(self):
        """Test an object that is neither a node nor a text run."""
        with pytest.raises(MalformedNodeError):
            dict_to_tree({"children": []})

    def test_invalid_json(self):
        """Test malformed JSON."""
        with pytest.raises(MalformedNodeError, match="Invalid JSON"):
            json_to_tree("{not json")

    def test_top_level_must_be_object(self):
        """Test a JSON array at the top level."""
        with pytest.raises(MalformedNodeError):
            json_to_tree(json.dumps([{"kind": "para"}]))
