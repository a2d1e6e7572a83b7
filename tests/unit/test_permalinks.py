#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_permalinks.py
"""Tests for permalink helpers and the static resolver."""

import logging

import pytest

from doxy2md.permalinks import (
    PermalinkResolver,
    StaticPermalinkResolver,
    get_permalink_anchor,
    linkable_permalink,
    strip_permalink_hex_anchor,
    strip_permalink_text_anchor,
)


@pytest.mark.unit
class TestIdHelpers:
    """Test splitting Doxygen ids."""

    @pytest.mark.parametrize(
        "refid,anchor",
        [
            ("classfoo_1a0123abcd", "a0123abcd"),
            ("todo_1_todo000001", "_todo000001"),
            ("namespacens_1_1inner_1a42", "a42"),
            ("plain", "plain"),
        ],
    )
    def test_anchor(self, refid, anchor):
        """Test that the anchor is what follows the last separator."""
        assert get_permalink_anchor(refid) == anchor

    def test_strip_hex_anchor(self):
        """Test the compound part of a member id."""
        assert strip_permalink_hex_anchor("classfoo_1a0123abcd") == "classfoo"
        assert strip_permalink_hex_anchor("group__io_1ga12") == "group__io"
        assert strip_permalink_hex_anchor("classfoo") == "classfoo"

    def test_strip_text_anchor(self):
        """Test the page part of a cross-reference item id."""
        assert strip_permalink_text_anchor("deprecated_1_deprecated000003") == "deprecated"
        assert strip_permalink_text_anchor("todo") == "todo"

    @pytest.mark.parametrize("permalink,expected", [(None, None), ("", None), ("/", None), ("/a", "/a")])
    def test_linkable_permalink(self, permalink, expected):
        """Test that the bare site root is not a link target."""
        assert linkable_permalink(permalink) == expected


@pytest.mark.unit
class TestStaticPermalinkResolver:
    """Test the in-memory resolver."""

    def test_satisfies_protocol(self, resolver):
        """Test the structural protocol check."""
        assert isinstance(resolver, PermalinkResolver)

    def test_page(self, resolver):
        """Test a compound page."""
        assert resolver.resolve_page_permalink("classfoo") == "/api/classes/foo"
        assert resolver.resolve_permalink("classfoo", "compound") == "/api/classes/foo"

    def test_member(self, resolver):
        """Test a member anchor on its compound's page."""
        assert resolver.resolve_permalink("classfoo_1a0123abcd", "member") == "/api/classes/foo/#a0123abcd"

    def test_registered_anchor(self, resolver):
        """Test an anchor whose id does not name its compound."""
        assert resolver.resolve_permalink("foo_1intro", "member") == "/api/classes/foo/#intro"

    def test_xrefsect(self, resolver):
        """Test a cross-reference list item."""
        assert resolver.resolve_permalink("todo_1_todo000001", "xrefsect") == "/pages/todo/#_todo000001"

    def test_unknown_ids(self, resolver):
        """Test that unknown ids resolve to None."""
        assert resolver.resolve_page_permalink("classbar") is None
        assert resolver.resolve_permalink("classbar_1a1", "member") is None
        assert resolver.resolve_permalink("bug_1_bug000001", "xrefsect") is None

    def test_unknown_kind(self, resolver, caplog):
        """Test that an unsupported kind hint is logged."""
        with caplog.at_level(logging.WARNING):
            assert resolver.resolve_permalink("classfoo", "file") is None
        assert "file" in caplog.text

    def test_registration(self):
        """Test incremental registration and a custom base URL."""
        resolver = StaticPermalinkResolver(page_base_url="/docs/")
        resolver.register_page("structs", "api/structs/s")
        resolver.register_anchor("s_1overview", "structs")

        assert resolver.resolve_page_permalink("structs") == "/docs/api/structs/s"
        assert resolver.resolve_permalink("s_1overview", "member") == "/docs/api/structs/s/#overview"
