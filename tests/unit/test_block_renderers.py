#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_block_renderers.py
"""Tests for section, table, simple section and other block renderers."""

import logging

import pytest
from utils import para, title

from doxy2md.ast import (
    BlockQuote,
    Caption,
    DetailedDescription,
    Entry,
    Heading,
    Internal,
    ParameterDescription,
    ParameterItem,
    ParameterList,
    ParameterName,
    ParameterNameList,
    ParameterType,
    Row,
    Sect1,
    Sect2,
    Sect5,
    Sect6,
    SimpleSection,
    Table,
    Text,
    TocItem,
    TocList,
    XrefDescription,
    XrefSect,
)
from doxy2md.exceptions import MalformedNodeError
from doxy2md.options import RendererOptions
from doxy2md.renderers.dispatch import create_dispatcher


def param_item(name: str, description: str, direction: str = "") -> ParameterItem:
    return ParameterItem(
        names=(ParameterNameList(names=(ParameterName(direction=direction, children=(Text(name),)),)),),
        description=ParameterDescription(children=(para(description),)),
    )


@pytest.mark.unit
class TestSections:
    """Test nested section headings."""

    def test_heading_with_anchor(self, dispatcher):
        """Test that sect1 becomes a level 2 heading with its anchor."""
        node = Sect1(id="classfoo_1intro", title=title("Intro."), children=(para("Body"),))
        assert dispatcher.render_block(node) == ["", "## Intro {#intro}", "", "", "<p>Body</p>", ""]

    def test_heading_level_follows_depth(self, dispatcher):
        """Test the depth to level mapping."""
        lines = dispatcher.render_block(Sect2(id="a_1b", title=title("Two")))
        assert "### Two {#b}" in lines
        lines = dispatcher.render_block(Sect5(id="a_1b", title=title("Five")))
        assert "###### Five {#b}" in lines

    def test_anchors_disabled(self, resolver):
        """Test headings without explicit anchors."""
        dispatcher = create_dispatcher(resolver, RendererOptions(heading_anchors=False))
        lines = dispatcher.render_block(Sect1(id="classfoo_1intro", title=title("Intro")))
        assert lines[1] == "## Intro"

    def test_offset(self, resolver):
        """Test a custom depth offset."""
        dispatcher = create_dispatcher(resolver, RendererOptions(section_heading_offset=0))
        lines = dispatcher.render_block(Sect1(title=title("Top")))
        assert lines[1] == "# Top"

    def test_overflow_renders_bold(self, dispatcher, caplog):
        """Test that a section deeper than the maximum level becomes bold text."""
        node = Sect6(id="classfoo_1deep", title=title("Deep"), children=(para("x"),))
        with caplog.at_level(logging.WARNING):
            lines = dispatcher.render_block(node)

        assert lines[:4] == ["", '<a id="deep"></a>', "<b>Deep</b>", ""]
        assert not any(line.startswith("#") for line in lines)
        assert "exceeds" in caplog.text

    def test_overflow_with_lower_maximum(self, resolver):
        """Test that the configured maximum is honoured."""
        dispatcher = create_dispatcher(resolver, RendererOptions(max_heading_level=3, title_heading_level=3))
        lines = dispatcher.render_block(Sect2(title=title("Fits")))
        assert lines[1] == "### Fits"
        lines = dispatcher.render_block(Sect5(title=title("Too deep")))
        assert lines[1] == "<b>Too deep</b>"

    def test_title_is_markdown_escaped(self, dispatcher):
        """Test that heading titles use Markdown escaping."""
        lines = dispatcher.render_block(Sect1(title=title("my_func")))
        assert lines[1] == "## my\\_func"

    def test_untitled_section(self, dispatcher):
        """Test that a section without a title emits only its body."""
        assert dispatcher.render_block(Sect1(children=(para("x"),))) == ["", "", "<p>x</p>", ""]


@pytest.mark.unit
class TestHeadingsAndTitles:
    """Test explicit headings, titles and descriptions."""

    def test_heading(self, dispatcher):
        """Test an explicit heading element."""
        assert dispatcher.render_block(Heading(level=2, children=(Text("Notes"),))) == ["", "## Notes"]

    def test_heading_overflow(self, resolver):
        """Test that a heading deeper than the maximum becomes bold text."""
        dispatcher = create_dispatcher(resolver, RendererOptions(max_heading_level=4))
        assert dispatcher.render_block(Heading(level=5, children=(Text("x"),))) == ["", "<b>x</b>"]

    def test_description_with_title(self, dispatcher):
        """Test that a description title becomes a heading before the body."""
        node = DetailedDescription(title=title("Details"), children=(para("x"),))
        assert dispatcher.render_block(node) == ["", "#### Details", "", "", "<p>x</p>", ""]

    def test_internal(self, dispatcher):
        """Test that internal documentation renders its content."""
        assert dispatcher.render_block(Internal(children=(para("hidden"),))) == ["", "<p>hidden</p>", ""]


@pytest.mark.unit
class TestTables:
    """Test table output."""

    def test_table(self, dispatcher):
        """Test header and data cells with attributes and a caption."""
        node = Table(
            caption=Caption(id="tbl", children=(Text("Cap"),)),
            rows=(
                Row(
                    entries=(
                        Entry(thead=True, paragraphs=(para("H"),)),
                        Entry(colspan=2, align="center", paragraphs=(para("a<b"),)),
                    )
                ),
            ),
        )
        assert dispatcher.render_block(node) == [
            "",
            '<table class="doxyTable">',
            '<caption id="tbl">Cap</caption>',
            "<tr>",
            "<th>H</th>",
            '<td colspan="2" align="center">a&lt;b</td>',
            "</tr>",
            "</table>",
        ]

    def test_cell_class_and_spans(self, dispatcher, html_ctx):
        """Test the remaining cell attributes."""
        cell = Entry(rowspan=3, valign="top", width="20%", class_name="wide", paragraphs=(para("x"),))
        assert dispatcher.render_inline(cell, html_ctx) == '<td rowspan="3" valign="top" width="20%" class="wide">x</td>'

    def test_empty_table(self, dispatcher):
        """Test a table without rows."""
        assert dispatcher.render_block(Table()) == ["", '<table class="doxyTable">', "</table>"]

    def test_section_in_cell_keeps_paragraphs(self, dispatcher, html_ctx):
        """Test that a block nested in a cell still wraps its paragraphs."""
        section = SimpleSection(section_kind="note", children=(para("one"), para("two")))
        cell = Entry(paragraphs=(para("x", section),))
        rendered = dispatcher.render_inline(cell, html_ctx)

        assert rendered.startswith("<td>x")
        assert "<p>one</p>" in rendered
        assert "<p>two</p>" in rendered


@pytest.mark.unit
class TestSimpleSections:
    """Test simple sections and admonitions."""

    def test_return_section(self, dispatcher):
        """Test a titled definition list."""
        node = SimpleSection(section_kind="return", children=(para("The value"),))
        assert dispatcher.render_block(node) == [
            "",
            '<dl class="doxySectionUser">',
            "<dt>Returns</dt>",
            "<dd><p>The value</p></dd>",
            "</dl>",
            "",
        ]

    @pytest.mark.parametrize(
        "kind,admonition",
        [("note", "info"), ("warning", "warning"), ("attention", "danger"), ("important", "tip")],
    )
    def test_admonitions(self, dispatcher, kind, admonition):
        """Test the admonition kinds."""
        lines = dispatcher.render_block(SimpleSection(section_kind=kind, children=(para("Careful"),)))
        assert lines == ["", "", f":::{admonition}", "<p>Careful</p>", ":::", ""]

    def test_par_uses_its_title(self, dispatcher):
        """Test a user titled paragraph section."""
        node = SimpleSection(section_kind="par", title=title("Custom."), children=(para("x"),))
        assert "<dt>Custom</dt>" in dispatcher.render_block(node)

    def test_par_without_title(self, dispatcher):
        """Test that a user paragraph section needs a title."""
        with pytest.raises(MalformedNodeError):
            dispatcher.render_block(SimpleSection(section_kind="par", children=(para("x"),)))

    def test_unknown_kind(self, dispatcher, caplog):
        """Test that an unknown kind is logged and gets a generic title."""
        with caplog.at_level(logging.WARNING):
            lines = dispatcher.render_block(SimpleSection(section_kind="rcs", children=(para("x"),)))
        assert "<dt>Rcs</dt>" in lines
        assert "rcs" in caplog.text

    def test_multiline_body(self, dispatcher):
        """Test that a multi-paragraph body spans several lines."""
        node = SimpleSection(section_kind="see", children=(para("a"), para("b")))
        lines = dispatcher.render_block(node)
        assert lines[3] == "<dd>"
        assert lines[-3] == "</dd>"


@pytest.mark.unit
class TestParameterLists:
    """Test parameter tables."""

    def test_parameter_table(self, dispatcher):
        """Test one documented parameter."""
        node = ParameterList(items=(param_item("x", "The x", direction="in"),))
        assert dispatcher.render_block(node) == [
            "",
            '<dl class="doxyParamsList">',
            '<dt class="doxyParamsTableTitle">Parameters</dt>',
            "<dd>",
            '<table class="doxyParamsTable">',
            '<tr class="doxyParamItem">',
            '<td class="doxyParamItemName">[in] x</td>',
            '<td class="doxyParamItemDescription"><p>The x</p></td>',
            "</tr>",
            "</table>",
            "</dd>",
            "</dl>",
        ]

    def test_list_kinds(self, dispatcher):
        """Test the titles of the other list kinds."""
        for kind, heading in [("templateparam", "Template Parameters"), ("retval", "Return Values")]:
            lines = dispatcher.render_block(ParameterList(list_kind=kind, items=(param_item("x", "y"),)))
            assert f'<dt class="doxyParamsTableTitle">{heading}</dt>' in lines

    def test_several_names(self, dispatcher, html_ctx):
        """Test a row documenting several parameters at once."""
        names = ParameterNameList(
            types=(ParameterType(children=(Text("int"),)),),
            names=(ParameterName(children=(Text("x"),)), ParameterName(children=(Text("y"),))),
        )
        assert dispatcher.render_inline(names, html_ctx) == "x, y"

    def test_empty_list(self, dispatcher):
        """Test that a list without items renders nothing."""
        assert dispatcher.render_block(ParameterList()) == []


@pytest.mark.unit
class TestXrefSections:
    """Test todo, bug and deprecated items."""

    def test_linked_title(self, dispatcher):
        """Test that the title links to the collected list."""
        node = XrefSect(
            id="todo_1_todo000001",
            title="Todo",
            description=XrefDescription(children=(para("Fix it"),)),
        )
        assert dispatcher.render_block(node) == [
            "",
            '<div class="doxyXrefSect">',
            '<dl class="doxyXrefSectList">',
            '<dt class="doxyXrefSectTitle"><a href="/pages/todo/#_todo000001">Todo</a></dt>',
            '<dd class="doxyXrefSectDescription">',
            "<p>Fix it</p>",
            "</dd>",
            "</dl>",
            "</div>",
        ]

    def test_unresolved_title(self, dispatcher, caplog):
        """Test that an unknown list page leaves the title unlinked."""
        with caplog.at_level(logging.WARNING):
            lines = dispatcher.render_block(XrefSect(id="bug_1_bug000001", title="Bug"))
        assert '<dt class="doxyXrefSectTitle">Bug</dt>' in lines
        assert "bug_1_bug000001" in caplog.text

    def test_missing_id(self, dispatcher):
        """Test that an item without an id is malformed."""
        with pytest.raises(MalformedNodeError):
            dispatcher.render_block(XrefSect(title="Todo"))


@pytest.mark.unit
class TestOtherBlocks:
    """Test table of contents and block quotes."""

    def test_toc_list(self, dispatcher):
        """Test that entries link to the in-page anchors."""
        node = TocList(items=(TocItem(id="classfoo_1intro", children=(Text("Intro"),)),))
        assert dispatcher.render_block(node) == [
            "",
            "",
            '<ul class="doxyTocList">',
            '<li><a class="doxyTocListItem" href="#intro">Intro</a></li>',
            "</ul>",
        ]

    def test_block_quote(self, dispatcher):
        """Test a quoted paragraph."""
        assert dispatcher.render_block(BlockQuote(paragraphs=(para("q"),))) == [
            '<blockquote class="doxyBlockQuote">',
            "",
            "<p>q</p>",
            "",
            "</blockquote>",
        ]
