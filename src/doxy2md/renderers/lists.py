#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/lists.py
"""Renderers for itemized, ordered and variable lists.

Every list item becomes exactly one ``<li>`` element whose first output line
starts with the opening tag, so a list of N items always yields N item lines
between the container's opening and closing lines.

Variable lists arrive as a flat, alternating sequence of terms and
definitions. :func:`pair_variable_list` turns that sequence into explicit
pairs in one pass; a term without a definition (or the reverse) is logged
and paired with an empty counterpart instead of failing the page.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from doxy2md.ast.nodes import DocList, ListItem, OrderedList, Text, VariableList, VarListEntry
from doxy2md.exceptions import MalformedNodeError
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext
from doxy2md.utils.escape import split_lines

logger = logging.getLogger(__name__)


class ListLinesRenderer(ElementLinesRenderer):
    """Renders ``itemizedlist`` as ``<ul>`` and ``orderedlist`` as ``<ol>``.

    An unordered list containing check boxes (items with an ``override``)
    gets the extra ``check`` class. Ordered lists carry their numbering
    ``type`` (``1`` by default) and ``start`` value.
    """

    def render_to_lines(self, node: DocList, ctx: RenderContext) -> list[str]:
        if isinstance(node, OrderedList):
            attributes = f' type="{node.type or "1"}"'
            if node.start is not None:
                attributes += f' start="{node.start}"'
            opening, closing = f'<ol class="doxyList"{attributes}>', "</ol>"
        else:
            check = " check" if any(item.override for item in node.items) else ""
            opening, closing = f'<ul class="doxyList{check}">', "</ul>"

        lines = ["", opening]
        for item in node.items:
            lines.extend(self.dispatcher.render_block(item, ctx))
        lines.append(closing)
        return lines


class ListItemLinesRenderer(ElementLinesRenderer):
    """Renders one ``<li>``; paragraphs inside are separated by blank lines instead of ``<p>``."""

    def render_to_lines(self, node: ListItem, ctx: RenderContext) -> list[str]:
        attributes = ""
        if node.override:
            attributes += f' class="{node.override}"'
        if node.value is not None:
            attributes += f' value="{node.value}"'

        item_ctx = ctx.without_paragraphs("html")
        paragraphs = [self.dispatcher.render_inline(para, item_ctx).strip() for para in node.paragraphs]
        body = "\n\n".join(text for text in paragraphs if text)
        return split_lines(f"<li{attributes}>{body}</li>")


@dataclass(frozen=True)
class VariableListPair:
    """A term and its definition; either side is None when the source list was malformed."""

    entry: Optional[VarListEntry]
    item: Optional[ListItem]


def pair_variable_list(children: Iterable[Union[VarListEntry, ListItem, Text]]) -> list[VariableListPair]:
    """Pair alternating terms and definitions.

    Parameters
    ----------
    children : iterable
        Children of a ``variablelist`` in document order

    Returns
    -------
    list[VariableListPair]
        One pair per term, plus one per orphaned definition

    Raises
    ------
    MalformedNodeError
        If a child is neither a term, a definition nor whitespace

    """
    pairs: list[VariableListPair] = []
    pending: Optional[VarListEntry] = None

    for child in children:
        if isinstance(child, VarListEntry):
            if pending is not None:
                logger.warning("Variable list term has no definition")
                pairs.append(VariableListPair(pending, None))
            pending = child
        elif isinstance(child, ListItem):
            if pending is None:
                logger.warning("Variable list definition has no preceding term")
            pairs.append(VariableListPair(pending, child))
            pending = None
        elif isinstance(child, Text) and not child.text.strip():
            continue
        else:
            raise MalformedNodeError(f"Unexpected variable list child: {child!r}", child)

    if pending is not None:
        logger.warning("Variable list ends with a term that has no definition")
        pairs.append(VariableListPair(pending, None))
    return pairs


class VariableListLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: VariableList, ctx: RenderContext) -> list[str]:
        html_ctx = ctx.with_mode("html")
        lines = ["", '<dl class="doxyVariableList">']

        for pair in pair_variable_list(node.children):
            term = self.dispatcher.render_inline(pair.entry, html_ctx).strip()
            description = ""
            if pair.item is not None:
                description = self.dispatcher.render_inline_many(pair.item.paragraphs, html_ctx).strip()

            lines.append(f"<dt>{term}</dt>")
            if "\n" in description:
                lines.extend(["<dd>", *description.split("\n"), "</dd>"])
            else:
                lines.append(f"<dd>{description}</dd>")

        lines.append("</dl>")
        return lines


class VarListEntryStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: VarListEntry, ctx: RenderContext) -> str:
        return self.dispatcher.render_inline(node.term, ctx)
