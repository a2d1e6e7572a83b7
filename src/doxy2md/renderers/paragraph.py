#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/paragraph.py
"""Paragraph rendering and segmentation.

A Doxygen ``para`` element may hold running text, inline markup and block
content (lists, tables, code listings, simple sections) side by side. The
renderer splits the children into segments: consecutive inline children form
one physical paragraph, and each block child is emitted on its own between
paragraphs.

Which kinds count as inline is decided by :data:`PARAGRAPH_CLASSIFICATION`,
a table that covers every concrete node kind. Types outside the table are
classified through their ancestor chain.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Union

from doxy2md.ast.nodes import Child, Node, Paragraph, Text, kind_chain
from doxy2md.renderers.base import ElementLinesRenderer, RenderContext
from doxy2md.utils.escape import split_lines

logger = logging.getLogger(__name__)

Placement = Literal["inline", "block"]

INLINE_KINDS = frozenset(
    {
        # markup spans
        "bold",
        "emphasis",
        "underline",
        "strike",
        "s",
        "del",
        "ins",
        "subscript",
        "superscript",
        "small",
        "cite",
        "center",
        "computeroutput",
        # links and references
        "ulink",
        "ref",
        "reftext",
        "type",
        "defval",
        "initializer",
        "typeconstraint",
        "references",
        "referencedby",
        "innerclass",
        "innerconcept",
        "innerdir",
        "innerfile",
        "innergroup",
        "innermodule",
        "innernamespace",
        "innerpage",
        # leaf content
        "specialcharacter",
        "linebreak",
        "nonbreakablespace",
        "sp",
        "emoji",
        "anchor",
        "formula",
        "image",
        "param",
        "highlight",
        # fragments that only occur inside inline containers
        "parametertype",
        "parametername",
        "parameternamelist",
        "caption",
        "entry",
        "term",
        "varlistentry",
        "tocitem",
    }
)

BLOCK_KINDS = frozenset(
    {
        "briefdescription",
        "detaileddescription",
        "inbodydescription",
        "parameterdescription",
        "xrefdescription",
        "para",
        "internal",
        "sect1",
        "sect2",
        "sect3",
        "sect4",
        "sect5",
        "sect6",
        "heading",
        "title",
        "hruler",
        "includes",
        "includedby",
        "codeline",
        "programlisting",
        "memberprogramlisting",
        "simplesect",
        "parameteritem",
        "parameterlist",
        "xrefsect",
        "row",
        "table",
        "listitem",
        "itemizedlist",
        "orderedlist",
        "variablelist",
        "blockquote",
        "verbatim",
        "preformatted",
        "htmlonly",
        "latexonly",
        "manonly",
        "rtfonly",
        "xmlonly",
        "docbookonly",
        "toclist",
    }
)

# Abstract kinds, consulted only for types not listed above
_ABSTRACT_PLACEMENT: dict[str, Placement] = {
    "markup": "inline",
    "empty": "inline",
    "linkedtext": "inline",
    "reference": "inline",
    "innerref": "inline",
    "inc": "block",
    "description": "block",
    "section": "block",
    "listing": "block",
    "list": "block",
    "formatonly": "block",
}

PARAGRAPH_CLASSIFICATION: dict[str, Placement] = {
    **{kind: "inline" for kind in INLINE_KINDS},
    **{kind: "block" for kind in BLOCK_KINDS},
}


def classify(child: Child) -> Placement:
    """Return whether a paragraph child stays inline or breaks the paragraph.

    Parameters
    ----------
    child : Child
        Text run or node

    Returns
    -------
    {"inline", "block"}
        Placement of the child

    """
    if isinstance(child, Text):
        return "inline"

    for kind in kind_chain(type(child)):
        placement = PARAGRAPH_CLASSIFICATION.get(kind) or _ABSTRACT_PLACEMENT.get(kind)
        if placement is not None:
            return placement

    logger.warning(f"No paragraph placement for {child.kind}, treating it as block content")
    return "block"


@dataclass(frozen=True)
class InlineRun:
    """Consecutive inline children forming one physical paragraph."""

    children: tuple[Child, ...]


@dataclass(frozen=True)
class BlockItem:
    """A block child emitted between paragraphs."""

    node: Node


Segment = Union[InlineRun, BlockItem]


def segment_paragraph(children: Iterable[Child]) -> list[Segment]:
    """Split paragraph children into inline runs and block items, preserving order.

    Examples
    --------
        >>> segments = segment_paragraph([Text("a"), Bold(), ItemizedList(), Text("b")])
        >>> [type(s).__name__ for s in segments]
        ['InlineRun', 'BlockItem', 'InlineRun']

    """
    segments: list[Segment] = []
    pending: list[Child] = []

    for child in children:
        if classify(child) == "inline":
            pending.append(child)
            continue
        if pending:
            segments.append(InlineRun(tuple(pending)))
            pending = []
        assert isinstance(child, Node)
        segments.append(BlockItem(child))

    if pending:
        segments.append(InlineRun(tuple(pending)))
    return segments


class ParagraphLinesRenderer(ElementLinesRenderer):
    """Renders ``para`` elements, wrapping inline runs in ``<p>`` when configured."""

    def render_to_lines(self, node: Paragraph, ctx: RenderContext) -> list[str]:
        lines: list[str] = []
        wrap = self.options.render_paragraphs and not ctx.skip_para
        # skip_para only applies to this paragraph, not to blocks nested in it
        ctx = ctx.with_paragraphs()
        inline_ctx = ctx.with_mode("html") if self.options.render_paragraphs else ctx

        for segment in segment_paragraph(node.children):
            if isinstance(segment, BlockItem):
                lines.extend(self.dispatcher.render_block(segment.node, ctx))
                continue

            text = self.dispatcher.render_inline_many(segment.children, inline_ctx).strip()
            if not text:
                continue
            lines.append("")
            if wrap:
                lines.extend(split_lines(f"<p>{text}</p>"))
                lines.append("")
            else:
                lines.extend(split_lines(text))

        return lines
