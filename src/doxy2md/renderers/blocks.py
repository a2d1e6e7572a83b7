#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/blocks.py
"""Renderers for simple sections, parameter lists and block quotes.

Simple sections (``\\return``, ``\\see``, ``\\par`` and the like) become
titled HTML definition lists. Notes and warnings become Docusaurus
admonitions:

==========  ==============
Doxygen     Admonition
==========  ==============
note        ``:::info``
warning     ``:::warning``
attention   ``:::danger``
important   ``:::tip``
==========  ==============

Parameter lists become a two-column table inside a definition list, one row
per documented parameter.

"""

from __future__ import annotations

import logging
import re

from doxy2md.ast.nodes import (
    BlockQuote,
    ParameterItem,
    ParameterList,
    ParameterName,
    ParameterNameList,
    ParameterType,
    SimpleSection,
)
from doxy2md.constants import ADMONITION_KINDS, PARAMETER_LIST_TITLES, SIMPLE_SECTION_TITLES
from doxy2md.exceptions import MalformedNodeError
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext
from doxy2md.utils.escape import split_lines

logger = logging.getLogger(__name__)

_TRAILING_PERIOD = re.compile(r"\.$")


def _wrapped(opening: str, closing: str, body: str) -> list[str]:
    # single line bodies stay on the tag line
    if "\n" not in body:
        return [f"{opening}{body}{closing}"]
    return [opening, *body.split("\n"), closing]


class SimpleSectionLinesRenderer(ElementLinesRenderer):
    """Renders ``simplesect`` elements as titled definition lists or admonitions."""

    def render_to_lines(self, node: SimpleSection, ctx: RenderContext) -> list[str]:
        kind = node.section_kind
        lines = [""]

        if kind in ADMONITION_KINDS:
            mode = "html" if self.options.render_paragraphs else "markdown"
            body = self.dispatcher.render_inline_many(node.children, ctx.with_mode(mode)).strip()
            lines.extend(["", f":::{ADMONITION_KINDS[kind]}", *split_lines(body), ":::"])
        else:
            lines.extend(self._definition_list(node, ctx))

        lines.append("")
        return lines

    def _definition_list(self, node: SimpleSection, ctx: RenderContext) -> list[str]:
        html_ctx = ctx.with_mode("html")
        kind = node.section_kind

        if kind == "par":
            if node.title is None:
                raise MalformedNodeError("Paragraph section without a title", node)
            title = self.dispatcher.render_inline_many(node.title.children, html_ctx).strip()
            title = _TRAILING_PERIOD.sub("", title)
        elif kind in SIMPLE_SECTION_TITLES:
            title = SIMPLE_SECTION_TITLES[kind]
        else:
            logger.warning(f"Unknown simple section kind '{kind}', rendering it with a generic title")
            title = kind.capitalize()

        body = self.dispatcher.render_inline_many(node.children, html_ctx).strip()
        return [
            '<dl class="doxySectionUser">',
            f"<dt>{title}</dt>",
            *_wrapped("<dd>", "</dd>", body),
            "</dl>",
        ]


class ParameterListLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: ParameterList, ctx: RenderContext) -> list[str]:
        if not node.items:
            return []

        title = PARAMETER_LIST_TITLES.get(node.list_kind)
        if title is None:
            logger.warning(f"Unknown parameter list kind '{node.list_kind}', rendering it with a generic title")
            title = node.list_kind.capitalize()

        return [
            "",
            '<dl class="doxyParamsList">',
            f'<dt class="doxyParamsTableTitle">{title}</dt>',
            "<dd>",
            '<table class="doxyParamsTable">',
            *self.dispatcher.render_block_many(node.items, ctx),
            "</table>",
            "</dd>",
            "</dl>",
        ]


class ParameterItemLinesRenderer(ElementLinesRenderer):
    """Renders one parameter row: the names and the description."""

    def render_to_lines(self, node: ParameterItem, ctx: RenderContext) -> list[str]:
        html_ctx = ctx.with_mode("html")
        names = ", ".join(
            text for text in (self.dispatcher.render_inline(name_list, html_ctx) for name_list in node.names) if text
        )
        description = self.dispatcher.render_inline(node.description, html_ctx).strip()
        return [
            '<tr class="doxyParamItem">',
            f'<td class="doxyParamItemName">{names}</td>',
            *_wrapped('<td class="doxyParamItemDescription">', "</td>", description),
            "</tr>",
        ]


class ParameterNameListStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: ParameterNameList, ctx: RenderContext) -> str:
        if node.types:
            self.note("Parameter types in parameter lists are not rendered")
        return ", ".join(self.dispatcher.render_inline(name, ctx) for name in node.names)


class ParameterNameStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: ParameterName, ctx: RenderContext) -> str:
        name = self.dispatcher.render_inline_many(node.children, ctx).strip()
        return f"[{node.direction}] {name}" if node.direction else name


class ParameterTypeStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: ParameterType, ctx: RenderContext) -> str:
        return self.dispatcher.render_inline_many(node.children, ctx).strip()


class BlockQuoteLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: BlockQuote, ctx: RenderContext) -> list[str]:
        return [
            '<blockquote class="doxyBlockQuote">',
            *self.dispatcher.render_block_many(node.paragraphs, ctx.with_mode("html")),
            "</blockquote>",
        ]
