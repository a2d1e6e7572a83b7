#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/tables.py
"""Renderers for Doxygen tables.

Tables are emitted as HTML (``<table class="doxyTable">``) because cells may
contain markup that Markdown pipe tables cannot hold. Each cell renders on
one line.
"""

from __future__ import annotations

from doxy2md.ast.nodes import Caption, Entry, Row, Table
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext


class TableLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: Table, ctx: RenderContext) -> list[str]:
        html_ctx = ctx.with_mode("html")
        lines = ["", '<table class="doxyTable">']
        if node.caption is not None:
            lines.append(self.dispatcher.render_inline(node.caption, html_ctx))
        lines.extend(self.dispatcher.render_block_many(node.rows, html_ctx))
        lines.append("</table>")
        return lines


class CaptionStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Caption, ctx: RenderContext) -> str:
        attributes = f' id="{node.id}"' if node.id else ""
        content = self.dispatcher.render_inline_many(node.children, ctx.with_mode("html")).strip()
        return f"<caption{attributes}>{content}</caption>"


class RowLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: Row, ctx: RenderContext) -> list[str]:
        return ["<tr>", *self.dispatcher.render_block_many(node.entries, ctx), "</tr>"]


class EntryStringRenderer(ElementStringRenderer):
    """Renders one cell as ``<th>`` or ``<td>`` with its span, alignment and class attributes."""

    def render_to_string(self, node: Entry, ctx: RenderContext) -> str:
        attributes = ""
        if node.colspan is not None:
            attributes += f' colspan="{node.colspan}"'
        if node.rowspan is not None:
            attributes += f' rowspan="{node.rowspan}"'
        if node.align:
            attributes += f' align="{node.align}"'
        if node.valign:
            attributes += f' valign="{node.valign}"'
        if node.width:
            attributes += f' width="{node.width}"'
        if node.class_name:
            attributes += f' class="{node.class_name}"'

        content = self.dispatcher.render_inline_many(node.paragraphs, ctx.without_paragraphs("html")).strip()
        tag = "th" if node.thead else "td"
        return f"<{tag}{attributes}>{content}</{tag}>"
