#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/listing.py
"""Renderers for program listings.

A listing is rendered as one ``<div class="doxyCodeLine">`` per source line.
Each numbered line gets an ``l00042``-style anchor so other pages can link
to it, except in member excerpts where the same numbers would collide with
the full file listing. When a line belongs to a documented definition its
number links to that definition.

Highlight classes from Doxygen's lexer map to CSS classes through
:data:`~doxy2md.constants.HIGHLIGHT_CLASSES`; unknown classes fall back to
the plain ``doxyHighlight`` style.

"""

from __future__ import annotations

import logging

from doxy2md.ast.nodes import CodeLine, Highlight, Listing
from doxy2md.constants import DEFAULT_HIGHLIGHT_CLASS, HIGHLIGHT_CLASSES, LINE_ANCHOR_PREFIX, LINE_NUMBER_WIDTH
from doxy2md.permalinks import linkable_permalink
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext

logger = logging.getLogger(__name__)


def line_anchor(lineno: int) -> str:
    """Return the anchor id of a source line.

    Examples
    --------
        >>> line_anchor(42)
        'l00042'

    """
    return f"{LINE_ANCHOR_PREFIX}{lineno:0{LINE_NUMBER_WIDTH}d}"


def highlight_class(classification: str) -> str:
    """Return the CSS class for a Doxygen highlight classification."""
    css_class = HIGHLIGHT_CLASSES.get(classification)
    if css_class is None:
        logger.warning(f"Unknown highlight class '{classification}', using {DEFAULT_HIGHLIGHT_CLASS}")
        return DEFAULT_HIGHLIGHT_CLASS
    return css_class


class CodeLineStringRenderer(ElementStringRenderer):
    """Renders one source line, optionally with its line anchor."""

    def render_to_string(self, node: CodeLine, ctx: RenderContext) -> str:
        return self.render_line(node, ctx, show_anchor=True)

    def render_line(self, node: CodeLine, ctx: RenderContext, show_anchor: bool) -> str:
        """Render a code line.

        Parameters
        ----------
        node : CodeLine
            Line to render
        ctx : RenderContext
            Current rendering state
        show_anchor : bool
            Emit the ``l00001``-style anchor before the line number

        Returns
        -------
        str
            One ``<div class="doxyCodeLine">`` element

        """
        if node.external:
            self.note(f"External definition {node.external} of line {node.lineno} ignored")

        permalink = None
        if node.refid and node.refkind:
            permalink = linkable_permalink(self.resolver.resolve_permalink(node.refid, node.refkind))

        text = '<div class="doxyCodeLine">'
        if node.lineno is not None:
            text += '<span class="doxyLineNumber">'
            if show_anchor:
                text += f'<a id="{line_anchor(node.lineno)}"></a>'
            if permalink:
                text += f'<a href="{permalink}">{node.lineno}</a>'
            else:
                text += str(node.lineno)
            text += "</span>"
        else:
            text += '<span class="doxyNoLineNumber">&nbsp;</span>'

        content = self.dispatcher.render_inline_many(node.highlights, ctx.with_mode("html"))
        if content:
            text += f'<span class="doxyLineContent">{content}</span>'
        text += "</div>"
        return text


class ListingLinesRenderer(ElementLinesRenderer):
    """Renders a whole listing inside ``<div class="doxyProgramListing">``."""

    def __init__(self, dispatcher):
        """Initialize the listing renderer and its code line helper."""
        super().__init__(dispatcher)
        self._code_lines = CodeLineStringRenderer(dispatcher)

    def render_to_lines(self, node: Listing, ctx: RenderContext) -> list[str]:
        if not node.lines:
            return []

        html_ctx = ctx.with_mode("html")
        lines = ["", '<div class="doxyProgramListing">', ""]
        for code_line in node.lines:
            lines.append(self._code_lines.render_line(code_line, html_ctx, show_anchor=node.show_anchor))
        lines.extend(["", "</div>", ""])
        return lines


class HighlightStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Highlight, ctx: RenderContext) -> str:
        if not node.children:
            return ""
        css_class = highlight_class(node.classification)
        return f'<span class="{css_class}">{self.dispatcher.render_inline_many(node.children, ctx)}</span>'
