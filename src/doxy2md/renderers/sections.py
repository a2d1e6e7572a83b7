#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/sections.py
"""Renderers for descriptions, nested sections, headings and titles.

Section depth maps to Markdown heading depth through the
``section_heading_offset`` option (``sect1`` becomes ``##`` by default).
Depths past ``max_heading_level`` cannot be expressed as Markdown headings
and are rendered as bold text preceded by an explicit anchor.

"""

from __future__ import annotations

import logging
import re

from doxy2md.ast.nodes import Description, Heading, Internal, Section, Title
from doxy2md.exceptions import MalformedNodeError
from doxy2md.permalinks import get_permalink_anchor
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext

logger = logging.getLogger(__name__)

_TRAILING_PERIOD = re.compile(r"\.$")


class DescriptionLinesRenderer(ElementLinesRenderer):
    """Renders description containers by rendering their children in order."""

    def render_to_lines(self, node: Description, ctx: RenderContext) -> list[str]:
        lines: list[str] = []
        if node.title is not None:
            lines.extend(self.dispatcher.render_block(node.title, ctx))
        lines.extend(self.dispatcher.render_block_many(node.children, ctx))
        return lines


class InternalLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: Internal, ctx: RenderContext) -> list[str]:
        return self.dispatcher.render_block_many(node.children, ctx)


class SectionLinesRenderer(ElementLinesRenderer):
    """Renders ``sect1`` to ``sect6`` as a heading followed by the section body."""

    def render_to_lines(self, node: Section, ctx: RenderContext) -> list[str]:
        if not 1 <= node.level <= 6:
            raise MalformedNodeError(f"Section level must be between 1 and 6, got {node.level}", node)

        lines: list[str] = []
        title = ""
        if node.title is not None:
            title = self.dispatcher.render_inline_many(node.title.children, ctx.with_mode("markdown")).strip()
            title = _TRAILING_PERIOD.sub("", title)

        if title:
            lines.append("")
            lines.extend(self.heading_lines(node.level + self.options.section_heading_offset, title, node.id))

        lines.append("")
        lines.extend(self.dispatcher.render_block_many(node.children, ctx))
        return lines

    def heading_lines(self, level: int, title: str, node_id: str) -> list[str]:
        """Return the lines of a heading, degrading to bold text past the deepest level.

        Parameters
        ----------
        level : int
            Requested heading level
        title : str
            Rendered title text
        node_id : str
            Doxygen id of the section; may be empty

        Returns
        -------
        list[str]
            One heading line, or an anchor line and a bold line for deep sections

        """
        anchor = get_permalink_anchor(node_id) if node_id else ""

        if level > self.options.max_heading_level:
            logger.warning(
                f"Heading level {level} exceeds the supported maximum of "
                f"{self.options.max_heading_level}; rendering '{title}' as bold text"
            )
            lines = [f'<a id="{anchor}"></a>'] if anchor else []
            lines.append(f"<b>{title}</b>")
            return lines

        if anchor and self.options.heading_anchors:
            return [f"{'#' * level} {title} {{#{anchor}}}"]
        return [f"{'#' * level} {title}"]


class HeadingLinesRenderer(ElementLinesRenderer):
    """Renders explicit ``heading`` elements at their own level."""

    def render_to_lines(self, node: Heading, ctx: RenderContext) -> list[str]:
        if node.level == 1:
            self.note("Level 1 heading conflicts with the page title")

        text = self.dispatcher.render_inline_many(node.children, ctx.with_mode("markdown")).strip()
        if node.level > self.options.max_heading_level:
            logger.warning(f"Heading level {node.level} exceeds the supported maximum; rendering as bold text")
            return ["", f"<b>{text}</b>"]
        return ["", f"{'#' * max(node.level, 1)} {text}"]


class TitleLinesRenderer(ElementLinesRenderer):
    """Renders a standalone title as a heading."""

    def render_to_lines(self, node: Title, ctx: RenderContext) -> list[str]:
        text = self.dispatcher.render_inline_many(node.children, ctx.with_mode("markdown")).strip()
        if not text:
            return []
        return ["", f"{'#' * self.options.title_heading_level} {text}", ""]


class TitleStringRenderer(ElementStringRenderer):
    """Renders a title nested in running text as bold text."""

    def render_to_string(self, node: Title, ctx: RenderContext) -> str:
        return f"<b>{self.dispatcher.render_inline_many(node.children, ctx)}</b>"


class TermStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Title, ctx: RenderContext) -> str:
        return self.dispatcher.render_inline_many(node.children, ctx)
