#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/references.py
"""Renderers for linked text, compound references and cross-reference sections.

All of these resolve a Doxygen id through the permalink resolver. A missing
permalink is expected for undocumented or external symbols; the label is
then rendered as plain text and the miss is logged.

"""

from __future__ import annotations

import logging

from doxy2md.ast.nodes import Inc, InnerReference, LinkedText, Param, ReferenceBase, RefText, TocItem, TocList, XrefSect
from doxy2md.exceptions import MalformedNodeError
from doxy2md.permalinks import get_permalink_anchor, linkable_permalink
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext
from doxy2md.utils.escape import escape_html, render_text, sanitize_anonymous_namespace, split_lines

logger = logging.getLogger(__name__)


def _link(permalink: str | None, label: str) -> str:
    return f'<a href="{permalink}">{label}</a>' if permalink else label


class LinkedTextStringRenderer(ElementStringRenderer):
    """Renders types, default values and initializers with their embedded references."""

    def render_to_string(self, node: LinkedText, ctx: RenderContext) -> str:
        return self.dispatcher.render_inline_many(node.children, ctx)


class RefTextStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: RefText, ctx: RenderContext) -> str:
        if node.external:
            self.note(f"External reference to {node.external} rendered as a local link")
        if node.tooltip:
            self.note(f"Tooltip '{node.tooltip}' of reference {node.refid} ignored")

        label = render_text(node.text.strip(), ctx.mode)
        permalink = None
        if node.refid:
            permalink = linkable_permalink(self.resolver.resolve_permalink(node.refid, node.kindref))
        if permalink is None:
            logger.warning(f"Unresolved {node.kindref} reference {node.refid or '(no id)'}, rendering plain text")
        return _link(permalink, label)


class ReferenceStringRenderer(ElementStringRenderer):
    """Renders ``references``/``referencedby`` entries as links to the member."""

    def render_to_string(self, node: ReferenceBase, ctx: RenderContext) -> str:
        label = render_text(sanitize_anonymous_namespace(node.text.strip()), ctx.mode)
        permalink = linkable_permalink(self.resolver.resolve_permalink(node.refid, "member")) if node.refid else None
        if permalink is None:
            logger.warning(f"Unresolved member reference {node.refid or '(no id)'}, rendering plain text")
        return _link(permalink, label)


class IncStringRenderer(ElementStringRenderer):
    """Renders an include directive, linking the file name to its page."""

    def render_to_string(self, node: Inc, ctx: RenderContext) -> str:
        permalink = linkable_permalink(self.resolver.resolve_page_permalink(node.refid)) if node.refid else None
        opening, closing = ('"', '"') if node.local else ("&lt;", "&gt;")
        content = render_text(node.text.strip(), ctx.mode)
        return f"#include {opening}{_link(permalink, content)}{closing}"


class InnerReferenceStringRenderer(ElementStringRenderer):
    """Renders a reference to a nested compound (class, namespace, file...)."""

    def render_to_string(self, node: InnerReference, ctx: RenderContext) -> str:
        if node.prot:
            self.note(f"Protection '{node.prot}' of {node.kind} {node.refid} not rendered")
        content = render_text(node.text.strip(), ctx.mode)
        permalink = linkable_permalink(self.resolver.resolve_page_permalink(node.refid)) if node.refid else None
        if permalink is None:
            logger.warning(f"Unresolved compound reference {node.refid or '(no id)'}, rendering plain text")
        return _link(permalink, content)


class ParamStringRenderer(ElementStringRenderer):
    """Renders a parameter declaration as ``type name[array]=default``."""

    def render_to_string(self, node: Param, ctx: RenderContext) -> str:
        for name in ("attributes", "defname", "typeconstraint", "briefdescription"):
            if getattr(node, name):
                self.note(f"Parameter property '{name}' not rendered")

        text = self.dispatcher.render_inline(node.type, ctx)
        if node.declname:
            text += f" {node.declname}{node.array}"
        if node.defval is not None:
            text += f"={self.dispatcher.render_inline(node.defval, ctx)}"
        return text


class XrefSectLinesRenderer(ElementLinesRenderer):
    """Renders ``\\todo``, ``\\deprecated`` and similar items, linking the title to the collected list."""

    def render_to_lines(self, node: XrefSect, ctx: RenderContext) -> list[str]:
        if not node.id:
            raise MalformedNodeError("Cross-reference section without an id", node)

        title = escape_html(node.title or "?")
        permalink = linkable_permalink(self.resolver.resolve_permalink(node.id, "xrefsect"))
        if permalink is None:
            logger.warning(f"Unresolved cross-reference section {node.id}, rendering its title unlinked")

        description = self.dispatcher.render_inline(node.description, ctx).strip()
        return [
            "",
            '<div class="doxyXrefSect">',
            '<dl class="doxyXrefSectList">',
            f'<dt class="doxyXrefSectTitle">{_link(permalink, title)}</dt>',
            '<dd class="doxyXrefSectDescription">',
            *split_lines(description),
            "</dd>",
            "</dl>",
            "</div>",
        ]


class TocListLinesRenderer(ElementLinesRenderer):
    def render_to_lines(self, node: TocList, ctx: RenderContext) -> list[str]:
        return ["", "", '<ul class="doxyTocList">', *self.dispatcher.render_block_many(node.items, ctx), "</ul>"]


class TocItemStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: TocItem, ctx: RenderContext) -> str:
        content = self.dispatcher.render_inline_many(node.children, ctx.with_mode("html")).strip()
        return f'<li><a class="doxyTocListItem" href="#{get_permalink_anchor(node.id)}">{content}</a></li>'
