#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/inline.py
"""String renderers for inline elements.

These renderers produce HTML fragments that sit inside running text: markup
spans, links, special characters, formulas, images and a handful of fixed
snippets. Unknown variants never abort the render; they are logged and
rendered as plainly as possible.

"""

from __future__ import annotations

import logging
import re

from doxy2md.ast.nodes import (
    Anchor,
    Emoji,
    Empty,
    FormatOnly,
    Formula,
    HtmlOnly,
    Image,
    Markup,
    Preformatted,
    Ref,
    Sp,
    SpecialCharacter,
    UrlLink,
    Verbatim,
    kind_chain,
)
from doxy2md.constants import MARKUP_TAGS
from doxy2md.exceptions import MalformedNodeError
from doxy2md.permalinks import get_permalink_anchor, linkable_permalink
from doxy2md.renderers.base import ElementStringRenderer, RenderContext
from doxy2md.utils.escape import escape_html, strip_leading_and_trailing_newlines
from doxy2md.utils.special_chars import special_character

logger = logging.getLogger(__name__)

_URL_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")

_EMPTY_ELEMENTS: dict[str, str] = {
    "hruler": "\n<hr/>\n",
    "linebreak": "\n<br/>",
    "nonbreakablespace": "&nbsp;",
}


def markup_tag(node: Markup) -> str | None:
    """Return the opening tag contents for a markup node, searching its kind chain."""
    for kind in kind_chain(type(node)):
        tag = MARKUP_TAGS.get(kind)
        if tag is not None:
            return tag
    return None


class MarkupStringRenderer(ElementStringRenderer):
    """Wraps markup span children in the HTML tag mapped to the span kind."""

    def render_to_string(self, node: Markup, ctx: RenderContext) -> str:
        content = self.dispatcher.render_inline_many(node.children, ctx)
        tag = markup_tag(node)
        if tag is None:
            logger.warning(f"No HTML tag for markup kind '{node.kind}', rendering its content unwrapped")
            return content

        closing = tag.split(" ", 1)[0]
        return f"<{tag}>{content}</{closing}>"


class SpecialCharacterStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: SpecialCharacter, ctx: RenderContext) -> str:
        char = special_character(node.name)
        if char is None:
            logger.warning(f"Unknown special character '{node.name}'")
            return ""
        return char


class EmptyStringRenderer(ElementStringRenderer):
    """Renders contentless elements (rulers, line breaks, non-breaking spaces)."""

    def render_to_string(self, node: Empty, ctx: RenderContext) -> str:
        for kind in kind_chain(type(node)):
            snippet = _EMPTY_ELEMENTS.get(kind)
            if snippet is not None:
                return snippet
        logger.warning(f"Empty element '{node.kind}' has no rendering")
        return ""


class SpStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Sp, ctx: RenderContext) -> str:
        return " " * max(node.value, 1)


class EmojiStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Emoji, ctx: RenderContext) -> str:
        return f'<span class="doxyEmoji">{node.unicode}</span>'


class AnchorStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Anchor, ctx: RenderContext) -> str:
        if not node.id:
            raise MalformedNodeError("Anchor without an id", node)
        return f'<a id="{get_permalink_anchor(node.id)}"></a>'


class FormulaStringRenderer(ElementStringRenderer):
    """Shows the formula source as code; formulas are not typeset."""

    def render_to_string(self, node: Formula, ctx: RenderContext) -> str:
        formula = escape_html(node.text)
        self.note(f"LaTeX formula {formula} not typeset")
        return f"<code>{formula}</code>"


class ImageStringRenderer(ElementStringRenderer):
    """Renders HTML images as ``<figure>`` blocks and records them on the context.

    LaTeX images are skipped silently. Images for other outputs are logged and
    skipped.
    """

    def render_to_string(self, node: Image, ctx: RenderContext) -> str:
        if node.type == "latex":
            return ""
        if node.type != "html":
            logger.warning(f"Image type '{node.type}' is not rendered")
            return ""

        ctx.images.add(node)

        attributes = ""
        if node.name:
            source = node.name if _URL_PATTERN.match(node.name) else f"{self.options.image_url_prefix}{node.name}"
            attributes += f' src="{source}"'
        if node.width:
            attributes += f' width="{node.width}"'
        if node.height:
            attributes += f' height="{node.height}"'
        if node.alt:
            attributes += f' alt="{node.alt}"'
        if node.inline:
            attributes += ' class="inline"'

        text = f"\n<figure>\n  <img{attributes}></img>"
        caption = self.dispatcher.render_inline_many(node.children, ctx.with_mode("html")).strip()
        if caption:
            text += f"\n  <figcaption>{caption}</figcaption>"
        text += "\n</figure>"
        return text


class UrlLinkStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: UrlLink, ctx: RenderContext) -> str:
        return f'<a href="{node.url}">{self.dispatcher.render_inline_many(node.children, ctx)}</a>'


class RefStringRenderer(ElementStringRenderer):
    """Renders a documentation cross reference as a link, or as plain text when unresolved."""

    def render_to_string(self, node: Ref, ctx: RenderContext) -> str:
        if node.external:
            self.note(f"External reference to {node.external} rendered as a local link")

        label = self.dispatcher.render_inline_many(node.children, ctx)
        permalink = None
        if node.refid:
            permalink = linkable_permalink(self.resolver.resolve_permalink(node.refid, node.kindref))
        if permalink is None:
            logger.warning(f"Unresolved {node.kindref} reference {node.refid or '(no id)'}, rendering plain text")
            return label
        return f'<a href="{permalink}">{label}</a>'


class VerbatimStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Verbatim, ctx: RenderContext) -> str:
        code = strip_leading_and_trailing_newlines(escape_html(node.text))
        return f"\n\n<pre><code>{code}\n</code></pre>\n"


class PreformattedStringRenderer(ElementStringRenderer):
    def render_to_string(self, node: Preformatted, ctx: RenderContext) -> str:
        code = strip_leading_and_trailing_newlines(
            self.dispatcher.render_inline_many(node.children, ctx.with_mode("html"))
        )
        return f"\n\n<pre><code>{code}\n</code></pre>\n"


class HtmlOnlyStringRenderer(ElementStringRenderer):
    """Passes raw HTML through unchanged."""

    def render_to_string(self, node: HtmlOnly, ctx: RenderContext) -> str:
        return node.text


class FormatOnlyStringRenderer(ElementStringRenderer):
    """Drops content meant for other output formats (LaTeX, man, RTF, XML, DocBook)."""

    def render_to_string(self, node: FormatOnly, ctx: RenderContext) -> str:
        self.note(f"{node.kind} content skipped")
        return ""
