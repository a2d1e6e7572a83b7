#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/page.py
"""Page assembly for one compound.

:func:`render_page` renders the description blocks of one compound with a
fresh image collector and bundles the output lines, the page permalink and
the images the page references. The page-writing layer copies those images
next to the generated site.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from doxy2md.ast.nodes import Child, Image
from doxy2md.renderers.base import ImageCollector, RenderContext
from doxy2md.renderers.dispatch import RenderDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedPage:
    """Output of rendering one compound page.

    Parameters
    ----------
    title : str
        Page title
    permalink : str or None
        Resolved permalink of the compound, None when the resolver does not know it
    lines : tuple[str, ...]
        Rendered body lines
    images : tuple[Image, ...]
        Images referenced by the body, in encounter order

    """

    title: str
    permalink: Optional[str]
    lines: tuple[str, ...]
    images: tuple[Image, ...] = ()

    @property
    def text(self) -> str:
        """Body lines joined with newlines, ending with one newline."""
        return "\n".join(self.lines) + "\n"


def render_page(
    dispatcher: RenderDispatcher,
    compound_id: str,
    title: str,
    body: Iterable[Child],
) -> RenderedPage:
    """Render the body of one compound page.

    Parameters
    ----------
    dispatcher : RenderDispatcher
        Dispatcher with renderers registered
    compound_id : str
        Doxygen id of the compound
    title : str
        Page title
    body : iterable of Child
        Top-level blocks of the page, usually the brief and detailed descriptions

    Returns
    -------
    RenderedPage
        Rendered lines with the page's images

    """
    collector = ImageCollector()
    ctx = RenderContext(images=collector)
    lines = dispatcher.render_block_many(body, ctx)

    permalink = dispatcher.resolver.resolve_page_permalink(compound_id)
    if permalink is None:
        logger.warning(f"No permalink for compound {compound_id}")

    logger.debug(f"Rendered {compound_id}: {len(lines)} lines, {len(collector)} images")
    return RenderedPage(title=title, permalink=permalink, lines=tuple(lines), images=collector.images)
