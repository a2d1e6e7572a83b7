#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/__init__.py
"""Renderers turning documentation trees into Markdown/MDX lines.

Most callers only need :func:`create_dispatcher`, which returns a
:class:`RenderDispatcher` with every built-in renderer registered.

"""

from doxy2md.renderers.base import (
    ElementLinesRenderer,
    ElementStringRenderer,
    ImageCollector,
    RenderContext,
)
from doxy2md.renderers.dispatch import RenderDispatcher, create_dispatcher, register_default_renderers
from doxy2md.renderers.registry import RendererRegistry

__all__ = [
    "ElementLinesRenderer",
    "ElementStringRenderer",
    "ImageCollector",
    "RenderContext",
    "RenderDispatcher",
    "RendererRegistry",
    "create_dispatcher",
    "register_default_renderers",
]
