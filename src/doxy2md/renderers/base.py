#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/base.py
"""Base classes for element renderers.

Every element kind is rendered by an object derived from one of two bases:

- :class:`ElementLinesRenderer` produces an ordered list of output lines and
  is used for structural content (sections, lists, tables, code listings).
- :class:`ElementStringRenderer` produces one inline string and is used for
  content that stays on one logical line (titles, table cells, spans).

Renderers hold no per-render state. Everything that varies during a walk
travels in the :class:`RenderContext` passed down with each call, and
recursion into children always goes through the dispatcher.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Iterator

from doxy2md.constants import DEFAULT_RENDER_MODE, RenderMode

if TYPE_CHECKING:
    from doxy2md.ast.nodes import Image, Node
    from doxy2md.options import RendererOptions
    from doxy2md.permalinks import PermalinkResolver
    from doxy2md.renderers.dispatch import RenderDispatcher

logger = logging.getLogger(__name__)


class ImageCollector:
    """Append-only record of the images referenced by one rendered page.

    The page assembler creates one collector per page and hands it down in
    the render context; the image renderer appends to it. Only one render
    walk may write to a collector.
    """

    def __init__(self) -> None:
        """Initialize an empty collector."""
        self._images: list[Image] = []

    def add(self, image: Image) -> None:
        """Record an image."""
        self._images.append(image)

    @property
    def images(self) -> tuple[Image, ...]:
        """Images recorded so far, in encounter order."""
        return tuple(self._images)

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[Image]:
        return iter(tuple(self._images))


@dataclass(frozen=True)
class RenderContext:
    """Per-call rendering state threaded through the tree walk.

    Parameters
    ----------
    mode : {"markdown", "html", "text"}, default "markdown"
        How character data is escaped
    skip_para : bool, default False
        Render the next paragraph without a ``<p>`` wrapper; set for the
        direct paragraphs of list items and table cells and cleared again
        for anything nested inside them
    images : ImageCollector
        Accumulator for images met during the walk

    """

    mode: RenderMode = DEFAULT_RENDER_MODE
    skip_para: bool = False
    images: ImageCollector = field(default_factory=ImageCollector, compare=False)

    def with_mode(self, mode: RenderMode) -> RenderContext:
        """Return a copy of this context with a different escaping mode."""
        return self if mode == self.mode else replace(self, mode=mode)

    def without_paragraphs(self, mode: RenderMode | None = None) -> RenderContext:
        """Return a copy that suppresses paragraph wrappers, optionally switching mode."""
        return replace(self, skip_para=True, mode=mode or self.mode)

    def with_paragraphs(self) -> RenderContext:
        """Return a copy in which paragraphs get their wrappers again."""
        return replace(self, skip_para=False) if self.skip_para else self


class _ElementRendererBase:
    """State and helpers shared by both renderer kinds."""

    def __init__(self, dispatcher: RenderDispatcher):
        """Initialize the renderer with the dispatcher used for recursion.

        Parameters
        ----------
        dispatcher : RenderDispatcher
            Dispatcher that owns this renderer

        """
        self.dispatcher = dispatcher

    @property
    def options(self) -> RendererOptions:
        """Options of the owning dispatcher."""
        return self.dispatcher.options

    @property
    def resolver(self) -> PermalinkResolver:
        """Permalink resolver of the owning dispatcher."""
        return self.dispatcher.resolver

    def note(self, message: str) -> None:
        """Log an informational message when verbose output is enabled."""
        if self.options.verbose:
            logger.info(message)


class ElementLinesRenderer(_ElementRendererBase, ABC):
    """Abstract base for renderers producing a list of output lines.

    Examples
    --------
        >>> class RulerRenderer(ElementLinesRenderer):
        ...     def render_to_lines(self, node, ctx):
        ...         return ["", "<hr/>", ""]

    """

    @abstractmethod
    def render_to_lines(self, node: Node, ctx: RenderContext) -> list[str]:
        """Render ``node`` to output lines.

        Parameters
        ----------
        node : Node
            Element to render
        ctx : RenderContext
            Current rendering state

        Returns
        -------
        list[str]
            Output lines without trailing newlines; ``""`` is a blank line

        """
        ...


class ElementStringRenderer(_ElementRendererBase, ABC):
    """Abstract base for renderers producing one inline string."""

    @abstractmethod
    def render_to_string(self, node: Node, ctx: RenderContext) -> str:
        """Render ``node`` to a string.

        Parameters
        ----------
        node : Node
            Element to render
        ctx : RenderContext
            Current rendering state

        Returns
        -------
        str
            Rendered text

        """
        ...
