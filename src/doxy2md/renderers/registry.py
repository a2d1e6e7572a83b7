#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/registry.py
"""Renderer registry keyed by node type.

The registry keeps two independent tables, one for lines renderers and one
for string renderers, because a few kinds render differently at block level
and inline (a title is a heading as a block, bold text inline).

Lookups walk the node's declared ancestor chain: a renderer registered for
:class:`~doxy2md.ast.nodes.Section` serves ``Sect1`` to ``Sect6``, and one
registered for :class:`~doxy2md.ast.nodes.Markup` serves every span kind.
:meth:`RendererRegistry.flatten` resolves the chain for every known kind once
at startup, so a kind with no renderer is reported before any page is
rendered. Types outside the known set (subclasses created by callers) are
resolved on first use and cached.

Examples
--------
    >>> registry = RendererRegistry()
    >>> registry.register_lines(Section, SectionLinesRenderer(dispatcher))
    >>> registry.get_lines_renderer(Sect3)  # found through the Section entry
    <...SectionLinesRenderer object at ...>

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TypeVar

from doxy2md.ast.nodes import ALL_NODE_TYPES, Node, kind_chain, node_ancestry
from doxy2md.exceptions import MissingRendererError
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer

logger = logging.getLogger(__name__)

R = TypeVar("R", ElementLinesRenderer, ElementStringRenderer)


def _walk(
    table: dict[type[Node], R],
    cache: dict[type[Node], Optional[R]],
    node_type: type[Node],
) -> Optional[R]:
    if node_type in cache:
        return cache[node_type]

    found: Optional[R] = None
    for ancestor in node_ancestry(node_type):
        renderer = table.get(ancestor)
        if renderer is not None:
            if ancestor is not node_type:
                logger.debug(f"{node_type.kind} uses the renderer registered for {ancestor.kind}")
            found = renderer
            break

    cache[node_type] = found
    return found


class RendererRegistry:
    """Lookup tables from node type to renderer instance."""

    def __init__(self) -> None:
        """Initialize empty lines and string tables."""
        self._lines: dict[type[Node], ElementLinesRenderer] = {}
        self._strings: dict[type[Node], ElementStringRenderer] = {}
        self._flat_lines: dict[type[Node], Optional[ElementLinesRenderer]] = {}
        self._flat_strings: dict[type[Node], Optional[ElementStringRenderer]] = {}

    def register_lines(self, node_type: type[Node], renderer: ElementLinesRenderer) -> None:
        """Register a lines renderer for ``node_type`` and its descendants.

        Parameters
        ----------
        node_type : type[Node]
            Node class, concrete or abstract
        renderer : ElementLinesRenderer
            Renderer instance

        """
        if node_type in self._lines:
            logger.warning(f"Replacing lines renderer for {node_type.kind}")
        self._lines[node_type] = renderer
        self._flat_lines.clear()

    def register_string(self, node_type: type[Node], renderer: ElementStringRenderer) -> None:
        """Register a string renderer for ``node_type`` and its descendants."""
        if node_type in self._strings:
            logger.warning(f"Replacing string renderer for {node_type.kind}")
        self._strings[node_type] = renderer
        self._flat_strings.clear()

    def get_lines_renderer(self, node_type: type[Node]) -> Optional[ElementLinesRenderer]:
        """Return the lines renderer for ``node_type``, searching its ancestors; None if absent."""
        return _walk(self._lines, self._flat_lines, node_type)

    def get_string_renderer(self, node_type: type[Node]) -> Optional[ElementStringRenderer]:
        """Return the string renderer for ``node_type``, searching its ancestors; None if absent."""
        return _walk(self._strings, self._flat_strings, node_type)

    def has_renderer(self, node_type: type[Node]) -> bool:
        """Return True if either table can render ``node_type``."""
        return self.get_lines_renderer(node_type) is not None or self.get_string_renderer(node_type) is not None

    def flatten(self, node_types: Iterable[type[Node]] = ALL_NODE_TYPES) -> None:
        """Resolve every node type to its renderers and check that none is missing.

        Parameters
        ----------
        node_types : iterable of type[Node]
            Types to resolve, by default every concrete kind of the schema

        Raises
        ------
        MissingRendererError
            If a type has neither a lines nor a string renderer anywhere in its chain

        """
        for node_type in node_types:
            if not self.has_renderer(node_type):
                raise MissingRendererError(node_type, kind_chain(node_type))
        logger.debug(
            f"Renderer registry flattened: {len(self._flat_lines)} lines entries, "
            f"{len(self._flat_strings)} string entries"
        )

    def registered_types(self) -> list[type[Node]]:
        """Return every node type with a direct registration, lines or string."""
        return list(dict.fromkeys([*self._lines, *self._strings]))
