#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/permalinks.py
"""Permalink resolution for cross references.

Renderers never compute URLs themselves. They ask a :class:`PermalinkResolver`
for the permalink of a Doxygen reference id and render plain text when the
answer is ``None``. The indexing layer that knows where every compound page
ends up provides the resolver; it must be fully populated before any page is
rendered, since a page may link to any other page.

:class:`StaticPermalinkResolver` is an in-memory implementation fed with the
page permalink of every compound, following Doxygen's id conventions:

- compound ids resolve to their page;
- member ids (``classfoo_1a0123abcd``) resolve to the owning compound's page
  plus the member anchor;
- ``xrefsect`` ids (``todo_1_todo000001``) resolve to the related page plus
  the item anchor.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from doxy2md.constants import DEFAULT_BASE_URL, DOXYGEN_ANCHOR_SEPARATOR

logger = logging.getLogger(__name__)

_ANCHOR_PREFIX = re.compile(rf"^.*{DOXYGEN_ANCHOR_SEPARATOR}")
_HEX_ANCHOR_SUFFIX = re.compile(rf"{DOXYGEN_ANCHOR_SEPARATOR}[0-9a-fg]*$")
_TEXT_ANCHOR_SUFFIX = re.compile(rf"{DOXYGEN_ANCHOR_SEPARATOR}_[0-9a-z]*$")


def get_permalink_anchor(refid: str) -> str:
    """Return the anchor part of a Doxygen id (everything after the last ``_1``).

    Examples
    --------
        >>> get_permalink_anchor("classfoo_1a0123abcd")
        'a0123abcd'

    """
    return _ANCHOR_PREFIX.sub("", refid)


def strip_permalink_hex_anchor(refid: str) -> str:
    """Return the compound part of a member id.

    Examples
    --------
        >>> strip_permalink_hex_anchor("classfoo_1a0123abcd")
        'classfoo'

    """
    return _HEX_ANCHOR_SUFFIX.sub("", refid)


def strip_permalink_text_anchor(refid: str) -> str:
    """Return the page part of an ``xrefsect`` item id.

    Examples
    --------
        >>> strip_permalink_text_anchor("todo_1_todo000001")
        'todo'

    """
    return _TEXT_ANCHOR_SUFFIX.sub("", refid)


def linkable_permalink(permalink: str | None) -> str | None:
    """Return ``permalink`` if it can be used as a link target, else None.

    A resolver answer of one character or less (the bare site root) does not
    point at any page and is treated as unresolved.

    Examples
    --------
        >>> linkable_permalink("/") is None
        True
        >>> linkable_permalink("/api/classes/foo")
        '/api/classes/foo'

    """
    if not permalink or len(permalink) <= 1:
        return None
    return permalink


@runtime_checkable
class PermalinkResolver(Protocol):
    """Maps Doxygen reference ids to site URLs."""

    def resolve_permalink(self, refid: str, kind_hint: str) -> str | None:
        """Resolve ``refid`` of kind ``compound``, ``member`` or ``xrefsect``; None if unknown."""
        ...

    def resolve_page_permalink(self, refid: str) -> str | None:
        """Resolve a compound id to its whole-page URL; None if unknown."""
        ...


@dataclass
class StaticPermalinkResolver:
    """Resolver backed by pre-computed page permalinks.

    Parameters
    ----------
    page_permalinks : dict[str, str]
        Compound id to page path relative to ``page_base_url``
    page_base_url : str, default "/"
        Prefix for every page permalink
    anchor_owners : dict[str, str]
        Ids of anchors that do not follow the member id convention (table of
        contents entries, section anchors inside descriptions), mapped to the
        id of the compound whose page holds them

    Examples
    --------
        >>> resolver = StaticPermalinkResolver({"classfoo": "api/classes/foo"})
        >>> resolver.resolve_permalink("classfoo_1a0123abcd", "member")
        '/api/classes/foo/#a0123abcd'

    """

    page_permalinks: dict[str, str] = field(default_factory=dict)
    page_base_url: str = DEFAULT_BASE_URL
    anchor_owners: dict[str, str] = field(default_factory=dict)

    def register_page(self, refid: str, relative_permalink: str) -> None:
        """Record the page of a compound."""
        self.page_permalinks[refid] = relative_permalink

    def register_anchor(self, refid: str, compound_id: str) -> None:
        """Record the compound whose page holds an anchor."""
        self.anchor_owners[refid] = compound_id

    def resolve_page_permalink(self, refid: str) -> str | None:
        relative = self.page_permalinks.get(refid)
        if relative is None:
            logger.debug(f"refid {refid} is not a known compound, no permalink")
            return None
        return f"{self.page_base_url}{relative}"

    def resolve_permalink(self, refid: str, kind_hint: str) -> str | None:
        if kind_hint == "compound":
            return self.resolve_page_permalink(refid)

        if kind_hint == "member":
            page = self._page_of(strip_permalink_hex_anchor(refid))
            if page is None:
                owner = self.anchor_owners.get(refid)
                page = self._page_of(owner) if owner is not None else None
        elif kind_hint == "xrefsect":
            page = self._page_of(strip_permalink_text_anchor(refid))
        else:
            logger.warning(f"Unsupported reference kind '{kind_hint}' for {refid}")
            return None

        if page is None:
            logger.debug(f"Unknown permalink for {refid}")
            return None
        return f"{page}/#{get_permalink_anchor(refid)}"

    def _page_of(self, compound_id: str) -> str | None:
        relative = self.page_permalinks.get(compound_id)
        return None if relative is None else f"{self.page_base_url}{relative}"
