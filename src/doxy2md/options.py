#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/options.py
"""Configuration options for rendering Doxygen trees to Markdown.

The options are immutable; use ``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from doxy2md.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADING_ANCHORS,
    DEFAULT_IMAGES_FOLDER_PATH,
    DEFAULT_MAX_HEADING_LEVEL,
    DEFAULT_RENDER_PARAGRAPHS,
    DEFAULT_SECTION_HEADING_OFFSET,
    DEFAULT_TITLE_HEADING_LEVEL,
    DEFAULT_VERBOSE,
    MARKDOWN_MAX_HEADING_LEVEL,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RendererOptions(CloneFrozenMixin):
    """Options controlling how Doxygen nodes are rendered.

    Parameters
    ----------
    render_paragraphs : bool, default True
        Wrap each flushed group of inline paragraph content in ``<p>`` tags.
        When False the inline text is emitted bare.
    heading_anchors : bool, default True
        Append a ``{#anchor}`` fragment to section headings that carry an id.
    section_heading_offset : int, default 1
        Added to a section's depth to get its heading level, so ``sect1``
        renders as ``##`` below the page title.
    max_heading_level : int, default 6
        Deepest heading level the output supports. Deeper sections are
        rendered as bold text instead.
    title_heading_level : int, default 4
        Heading level used when a standalone title is rendered as a block.
    base_url : str, default "/"
        Site base URL prepended to image paths.
    images_folder_path : str, default "img/doxygen"
        Folder, relative to ``base_url``, that holds copied images.
    verbose : bool, default False
        Log informational notes about ignored attributes and untypeset content.

    Examples
    --------
        >>> options = RendererOptions(render_paragraphs=False)
        >>> options.create_updated(verbose=True).verbose
        True

    """

    render_paragraphs: bool = field(
        default=DEFAULT_RENDER_PARAGRAPHS,
        metadata={"help": "Wrap inline paragraph content in <p> tags", "importance": "core"},
    )
    heading_anchors: bool = field(
        default=DEFAULT_HEADING_ANCHORS,
        metadata={"help": "Append {#anchor} ids to section headings", "importance": "core"},
    )
    section_heading_offset: int = field(
        default=DEFAULT_SECTION_HEADING_OFFSET,
        metadata={
            "help": "Offset added to section depth to compute its heading level",
            "type": int,
            "importance": "advanced",
        },
    )
    max_heading_level: int = field(
        default=DEFAULT_MAX_HEADING_LEVEL,
        metadata={
            "help": "Deepest supported heading level; deeper sections render as bold text",
            "type": int,
            "importance": "advanced",
        },
    )
    title_heading_level: int = field(
        default=DEFAULT_TITLE_HEADING_LEVEL,
        metadata={"help": "Heading level for block-level titles", "type": int, "importance": "advanced"},
    )
    base_url: str = field(
        default=DEFAULT_BASE_URL,
        metadata={"help": "Site base URL used as image path prefix", "importance": "core"},
    )
    images_folder_path: str = field(
        default=DEFAULT_IMAGES_FOLDER_PATH,
        metadata={"help": "Images folder relative to the base URL", "importance": "core"},
    )
    verbose: bool = field(
        default=DEFAULT_VERBOSE,
        metadata={"help": "Log notes about ignored attributes and untypeset content", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate heading levels.

        Raises
        ------
        ValueError
            If any heading level setting is outside its valid range.

        """
        if not 1 <= self.max_heading_level <= MARKDOWN_MAX_HEADING_LEVEL:
            raise ValueError(
                f"max_heading_level must be between 1 and {MARKDOWN_MAX_HEADING_LEVEL}, got {self.max_heading_level}"
            )
        if self.section_heading_offset < 0:
            raise ValueError(f"section_heading_offset must be non-negative, got {self.section_heading_offset}")
        if not 1 <= self.title_heading_level <= self.max_heading_level:
            raise ValueError(
                f"title_heading_level must be between 1 and {self.max_heading_level}, got {self.title_heading_level}"
            )

    @property
    def image_url_prefix(self) -> str:
        """URL prefix for collected images, always ending with a slash."""
        prefix = f"{self.base_url}{self.images_folder_path}"
        return prefix if prefix.endswith("/") else f"{prefix}/"
