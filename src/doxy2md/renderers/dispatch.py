#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/dispatch.py
"""Dispatch facade for rendering documentation trees.

Every renderer recurses into its children through a :class:`RenderDispatcher`,
which looks up the renderer for each node and picks the output shape:

- :meth:`RenderDispatcher.render_block` returns output lines. It prefers a
  lines renderer and falls back to splitting the output of a string renderer.
- :meth:`RenderDispatcher.render_inline` returns one string. It prefers a
  string renderer and falls back to joining the output of a lines renderer.

Text runs are handled here directly: they are escaped for the current render
mode and never reach the registry. A node with no renderer anywhere in its
ancestor chain raises :class:`~doxy2md.exceptions.MissingRendererError`.

Examples
--------
    >>> from doxy2md import create_dispatcher
    >>> from doxy2md.ast import Bold, Paragraph, Text
    >>> from doxy2md.permalinks import StaticPermalinkResolver
    >>> dispatcher = create_dispatcher(StaticPermalinkResolver())
    >>> dispatcher.render_block(Paragraph(children=(Text("Hello "), Bold(children=(Text("world"),)))))
    ['', '<p>Hello <b>world</b></p>', '']

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from doxy2md.ast.nodes import (
    Anchor,
    BlockQuote,
    Caption,
    CodeLine,
    Description,
    DocList,
    Emoji,
    Empty,
    Entry,
    FormatOnly,
    Formula,
    Heading,
    Highlight,
    HtmlOnly,
    Image,
    Inc,
    InnerReference,
    Internal,
    LinkedText,
    Listing,
    ListItem,
    Markup,
    Node,
    Paragraph,
    Param,
    ParameterItem,
    ParameterList,
    ParameterName,
    ParameterNameList,
    ParameterType,
    Preformatted,
    Ref,
    ReferenceBase,
    RefText,
    Row,
    Section,
    SimpleSection,
    Sp,
    SpecialCharacter,
    Table,
    Term,
    Text,
    Title,
    TocItem,
    TocList,
    UrlLink,
    VariableList,
    VarListEntry,
    Verbatim,
    XrefSect,
    kind_chain,
)
from doxy2md.exceptions import InvalidOptionsError, MalformedNodeError, MissingRendererError
from doxy2md.options import RendererOptions
from doxy2md.permalinks import PermalinkResolver
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RenderContext
from doxy2md.renderers.blocks import (
    BlockQuoteLinesRenderer,
    ParameterItemLinesRenderer,
    ParameterListLinesRenderer,
    ParameterNameListStringRenderer,
    ParameterNameStringRenderer,
    ParameterTypeStringRenderer,
    SimpleSectionLinesRenderer,
)
from doxy2md.renderers.inline import (
    AnchorStringRenderer,
    EmojiStringRenderer,
    EmptyStringRenderer,
    FormatOnlyStringRenderer,
    FormulaStringRenderer,
    HtmlOnlyStringRenderer,
    ImageStringRenderer,
    MarkupStringRenderer,
    PreformattedStringRenderer,
    RefStringRenderer,
    SpecialCharacterStringRenderer,
    SpStringRenderer,
    UrlLinkStringRenderer,
    VerbatimStringRenderer,
)
from doxy2md.renderers.listing import CodeLineStringRenderer, HighlightStringRenderer, ListingLinesRenderer
from doxy2md.renderers.lists import (
    ListItemLinesRenderer,
    ListLinesRenderer,
    VariableListLinesRenderer,
    VarListEntryStringRenderer,
)
from doxy2md.renderers.paragraph import ParagraphLinesRenderer
from doxy2md.renderers.references import (
    IncStringRenderer,
    InnerReferenceStringRenderer,
    LinkedTextStringRenderer,
    ParamStringRenderer,
    ReferenceStringRenderer,
    RefTextStringRenderer,
    TocItemStringRenderer,
    TocListLinesRenderer,
    XrefSectLinesRenderer,
)
from doxy2md.renderers.registry import RendererRegistry
from doxy2md.renderers.sections import (
    DescriptionLinesRenderer,
    HeadingLinesRenderer,
    InternalLinesRenderer,
    SectionLinesRenderer,
    TermStringRenderer,
    TitleLinesRenderer,
    TitleStringRenderer,
)
from doxy2md.renderers.tables import CaptionStringRenderer, EntryStringRenderer, RowLinesRenderer, TableLinesRenderer
from doxy2md.utils.escape import render_text, split_lines

logger = logging.getLogger(__name__)

DEFAULT_LINES_RENDERERS: dict[type[Node], type[ElementLinesRenderer]] = {
    Description: DescriptionLinesRenderer,
    Paragraph: ParagraphLinesRenderer,
    Internal: InternalLinesRenderer,
    Section: SectionLinesRenderer,
    Heading: HeadingLinesRenderer,
    Title: TitleLinesRenderer,
    DocList: ListLinesRenderer,
    ListItem: ListItemLinesRenderer,
    VariableList: VariableListLinesRenderer,
    Table: TableLinesRenderer,
    Row: RowLinesRenderer,
    Listing: ListingLinesRenderer,
    SimpleSection: SimpleSectionLinesRenderer,
    ParameterList: ParameterListLinesRenderer,
    ParameterItem: ParameterItemLinesRenderer,
    BlockQuote: BlockQuoteLinesRenderer,
    XrefSect: XrefSectLinesRenderer,
    TocList: TocListLinesRenderer,
}

DEFAULT_STRING_RENDERERS: dict[type[Node], type[ElementStringRenderer]] = {
    Title: TitleStringRenderer,
    Term: TermStringRenderer,
    Markup: MarkupStringRenderer,
    SpecialCharacter: SpecialCharacterStringRenderer,
    Empty: EmptyStringRenderer,
    Sp: SpStringRenderer,
    Emoji: EmojiStringRenderer,
    Anchor: AnchorStringRenderer,
    Formula: FormulaStringRenderer,
    Image: ImageStringRenderer,
    UrlLink: UrlLinkStringRenderer,
    Ref: RefStringRenderer,
    Verbatim: VerbatimStringRenderer,
    Preformatted: PreformattedStringRenderer,
    HtmlOnly: HtmlOnlyStringRenderer,
    FormatOnly: FormatOnlyStringRenderer,
    Caption: CaptionStringRenderer,
    Entry: EntryStringRenderer,
    CodeLine: CodeLineStringRenderer,
    Highlight: HighlightStringRenderer,
    VarListEntry: VarListEntryStringRenderer,
    ParameterNameList: ParameterNameListStringRenderer,
    ParameterName: ParameterNameStringRenderer,
    ParameterType: ParameterTypeStringRenderer,
    LinkedText: LinkedTextStringRenderer,
    RefText: RefTextStringRenderer,
    ReferenceBase: ReferenceStringRenderer,
    Inc: IncStringRenderer,
    InnerReference: InnerReferenceStringRenderer,
    Param: ParamStringRenderer,
    TocItem: TocItemStringRenderer,
}


class RenderDispatcher:
    """Entry point for rendering nodes and children sequences.

    Parameters
    ----------
    resolver : PermalinkResolver
        Fully populated resolver used by link-producing renderers
    options : RendererOptions or None, default None
        Rendering options; defaults are used when None
    registry : RendererRegistry or None, default None
        Registry to dispatch through; an empty one is created when None

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`RendererOptions`

    """

    def __init__(
        self,
        resolver: PermalinkResolver,
        options: Optional[RendererOptions] = None,
        registry: Optional[RendererRegistry] = None,
    ):
        """Initialize the dispatcher."""
        if options is not None and not isinstance(options, RendererOptions):
            raise InvalidOptionsError(expected_type=RendererOptions, received_type=type(options))
        self.resolver = resolver
        self.options = options or RendererOptions()
        self.registry = registry if registry is not None else RendererRegistry()

    def render_block(self, node: Optional[Node | Text], ctx: Optional[RenderContext] = None) -> list[str]:
        """Render a node, or a text run, to output lines.

        Parameters
        ----------
        node : Node, Text or None
            What to render; None yields no lines
        ctx : RenderContext or None
            Rendering state; a default markdown context when None

        Returns
        -------
        list[str]
            Output lines

        Raises
        ------
        MissingRendererError
            If no renderer exists for the node's type or any ancestor type

        """
        if node is None:
            return []
        ctx = ctx if ctx is not None else RenderContext()

        if isinstance(node, Text):
            # whitespace between block elements
            if node.text.startswith("\n"):
                return []
            return split_lines(render_text(node.text, ctx.mode))

        node_type = self._checked_type(node)
        lines_renderer = self.registry.get_lines_renderer(node_type)
        if lines_renderer is not None:
            return lines_renderer.render_to_lines(node, ctx)

        string_renderer = self.registry.get_string_renderer(node_type)
        if string_renderer is not None:
            return split_lines(string_renderer.render_to_string(node, ctx))

        raise MissingRendererError(node_type, kind_chain(node_type))

    def render_inline(self, node: Optional[Node | Text], ctx: Optional[RenderContext] = None) -> str:
        """Render a node, or a text run, to one string.

        Parameters
        ----------
        node : Node, Text or None
            What to render; None yields an empty string
        ctx : RenderContext or None
            Rendering state; a default markdown context when None

        Returns
        -------
        str
            Rendered text

        Raises
        ------
        MissingRendererError
            If no renderer exists for the node's type or any ancestor type

        """
        if node is None:
            return ""
        ctx = ctx if ctx is not None else RenderContext()

        if isinstance(node, Text):
            return render_text(node.text, ctx.mode)

        node_type = self._checked_type(node)
        string_renderer = self.registry.get_string_renderer(node_type)
        if string_renderer is not None:
            return string_renderer.render_to_string(node, ctx)

        lines_renderer = self.registry.get_lines_renderer(node_type)
        if lines_renderer is not None:
            return "\n".join(lines_renderer.render_to_lines(node, ctx))

        raise MissingRendererError(node_type, kind_chain(node_type))

    def render_block_many(self, children: Iterable[Node | Text], ctx: Optional[RenderContext] = None) -> list[str]:
        """Render a children sequence to lines, concatenated in order."""
        ctx = ctx if ctx is not None else RenderContext()
        lines: list[str] = []
        for child in children:
            lines.extend(self.render_block(child, ctx))
        return lines

    def render_inline_many(self, children: Iterable[Node | Text], ctx: Optional[RenderContext] = None) -> str:
        """Render a children sequence to one string, concatenated in order."""
        ctx = ctx if ctx is not None else RenderContext()
        return "".join(self.render_inline(child, ctx) for child in children)

    @staticmethod
    def _checked_type(node: object) -> type[Node]:
        if not isinstance(node, Node):
            raise MalformedNodeError(f"Expected a Node or Text child, got {type(node).__name__}", node)
        return type(node)


def register_default_renderers(dispatcher: RenderDispatcher) -> None:
    """Register one instance of every built-in renderer on the dispatcher's registry."""
    for node_type, lines_class in DEFAULT_LINES_RENDERERS.items():
        dispatcher.registry.register_lines(node_type, lines_class(dispatcher))
    for node_type, string_class in DEFAULT_STRING_RENDERERS.items():
        dispatcher.registry.register_string(node_type, string_class(dispatcher))


def create_dispatcher(resolver: PermalinkResolver, options: Optional[RendererOptions] = None) -> RenderDispatcher:
    """Create a dispatcher with all built-in renderers registered and checked.

    Parameters
    ----------
    resolver : PermalinkResolver
        Fully populated permalink resolver
    options : RendererOptions or None, default None
        Rendering options

    Returns
    -------
    RenderDispatcher
        Ready-to-use dispatcher

    Raises
    ------
    MissingRendererError
        If a known node kind has no renderer

    """
    dispatcher = RenderDispatcher(resolver, options)
    register_default_renderers(dispatcher)
    dispatcher.registry.flatten()
    logger.debug(f"Dispatcher ready with {len(dispatcher.registry.registered_types())} registered renderers")
    return dispatcher
