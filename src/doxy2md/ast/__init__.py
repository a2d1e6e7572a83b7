#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/__init__.py
"""Node model for Doxygen documentation trees.

The parsing layer builds a tree from these classes; the renderers only read
it. See :mod:`doxy2md.ast.nodes` for the hierarchy.

Examples
--------
    >>> from doxy2md.ast import Bold, Paragraph, Text
    >>> para = Paragraph(children=(Text("See "), Bold(children=(Text("this"),))))

"""

from doxy2md.ast.nodes import (
    ALL_NODE_TYPES,
    Anchor,
    BlockQuote,
    Bold,
    BriefDescription,
    Caption,
    Center,
    Child,
    Cite,
    CodeLine,
    ComputerOutput,
    DefVal,
    Deleted,
    Description,
    DetailedDescription,
    DocBookOnly,
    DocList,
    Emoji,
    Emphasis,
    Empty,
    Entry,
    FormatOnly,
    Formula,
    Heading,
    Highlight,
    HorizontalRuler,
    HtmlOnly,
    Image,
    InbodyDescription,
    Inc,
    IncludedBy,
    Includes,
    Initializer,
    InnerClass,
    InnerConcept,
    InnerDir,
    InnerFile,
    InnerGroup,
    InnerModule,
    InnerNamespace,
    InnerPage,
    InnerReference,
    Inserted,
    Internal,
    ItemizedList,
    LatexOnly,
    LineBreak,
    LinkedText,
    ListItem,
    Listing,
    ManOnly,
    Markup,
    MemberProgramListing,
    Node,
    NonBreakableSpace,
    OrderedList,
    Paragraph,
    Param,
    ParameterDescription,
    ParameterItem,
    ParameterList,
    ParameterName,
    ParameterNameList,
    ParameterType,
    Preformatted,
    ProgramListing,
    Ref,
    RefText,
    ReferenceBase,
    ReferencedBy,
    References,
    Row,
    RtfOnly,
    Sect1,
    Sect2,
    Sect3,
    Sect4,
    Sect5,
    Sect6,
    Section,
    SimpleSection,
    Small,
    Sp,
    SpecialCharacter,
    Strike,
    StrikeS,
    Subscript,
    Superscript,
    Table,
    Term,
    Text,
    Title,
    TocItem,
    TocList,
    Type,
    TypeConstraint,
    Underline,
    UrlLink,
    VarListEntry,
    VariableList,
    Verbatim,
    XmlOnly,
    XrefDescription,
    XrefSect,
    kind_chain,
    node_ancestry,
)

__all__ = [
    "ALL_NODE_TYPES",
    "Anchor",
    "BlockQuote",
    "Bold",
    "BriefDescription",
    "Caption",
    "Center",
    "Child",
    "Cite",
    "CodeLine",
    "ComputerOutput",
    "DefVal",
    "Deleted",
    "Description",
    "DetailedDescription",
    "DocBookOnly",
    "DocList",
    "Emoji",
    "Emphasis",
    "Empty",
    "Entry",
    "FormatOnly",
    "Formula",
    "Heading",
    "Highlight",
    "HorizontalRuler",
    "HtmlOnly",
    "Image",
    "InbodyDescription",
    "Inc",
    "IncludedBy",
    "Includes",
    "Initializer",
    "InnerClass",
    "InnerConcept",
    "InnerDir",
    "InnerFile",
    "InnerGroup",
    "InnerModule",
    "InnerNamespace",
    "InnerPage",
    "InnerReference",
    "Inserted",
    "Internal",
    "ItemizedList",
    "LatexOnly",
    "LineBreak",
    "LinkedText",
    "ListItem",
    "Listing",
    "ManOnly",
    "Markup",
    "MemberProgramListing",
    "Node",
    "NonBreakableSpace",
    "OrderedList",
    "Paragraph",
    "Param",
    "ParameterDescription",
    "ParameterItem",
    "ParameterList",
    "ParameterName",
    "ParameterNameList",
    "ParameterType",
    "Preformatted",
    "ProgramListing",
    "Ref",
    "RefText",
    "ReferenceBase",
    "ReferencedBy",
    "References",
    "Row",
    "RtfOnly",
    "Sect1",
    "Sect2",
    "Sect3",
    "Sect4",
    "Sect5",
    "Sect6",
    "Section",
    "SimpleSection",
    "Small",
    "Sp",
    "SpecialCharacter",
    "Strike",
    "StrikeS",
    "Subscript",
    "Superscript",
    "Table",
    "Term",
    "Text",
    "Title",
    "TocItem",
    "TocList",
    "Type",
    "TypeConstraint",
    "Underline",
    "UrlLink",
    "VarListEntry",
    "VariableList",
    "Verbatim",
    "XmlOnly",
    "XrefDescription",
    "XrefSect",
    "kind_chain",
    "node_ancestry",
]
