#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/nodes.py
"""Node classes for Doxygen documentation trees.

This module defines the immutable node hierarchy handed to the renderers by
the XML parsing layer. Each node class mirrors one element kind of the
Doxygen compound XML schema (``para``, ``sect2``, ``itemizedlist``,
``programlisting`` and so on); abstract intermediate classes group kinds that
share one rendering shape, so a renderer registered for ``Section`` serves
all six section depths.

Node Hierarchy
--------------
Every element inherits from :class:`Node` and carries a ``kind`` class
attribute. The chain of ``kind`` values along a class's bases is its declared
ancestor chain (see :func:`kind_chain`), used by the renderer registry to
find a renderer for kinds that are not registered directly.

Mixed content (character data interleaved with child elements) is modelled
as a tuple of :data:`Child`, which is either a :class:`Text` run or a
:class:`Node`. Text runs are not nodes: they have no kind and never reach
the registry.

All classes are frozen dataclasses holding tuples, so a tree cannot be
modified once built and rendering the same tree twice yields the same output.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


@dataclass(frozen=True)
class Text:
    """A run of character data between child elements.

    Parameters
    ----------
    text : str
        Raw, unescaped character data

    """

    text: str = ""


@dataclass(frozen=True)
class Node:
    """Base class for all documentation elements.

    Subclasses set ``kind`` to the XML element name they represent; abstract
    grouping classes use a descriptive name that never appears in XML.
    """

    kind: ClassVar[str] = "node"


Child = Union[Text, Node]


def node_ancestry(node_type: type[Node]) -> tuple[type[Node], ...]:
    """Return the node classes along ``node_type``'s hierarchy, most specific first.

    Parameters
    ----------
    node_type : type[Node]
        A node class

    Returns
    -------
    tuple[type[Node], ...]
        ``node_type`` followed by each of its node base classes, ending with :class:`Node`

    """
    return tuple(cls for cls in node_type.__mro__ if isinstance(cls, type) and issubclass(cls, Node))


def kind_chain(node_type: type[Node]) -> tuple[str, ...]:
    """Return the declared kind chain of a node class, most specific first.

    Examples
    --------
        >>> kind_chain(Sect2)
        ('sect2', 'section', 'node')

    """
    return tuple(cls.kind for cls in node_ancestry(node_type))


# Descriptions ---------------------------------------------------------------


@dataclass(frozen=True)
class Description(Node):
    """Container for a documentation block (``descriptionType``).

    Parameters
    ----------
    title : Title or None
        Optional title shown above the content
    children : tuple of Child
        Paragraphs, internal blocks and sections

    """

    kind: ClassVar[str] = "description"

    title: Optional[Title] = None
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class BriefDescription(Description):
    kind: ClassVar[str] = "briefdescription"


@dataclass(frozen=True)
class DetailedDescription(Description):
    kind: ClassVar[str] = "detaileddescription"


@dataclass(frozen=True)
class InbodyDescription(Description):
    kind: ClassVar[str] = "inbodydescription"


@dataclass(frozen=True)
class ParameterDescription(Description):
    kind: ClassVar[str] = "parameterdescription"


@dataclass(frozen=True)
class XrefDescription(Description):
    kind: ClassVar[str] = "xrefdescription"


@dataclass(frozen=True)
class Paragraph(Node):
    """A ``para`` element, freely mixing inline and block children."""

    kind: ClassVar[str] = "para"

    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Internal(Node):
    """Content marked ``\\internal``, rendered like ordinary content."""

    kind: ClassVar[str] = "internal"

    children: tuple[Child, ...] = ()


# Sections and headings ------------------------------------------------------


@dataclass(frozen=True)
class Section(Node):
    """Abstract nested section; ``level`` is the section depth (1-6).

    Parameters
    ----------
    id : str
        Doxygen id; the anchor is the part after the last ``_1``
    title : Title or None
        Section title
    children : tuple of Child
        Section body

    """

    kind: ClassVar[str] = "section"
    level: ClassVar[int] = 0

    id: str = ""
    title: Optional[Title] = None
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Sect1(Section):
    kind: ClassVar[str] = "sect1"
    level: ClassVar[int] = 1


@dataclass(frozen=True)
class Sect2(Section):
    kind: ClassVar[str] = "sect2"
    level: ClassVar[int] = 2


@dataclass(frozen=True)
class Sect3(Section):
    kind: ClassVar[str] = "sect3"
    level: ClassVar[int] = 3


@dataclass(frozen=True)
class Sect4(Section):
    kind: ClassVar[str] = "sect4"
    level: ClassVar[int] = 4


@dataclass(frozen=True)
class Sect5(Section):
    kind: ClassVar[str] = "sect5"
    level: ClassVar[int] = 5


@dataclass(frozen=True)
class Sect6(Section):
    kind: ClassVar[str] = "sect6"
    level: ClassVar[int] = 6


@dataclass(frozen=True)
class Heading(Node):
    """An explicit ``heading`` element (HTML ``<h1>``..``<h6>`` in comments)."""

    kind: ClassVar[str] = "heading"

    level: int = 1
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Title(Node):
    """A ``title`` element; block level it is a heading, inline it is bold text."""

    kind: ClassVar[str] = "title"

    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Term(Title):
    """The term half of a variable list entry."""

    kind: ClassVar[str] = "term"


# Inline markup -------------------------------------------------------------


@dataclass(frozen=True)
class Markup(Node):
    """Abstract inline markup span; the concrete kind selects the output tag."""

    kind: ClassVar[str] = "markup"

    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Bold(Markup):
    kind: ClassVar[str] = "bold"


@dataclass(frozen=True)
class Emphasis(Markup):
    kind: ClassVar[str] = "emphasis"


@dataclass(frozen=True)
class Underline(Markup):
    kind: ClassVar[str] = "underline"


@dataclass(frozen=True)
class Strike(Markup):
    kind: ClassVar[str] = "strike"


@dataclass(frozen=True)
class StrikeS(Markup):
    kind: ClassVar[str] = "s"


@dataclass(frozen=True)
class Deleted(Markup):
    kind: ClassVar[str] = "del"


@dataclass(frozen=True)
class Inserted(Markup):
    kind: ClassVar[str] = "ins"


@dataclass(frozen=True)
class Subscript(Markup):
    kind: ClassVar[str] = "subscript"


@dataclass(frozen=True)
class Superscript(Markup):
    kind: ClassVar[str] = "superscript"


@dataclass(frozen=True)
class Small(Markup):
    kind: ClassVar[str] = "small"


@dataclass(frozen=True)
class Cite(Markup):
    kind: ClassVar[str] = "cite"


@dataclass(frozen=True)
class Center(Markup):
    kind: ClassVar[str] = "center"


@dataclass(frozen=True)
class ComputerOutput(Markup):
    kind: ClassVar[str] = "computeroutput"


@dataclass(frozen=True)
class SpecialCharacter(Node):
    """A named character entity such as ``copy`` or ``alpha``."""

    kind: ClassVar[str] = "specialcharacter"

    name: str = ""


@dataclass(frozen=True)
class Empty(Node):
    """Abstract element with no content, rendered as a fixed snippet."""

    kind: ClassVar[str] = "empty"


@dataclass(frozen=True)
class HorizontalRuler(Empty):
    kind: ClassVar[str] = "hruler"


@dataclass(frozen=True)
class LineBreak(Empty):
    kind: ClassVar[str] = "linebreak"


@dataclass(frozen=True)
class NonBreakableSpace(Empty):
    kind: ClassVar[str] = "nonbreakablespace"


@dataclass(frozen=True)
class Sp(Node):
    """A run of ``value`` spaces inside a code line."""

    kind: ClassVar[str] = "sp"

    value: int = 1


@dataclass(frozen=True)
class Emoji(Node):
    kind: ClassVar[str] = "emoji"

    name: str = ""
    unicode: str = ""


@dataclass(frozen=True)
class Anchor(Node):
    """An ``anchor`` element; ``id`` is mandatory."""

    kind: ClassVar[str] = "anchor"

    id: str = ""


@dataclass(frozen=True)
class Formula(Node):
    """A LaTeX ``formula``; the source text is shown, not typeset."""

    kind: ClassVar[str] = "formula"

    id: str = ""
    text: str = ""


@dataclass(frozen=True)
class Image(Node):
    """An ``image`` element.

    Parameters
    ----------
    type : str
        Output the image targets: ``html``, ``latex``, ``docbook``, ``rtf`` or ``xml``
    name : str
        File name inside the images folder
    width, height : str
        Optional size attributes, passed through verbatim
    alt : str
        Alternate text
    inline : bool
        Whether the image sits inside running text
    children : tuple of Child
        Caption content

    """

    kind: ClassVar[str] = "image"

    type: str = "html"
    name: str = ""
    width: str = ""
    height: str = ""
    alt: str = ""
    inline: bool = False
    children: tuple[Child, ...] = ()


# Links and references ------------------------------------------------------


@dataclass(frozen=True)
class UrlLink(Node):
    kind: ClassVar[str] = "ulink"

    url: str = ""
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Ref(Node):
    """A cross reference inside documentation text (``docRefTextType``).

    Parameters
    ----------
    refid : str
        Target id
    kindref : str
        ``compound`` or ``member``
    external : str
        Tag file of an external target, if any
    children : tuple of Child
        Link label

    """

    kind: ClassVar[str] = "ref"

    refid: str = ""
    kindref: str = "compound"
    external: str = ""
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class RefText(Node):
    """A cross reference inside linked text such as a type (``refTextType``)."""

    kind: ClassVar[str] = "reftext"

    refid: str = ""
    kindref: str = "compound"
    external: str = ""
    tooltip: str = ""
    text: str = ""


@dataclass(frozen=True)
class LinkedText(Node):
    """Abstract text with embedded :class:`RefText` links (``linkedTextType``)."""

    kind: ClassVar[str] = "linkedtext"

    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Type(LinkedText):
    kind: ClassVar[str] = "type"


@dataclass(frozen=True)
class DefVal(LinkedText):
    kind: ClassVar[str] = "defval"


@dataclass(frozen=True)
class Initializer(LinkedText):
    kind: ClassVar[str] = "initializer"


@dataclass(frozen=True)
class TypeConstraint(LinkedText):
    kind: ClassVar[str] = "typeconstraint"


@dataclass(frozen=True)
class ReferenceBase(Node):
    """Abstract member cross reference (``referenceType``)."""

    kind: ClassVar[str] = "reference"

    refid: str = ""
    compoundref: str = ""
    startline: Optional[int] = None
    endline: Optional[int] = None
    text: str = ""


@dataclass(frozen=True)
class References(ReferenceBase):
    kind: ClassVar[str] = "references"


@dataclass(frozen=True)
class ReferencedBy(ReferenceBase):
    kind: ClassVar[str] = "referencedby"


@dataclass(frozen=True)
class Inc(Node):
    """Abstract include directive (``incType``); ``local`` selects quotes over angle brackets."""

    kind: ClassVar[str] = "inc"

    refid: str = ""
    local: bool = False
    text: str = ""


@dataclass(frozen=True)
class Includes(Inc):
    kind: ClassVar[str] = "includes"


@dataclass(frozen=True)
class IncludedBy(Inc):
    kind: ClassVar[str] = "includedby"


@dataclass(frozen=True)
class InnerReference(Node):
    """Abstract reference to a nested compound (``refType``)."""

    kind: ClassVar[str] = "innerref"

    refid: str = ""
    prot: str = ""
    text: str = ""


@dataclass(frozen=True)
class InnerClass(InnerReference):
    kind: ClassVar[str] = "innerclass"


@dataclass(frozen=True)
class InnerConcept(InnerReference):
    kind: ClassVar[str] = "innerconcept"


@dataclass(frozen=True)
class InnerDir(InnerReference):
    kind: ClassVar[str] = "innerdir"


@dataclass(frozen=True)
class InnerFile(InnerReference):
    kind: ClassVar[str] = "innerfile"


@dataclass(frozen=True)
class InnerGroup(InnerReference):
    kind: ClassVar[str] = "innergroup"


@dataclass(frozen=True)
class InnerModule(InnerReference):
    kind: ClassVar[str] = "innermodule"


@dataclass(frozen=True)
class InnerNamespace(InnerReference):
    kind: ClassVar[str] = "innernamespace"


@dataclass(frozen=True)
class InnerPage(InnerReference):
    kind: ClassVar[str] = "innerpage"


@dataclass(frozen=True)
class Param(Node):
    """A function or template parameter (``paramType``)."""

    kind: ClassVar[str] = "param"

    attributes: str = ""
    type: Optional[Type] = None
    declname: str = ""
    defname: str = ""
    array: str = ""
    defval: Optional[DefVal] = None
    typeconstraint: Optional[TypeConstraint] = None
    briefdescription: Optional[BriefDescription] = None


# Code listings -------------------------------------------------------------


@dataclass(frozen=True)
class Highlight(Node):
    """A lexically classified run of code; ``classification`` is Doxygen's ``class`` attribute."""

    kind: ClassVar[str] = "highlight"

    classification: str = "normal"
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class CodeLine(Node):
    """One source line of a listing.

    Parameters
    ----------
    lineno : int or None
        Line number in the source file
    refid, refkind : str
        Definition the line belongs to, linked from the line number
    external : str
        Tag file of an external definition
    highlights : tuple of Highlight
        Line content

    """

    kind: ClassVar[str] = "codeline"

    lineno: Optional[int] = None
    refid: str = ""
    refkind: str = ""
    external: str = ""
    highlights: tuple[Highlight, ...] = ()


@dataclass(frozen=True)
class Listing(Node):
    """Abstract code listing; ``show_anchor`` controls per-line ``l00001`` anchors."""

    kind: ClassVar[str] = "listing"
    show_anchor: ClassVar[bool] = True

    filename: str = ""
    lines: tuple[CodeLine, ...] = ()


@dataclass(frozen=True)
class ProgramListing(Listing):
    kind: ClassVar[str] = "programlisting"


@dataclass(frozen=True)
class MemberProgramListing(Listing):
    """A listing excerpt shown inside a member's documentation, without line anchors."""

    kind: ClassVar[str] = "memberprogramlisting"
    show_anchor: ClassVar[bool] = False


# Structured blocks ---------------------------------------------------------


@dataclass(frozen=True)
class SimpleSection(Node):
    """A ``simplesect`` (``\\note``, ``\\return``, ``\\par`` and the like).

    Parameters
    ----------
    section_kind : str
        Doxygen's ``kind`` attribute (``note``, ``see``, ``par``...)
    title : Title or None
        Mandatory for ``par``, ignored otherwise
    children : tuple of Child
        Section paragraphs

    """

    kind: ClassVar[str] = "simplesect"

    section_kind: str = ""
    title: Optional[Title] = None
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class ParameterType(Node):
    kind: ClassVar[str] = "parametertype"

    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class ParameterName(Node):
    kind: ClassVar[str] = "parametername"

    direction: str = ""
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class ParameterNameList(Node):
    kind: ClassVar[str] = "parameternamelist"

    types: tuple[ParameterType, ...] = ()
    names: tuple[ParameterName, ...] = ()


@dataclass(frozen=True)
class ParameterItem(Node):
    kind: ClassVar[str] = "parameteritem"

    names: tuple[ParameterNameList, ...] = ()
    description: Optional[ParameterDescription] = None


@dataclass(frozen=True)
class ParameterList(Node):
    """A ``parameterlist``; ``list_kind`` is ``param``, ``templateparam``, ``retval`` or ``exception``."""

    kind: ClassVar[str] = "parameterlist"

    list_kind: str = "param"
    items: tuple[ParameterItem, ...] = ()


@dataclass(frozen=True)
class XrefSect(Node):
    """A cross-reference section (``\\todo``, ``\\deprecated``, ``\\bug``...)."""

    kind: ClassVar[str] = "xrefsect"

    id: str = ""
    title: str = ""
    description: Optional[XrefDescription] = None


@dataclass(frozen=True)
class Caption(Node):
    kind: ClassVar[str] = "caption"

    id: str = ""
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Entry(Node):
    """A table cell; ``thead`` marks a header cell."""

    kind: ClassVar[str] = "entry"

    thead: bool = False
    colspan: Optional[int] = None
    rowspan: Optional[int] = None
    align: str = ""
    valign: str = ""
    width: str = ""
    class_name: str = ""
    paragraphs: tuple[Paragraph, ...] = ()


@dataclass(frozen=True)
class Row(Node):
    kind: ClassVar[str] = "row"

    entries: tuple[Entry, ...] = ()


@dataclass(frozen=True)
class Table(Node):
    kind: ClassVar[str] = "table"

    caption: Optional[Caption] = None
    rows: tuple[Row, ...] = ()
    width: str = ""


@dataclass(frozen=True)
class ListItem(Node):
    """A list item; ``override`` is ``checked``/``unchecked`` for check lists."""

    kind: ClassVar[str] = "listitem"

    override: str = ""
    value: Optional[int] = None
    paragraphs: tuple[Child, ...] = ()


@dataclass(frozen=True)
class DocList(Node):
    """Abstract list; the concrete kind decides ordered versus unordered."""

    kind: ClassVar[str] = "list"

    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True)
class ItemizedList(DocList):
    kind: ClassVar[str] = "itemizedlist"


@dataclass(frozen=True)
class OrderedList(DocList):
    """An ``orderedlist``; ``type`` is the HTML numbering type (``1``, ``a``, ``A``, ``i``, ``I``)."""

    kind: ClassVar[str] = "orderedlist"

    type: str = ""
    start: Optional[int] = None


@dataclass(frozen=True)
class VarListEntry(Node):
    """The term half of a variable list pair."""

    kind: ClassVar[str] = "varlistentry"

    term: Optional[Term] = None


@dataclass(frozen=True)
class VariableList(Node):
    """A ``variablelist``.

    The schema lists terms and definitions as alternating siblings
    (:class:`VarListEntry`, :class:`ListItem`, ...) rather than as pairs.
    """

    kind: ClassVar[str] = "variablelist"

    children: tuple[Union[VarListEntry, ListItem], ...] = ()


@dataclass(frozen=True)
class BlockQuote(Node):
    kind: ClassVar[str] = "blockquote"

    paragraphs: tuple[Child, ...] = ()


@dataclass(frozen=True)
class Verbatim(Node):
    kind: ClassVar[str] = "verbatim"

    text: str = ""


@dataclass(frozen=True)
class Preformatted(Node):
    kind: ClassVar[str] = "preformatted"

    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class FormatOnly(Node):
    """Abstract block that only applies to one output format."""

    kind: ClassVar[str] = "formatonly"

    text: str = ""


@dataclass(frozen=True)
class HtmlOnly(FormatOnly):
    kind: ClassVar[str] = "htmlonly"

    block: bool = False


@dataclass(frozen=True)
class LatexOnly(FormatOnly):
    kind: ClassVar[str] = "latexonly"


@dataclass(frozen=True)
class ManOnly(FormatOnly):
    kind: ClassVar[str] = "manonly"


@dataclass(frozen=True)
class RtfOnly(FormatOnly):
    kind: ClassVar[str] = "rtfonly"


@dataclass(frozen=True)
class XmlOnly(FormatOnly):
    kind: ClassVar[str] = "xmlonly"


@dataclass(frozen=True)
class DocBookOnly(FormatOnly):
    kind: ClassVar[str] = "docbookonly"


@dataclass(frozen=True)
class TocItem(Node):
    kind: ClassVar[str] = "tocitem"

    id: str = ""
    children: tuple[Child, ...] = ()


@dataclass(frozen=True)
class TocList(Node):
    kind: ClassVar[str] = "toclist"

    items: tuple[TocItem, ...] = ()


# Every concrete node type the parsing layer can produce
ALL_NODE_TYPES: tuple[type[Node], ...] = (
    BriefDescription,
    DetailedDescription,
    InbodyDescription,
    ParameterDescription,
    XrefDescription,
    Paragraph,
    Internal,
    Sect1,
    Sect2,
    Sect3,
    Sect4,
    Sect5,
    Sect6,
    Heading,
    Title,
    Term,
    Bold,
    Emphasis,
    Underline,
    Strike,
    StrikeS,
    Deleted,
    Inserted,
    Subscript,
    Superscript,
    Small,
    Cite,
    Center,
    ComputerOutput,
    SpecialCharacter,
    HorizontalRuler,
    LineBreak,
    NonBreakableSpace,
    Sp,
    Emoji,
    Anchor,
    Formula,
    Image,
    UrlLink,
    Ref,
    RefText,
    Type,
    DefVal,
    Initializer,
    TypeConstraint,
    References,
    ReferencedBy,
    Includes,
    IncludedBy,
    InnerClass,
    InnerConcept,
    InnerDir,
    InnerFile,
    InnerGroup,
    InnerModule,
    InnerNamespace,
    InnerPage,
    Param,
    Highlight,
    CodeLine,
    ProgramListing,
    MemberProgramListing,
    SimpleSection,
    ParameterType,
    ParameterName,
    ParameterNameList,
    ParameterItem,
    ParameterList,
    XrefSect,
    Caption,
    Entry,
    Row,
    Table,
    ListItem,
    ItemizedList,
    OrderedList,
    VarListEntry,
    VariableList,
    BlockQuote,
    Verbatim,
    Preformatted,
    HtmlOnly,
    LatexOnly,
    ManOnly,
    RtfOnly,
    XmlOnly,
    DocBookOnly,
    TocItem,
    TocList,
)
