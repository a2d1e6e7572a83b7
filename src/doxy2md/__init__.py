"""doxy2md - Render Doxygen documentation trees into Markdown/MDX pages.

doxy2md takes the node tree built from Doxygen's compound XML output (the
``para``, ``sect1``, ``itemizedlist``, ``programlisting``... elements) and
renders it into lines of Markdown with embedded HTML, ready for a Docusaurus
site. Cross references are turned into links through a permalink resolver
supplied by the caller.

Key Features
------------
- One renderer per element kind, looked up along the kind's ancestor chain
- Paragraphs split around block content so the HTML stays valid
- Code listings with line anchors and links to definitions
- Docusaurus admonitions for notes and warnings
- Per-page image collection for the site builder

Requirements
------------
- Python 3.10+

Examples
--------
Render a paragraph:

    >>> from doxy2md import create_dispatcher, StaticPermalinkResolver
    >>> from doxy2md.ast import Bold, Paragraph, Text
    >>> dispatcher = create_dispatcher(StaticPermalinkResolver())
    >>> dispatcher.render_block(Paragraph(children=(Text("Hello "), Bold(children=(Text("world"),)))))
    ['', '<p>Hello <b>world</b></p>', '']

Render a whole compound page, with links resolved:

    >>> resolver = StaticPermalinkResolver({"classfoo": "api/classes/foo"})
    >>> page = render_page(create_dispatcher(resolver), "classfoo", "Foo", body)
    >>> page.permalink
    '/api/classes/foo'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from doxy2md.exceptions import (
    Doxy2MdError,
    InvalidOptionsError,
    MalformedNodeError,
    MissingRendererError,
    RenderingError,
    ValidationError,
)
from doxy2md.options import RendererOptions
from doxy2md.page import RenderedPage, render_page
from doxy2md.permalinks import PermalinkResolver, StaticPermalinkResolver
from doxy2md.renderers.base import ImageCollector, RenderContext
from doxy2md.renderers.dispatch import RenderDispatcher, create_dispatcher

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "Doxy2MdError",
    "ImageCollector",
    "InvalidOptionsError",
    "MalformedNodeError",
    "MissingRendererError",
    "PermalinkResolver",
    "RenderContext",
    "RenderDispatcher",
    "RenderedPage",
    "RendererOptions",
    "RenderingError",
    "StaticPermalinkResolver",
    "ValidationError",
    "create_dispatcher",
    "render_page",
]
