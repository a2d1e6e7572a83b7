#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the doxy2md library.

This module centralizes the default configuration values and the fixed lookup
tables used by the renderers: markup tags, code highlight classes, simple
section titles and parameter list titles. Keeping them in one place makes the
output dialect easy to audit and keeps the renderer modules free of literals.
"""

from __future__ import annotations

from typing import Literal

# Escaping modes understood by the text renderer
RenderMode = Literal["markdown", "html", "text"]

DEFAULT_RENDER_MODE: RenderMode = "markdown"

# Renderer option defaults
DEFAULT_RENDER_PARAGRAPHS = True
DEFAULT_HEADING_ANCHORS = True
DEFAULT_SECTION_HEADING_OFFSET = 1
DEFAULT_MAX_HEADING_LEVEL = 6
DEFAULT_TITLE_HEADING_LEVEL = 4
DEFAULT_BASE_URL = "/"
DEFAULT_IMAGES_FOLDER_PATH = "img/doxygen"
DEFAULT_VERBOSE = False

# Markdown heading syntax stops at six hashes
MARKDOWN_MAX_HEADING_LEVEL = 6

# Code listing anchors look like ``l00042``
LINE_ANCHOR_PREFIX = "l"
LINE_NUMBER_WIDTH = 5

# Separator Doxygen places between a compound id and a member or section anchor
DOXYGEN_ANCHOR_SEPARATOR = "_1"

# Inline markup element kind -> HTML tag (with optional attributes)
MARKUP_TAGS: dict[str, str] = {
    "bold": "b",
    "emphasis": "em",
    "underline": "u",
    "strike": "s",
    "s": "s",
    "del": "del",
    "ins": "ins",
    "subscript": "sub",
    "superscript": "sup",
    "small": "small",
    "cite": "cite",
    "center": "center",
    "computeroutput": 'span class="doxyComputerOutput"',
}

DEFAULT_HIGHLIGHT_CLASS = "doxyHighlight"

# Doxygen highlighter classification -> CSS class
HIGHLIGHT_CLASSES: dict[str, str] = {
    "normal": "doxyHighlight",
    "charliteral": "doxyHighlightCharLiteral",
    "comment": "doxyHighlightComment",
    "preprocessor": "doxyHighlightPreprocessor",
    "keyword": "doxyHighlightKeyword",
    "keywordtype": "doxyHighlightKeywordType",
    "keywordflow": "doxyHighlightKeywordFlow",
    "token": "doxyHighlightToken",
    "stringliteral": "doxyHighlightStringLiteral",
    "vhdlchar": "doxyHighlightVhdlChar",
    "vhdlkeyword": "doxyHighlightVhdlKeyword",
    "vhdllogic": "doxyHighlightVhdlLogic",
}

# Simple sections rendered as a titled definition list
SIMPLE_SECTION_TITLES: dict[str, str] = {
    "see": "See Also",
    "return": "Returns",
    "author": "Author",
    "authors": "Authors",
    "version": "Version",
    "since": "Since",
    "date": "Date",
    "pre": "Precondition",
    "post": "Postcondition",
    "copyright": "Copyright",
    "invariant": "Invariant",
    "remark": "Remarks",
}

# Simple sections rendered as Docusaurus admonitions
ADMONITION_KINDS: dict[str, str] = {
    "note": "info",
    "warning": "warning",
    "attention": "danger",
    "important": "tip",
}

PARAMETER_LIST_TITLES: dict[str, str] = {
    "param": "Parameters",
    "templateparam": "Template Parameters",
    "retval": "Return Values",
    "exception": "Exceptions",
}

# Permalink kind hints understood by the resolver
PermalinkKind = Literal["compound", "member", "xrefsect"]

ANONYMOUS_NAMESPACE_PREFIX = "anonymous_namespace{"
ANONYMOUS_NAMESPACE_REPLACEMENT = "anonymous{"
