#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/escape.py
"""Format-specific text escaping utilities.

Rendered pages are Markdown with embedded HTML, so character data is escaped
according to where it lands: ``markdown`` for running text, ``html`` for text
placed inside HTML elements, and ``text`` for content that must pass through
untouched (code, raw HTML blocks).

"""

from __future__ import annotations

import html
import re

from doxy2md.constants import ANONYMOUS_NAMESPACE_PREFIX, ANONYMOUS_NAMESPACE_REPLACEMENT, RenderMode

_MARKDOWN_SPECIAL_CHARS = {
    "\\": "\\\\",
    "[": "\\[",
    "]": "\\]",
    "*": "\\*",
    "_": "\\_",
    "~": "\\~",
}

_LEADING_NEWLINES = re.compile(r"^[\r\n]+")
_TRAILING_WHITESPACE = re.compile(r"[ \r\n]+$")


def escape_html(text: str) -> str:
    """Escape the three characters that are significant inside HTML text.

    Quotes are left alone; they only matter inside attribute values.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with ``&``, ``<`` and ``>`` replaced by entities

    Examples
    --------
        >>> escape_html("a < b && c")
        'a &lt; b &amp;&amp; c'

    """
    if not text:
        return text
    return html.escape(text, quote=False)


def escape_markdown(text: str) -> str:
    r"""Escape text for running Markdown/MDX content.

    HTML-significant characters become entities, then Markdown punctuation
    that would otherwise start emphasis, links or strike-through is
    backslash-escaped.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("a_b [c] *d*")
        'a\\_b \\[c\\] \\*d\\*'

    """
    if not text:
        return text

    result = escape_html(text)
    for char, escaped in _MARKDOWN_SPECIAL_CHARS.items():
        result = result.replace(char, escaped)
    return result


def render_text(text: str, mode: RenderMode) -> str:
    """Escape ``text`` for the given render mode.

    Parameters
    ----------
    text : str
        Raw character data
    mode : {"markdown", "html", "text"}
        Destination context

    Returns
    -------
    str
        Escaped text

    Raises
    ------
    ValueError
        If ``mode`` is not a known render mode

    """
    if mode == "markdown":
        return escape_markdown(text)
    if mode == "html":
        return escape_html(text)
    if mode == "text":
        return text
    raise ValueError(f"Unknown render mode: {mode}")


def strip_leading_and_trailing_newlines(text: str) -> str:
    """Remove leading line breaks and trailing blank space from a block of text."""
    return _TRAILING_WHITESPACE.sub("", _LEADING_NEWLINES.sub("", text))


def sanitize_anonymous_namespace(text: str) -> str:
    """Shorten Doxygen's ``anonymous_namespace{file}`` to ``anonymous{file}``."""
    return text.replace(ANONYMOUS_NAMESPACE_PREFIX, ANONYMOUS_NAMESPACE_REPLACEMENT)


def split_lines(text: str) -> list[str]:
    """Split rendered text into output lines; an empty string yields no lines."""
    if not text:
        return []
    return text.split("\n")
