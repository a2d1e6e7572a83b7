#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/__init__.py
"""Utility modules for the doxy2md package.

This package contains text escaping helpers and the special character table.
"""

from doxy2md.utils.escape import (
    escape_html,
    escape_markdown,
    render_text,
    sanitize_anonymous_namespace,
    split_lines,
    strip_leading_and_trailing_newlines,
)
from doxy2md.utils.special_chars import SPECIAL_CHARACTERS, special_character

__all__ = [
    "SPECIAL_CHARACTERS",
    "escape_html",
    "escape_markdown",
    "render_text",
    "sanitize_anonymous_namespace",
    "special_character",
    "split_lines",
    "strip_leading_and_trailing_newlines",
]
