"""Test utilities for the doxy2md test suite.

This module provides short builders for documentation trees, so tests can
spell out the structure they render without repeating ``children=(...)``.
"""

from doxy2md.ast import (
    Bold,
    ItemizedList,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
    Title,
)


def text(value: str) -> Text:
    """Create a text run."""
    return Text(value)


def para(*children) -> Paragraph:
    """Create a paragraph; plain strings become text runs."""
    return Paragraph(children=tuple(Text(c) if isinstance(c, str) else c for c in children))


def bold(value: str) -> Bold:
    """Create a bold span holding one text run."""
    return Bold(children=(Text(value),))


def title(value: str) -> Title:
    """Create a title holding one text run."""
    return Title(children=(Text(value),))


def item(*paragraphs, **kwargs) -> ListItem:
    """Create a list item; plain strings become one-run paragraphs."""
    return ListItem(paragraphs=tuple(para(p) if isinstance(p, str) else p for p in paragraphs), **kwargs)


def make_list(count: int, ordered: bool = False, **kwargs):
    """Create an itemized or ordered list with ``count`` numbered items."""
    items = tuple(item(f"Item {n}") for n in range(1, count + 1))
    if ordered:
        return OrderedList(items=items, **kwargs)
    return ItemizedList(items=items, **kwargs)


def count_prefixed(lines: list[str], prefix: str) -> int:
    """Count output lines starting with ``prefix``."""
    return sum(1 for line in lines if line.startswith(prefix))
