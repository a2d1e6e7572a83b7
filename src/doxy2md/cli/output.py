"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/doxy2md/cli/output.py
import argparse
import sys
from typing import Any, TextIO

from doxy2md.page import RenderedPage


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used.

    Rich output is used when ``--rich`` is set, Rich is installed, and either
    ``--force-rich`` is set or the stream is a TTY.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    """
    if not args.rich or not check_rich_available():
        return False
    if args.force_rich:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_page_rich(page: RenderedPage, console: Any = None) -> None:
    """Print a rendered page with syntax highlighting and an image summary."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.syntax import Syntax
    from rich.table import Table

    console = console or Console()
    subtitle = page.permalink or "no permalink"
    console.print(Panel(Syntax(page.text, "markdown", word_wrap=True), title=page.title, subtitle=subtitle))

    if page.images:
        table = Table(title="Images")
        table.add_column("Name")
        table.add_column("Caption")
        for image in page.images:
            table.add_row(image.name, image.alt)
        console.print(table)


def print_page_plain(page: RenderedPage, stream: TextIO | None = None) -> None:
    """Write the rendered page text to a stream."""
    (stream or sys.stdout).write(page.text)
