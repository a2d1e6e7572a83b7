"""Command-line interface for doxy2md.

Renders one compound page from a JSON tree dump (see
:mod:`doxy2md.ast.serialization`) and prints, or writes, the Markdown.

The page file holds the compound id, its title and the top-level blocks::

    {"id": "classfoo", "title": "Foo", "body": [{"kind": "briefdescription", ...}]}

The optional permalinks file maps compound ids to page paths, and ids of
stray anchors to their owning compound::

    {"pages": {"classfoo": "api/classes/foo"}, "anchors": {"foo_1intro": "classfoo"}}

Examples
--------
Render to stdout::

    $ doxy2md classfoo.json --permalinks permalinks.json

Write to a file with a config file::

    $ doxy2md classfoo.json --config .doxy2md.toml --out foo.mdx

Use rich formatting::

    $ doxy2md classfoo.json --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from doxy2md import __version__
from doxy2md.ast.serialization import dict_to_tree
from doxy2md.cli.config import find_config_in_parents, load_config_file, options_from_config
from doxy2md.cli.output import print_page_plain, print_page_rich, should_use_rich_output
from doxy2md.exceptions import Doxy2MdError, MalformedNodeError, RenderingError, ValidationError
from doxy2md.logging_utils import configure_logging
from doxy2md.options import RendererOptions
from doxy2md.page import RenderedPage, render_page
from doxy2md.permalinks import StaticPermalinkResolver
from doxy2md.renderers.dispatch import create_dispatcher

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="doxy2md",
        description="Render a Doxygen documentation tree dump into Markdown/MDX.",
    )
    parser.add_argument("page", type=Path, help="JSON file with the page id, title and body tree")
    parser.add_argument("--permalinks", type=Path, help="JSON file with page and anchor permalinks")
    parser.add_argument("--config", type=Path, help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--out", "-o", type=Path, help="Output file; prints to stdout when omitted")
    parser.add_argument("--base-url", help="Site base URL, prefix of page permalinks and image URLs")
    parser.add_argument("--max-heading-level", type=int, help="Deepest Markdown heading level to emit")
    parser.add_argument("--no-paragraphs", action="store_true", help="Do not wrap paragraphs in <p> elements")
    parser.add_argument("--rich", action="store_true", help="Use rich terminal output")
    parser.add_argument("--force-rich", action="store_true", help="Use rich output even when not writing to a TTY")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Timestamps and logger names in log output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log notes about content that is not rendered")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in {path}: {e}") from e


def build_options(args: argparse.Namespace) -> RendererOptions:
    """Merge the config file and command line flags into renderer options.

    Command line flags override config file values.
    """
    config_path: Optional[Path] = args.config or find_config_in_parents()
    config = load_config_file(config_path) if config_path else {}
    if config_path:
        logger.debug(f"Using configuration from {config_path}")

    if args.base_url is not None:
        config["base_url"] = args.base_url
    if args.max_heading_level is not None:
        config["max_heading_level"] = args.max_heading_level
    if args.no_paragraphs:
        config["render_paragraphs"] = False
    if args.verbose:
        config["verbose"] = True
    return options_from_config(config)


def build_resolver(path: Optional[Path], options: RendererOptions) -> StaticPermalinkResolver:
    """Load the permalinks file into a resolver."""
    resolver = StaticPermalinkResolver(page_base_url=options.base_url)
    if path is None:
        return resolver

    data = _read_json(path)
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(f"Permalinks file {path} must contain an object")
    for refid, permalink in data.get("pages", {}).items():
        resolver.register_page(refid, permalink)
    for refid, compound_id in data.get("anchors", {}).items():
        resolver.register_anchor(refid, compound_id)
    logger.debug(f"Loaded {len(resolver.page_permalinks)} page permalinks from {path}")
    return resolver


def render_page_file(path: Path, options: RendererOptions, resolver: StaticPermalinkResolver) -> RenderedPage:
    """Load a page file and render it.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read
    MalformedNodeError
        If the file does not describe a page

    """
    data = _read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("body", []), list):
        raise MalformedNodeError(f"Page file {path} must be an object with a 'body' list")

    body = [dict_to_tree(block) for block in data.get("body", [])]
    dispatcher = create_dispatcher(resolver, options)
    return render_page(dispatcher, data.get("id", ""), data.get("title", path.stem), body)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line tool and return the exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace, verbose=args.verbose)

    try:
        options = build_options(args)
        resolver = build_resolver(args.permalinks, options)
        page = render_page_file(args.page, options, resolver)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except Doxy2MdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.out:
        args.out.write_text(page.text, encoding="utf-8")
        logger.info(f"Wrote {len(page.lines)} lines to {args.out}")
    elif should_use_rich_output(args):
        print_page_rich(page)
    else:
        print_page_plain(page)

    return EXIT_SUCCESS
