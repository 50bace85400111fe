"""Command line tool to inspect a configuration tree."""

from __future__ import annotations

import argparse
import contextlib
import io
import logging
import sys
from pathlib import Path
from typing import IO

import httpx

from treetextconf.config import (
    TREETEXTCONF_ENCODING,
    TREETEXTCONF_FETCH_TIMEOUT_S,
    TREETEXTCONF_MAX_DEPTH,
    TREETEXTCONF_MAX_SIZE,
    TREETEXTCONF_USER_AGENT,
)
from treetextconf.exceptions import InvalidOptionError
from treetextconf.formatter import count_nodes, format_tree
from treetextconf.parser import Parser

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treetextconf",
        description="Parse a treetextconf file and print its tree in pre-order.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Local configuration file, or - for stdin")
    source.add_argument("--url", help="URL to fetch the configuration from")
    parser.add_argument("--max-depth", type=int, default=TREETEXTCONF_MAX_DEPTH, help="Maximum group nesting")
    parser.add_argument("--max-size", type=int, default=TREETEXTCONF_MAX_SIZE, help="Maximum input size in bytes")
    parser.add_argument("--encoding", default=TREETEXTCONF_ENCODING, help="Input encoding")
    parser.add_argument("--summary", action="store_true", help="Print the node count instead of the tree")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def open_source(*, url: str | None, file_path: str | None) -> IO[bytes]:
    """Return a binary stream for the requested input."""
    if url:
        response = httpx.get(
            url,
            follow_redirects=True,
            timeout=TREETEXTCONF_FETCH_TIMEOUT_S,
            headers={"User-Agent": TREETEXTCONF_USER_AGENT},
        )
        response.raise_for_status()
        return io.BytesIO(response.content)

    if file_path == "-":
        return sys.stdin.buffer

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    return path.open("rb")


def main(argv: list[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        stream = open_source(url=args.url, file_path=args.file)
    except (OSError, httpx.HTTPError) as exc:
        logger.error("Could not read input: %s", exc)
        return 1

    # stdin belongs to the process and stays open
    owned = contextlib.nullcontext(stream) if stream is sys.stdin.buffer else stream
    with owned:
        try:
            parser = Parser(stream, max_depth=args.max_depth, max_size=args.max_size, encoding=args.encoding)
        except (InvalidOptionError, LookupError) as exc:
            arg_parser.error(str(exc))
        result = parser.parse()

    if args.summary:
        print(f"Nodes: {count_nodes(result.root)}")
        print(f"Lines: {result.lines}")
        print(f"Bytes: {result.size}")
    else:
        print(format_tree(result.root))

    if result.error is not None:
        logger.error("Parse failed: %s", result.error)
        return 1
    return 0
