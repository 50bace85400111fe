"""Build a configuration tree from delimiter based text."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO

from treetextconf.classifier import LineKind, classify_line
from treetextconf.config import TREETEXTCONF_ENCODING
from treetextconf.exceptions import (
    DepthLimitError,
    ExtraTerminatorError,
    SizeLimitError,
    UnterminatedGroupError,
)
from treetextconf.line_source import LineSource
from treetextconf.schemas import ROOT_NAME, Node, ParseResult, ParserOptions

logger = logging.getLogger(__name__)


class Parser:
    """Single-use parser over one input source.

    Limits are validated here, before any input is read. Keyword limits
    take precedence over the matching fields of ``options``.

    Args:
        source: A text or binary stream, or a prepared LineSource.
        options: Limits to enforce. Defaults to no limits.
        max_depth: Overrides ``options.max_depth``.
        max_size: Overrides ``options.max_size``.
        encoding: Encoding of binary streams, also used to measure text
            streams against the size limit.

    Raises:
        InvalidOptionError: If a limit is not strictly positive.
        LookupError: If ``encoding`` is not a known codec.
    """

    def __init__(
        self,
        source: IO | LineSource,
        options: ParserOptions | None = None,
        *,
        max_depth: int | None = None,
        max_size: int | None = None,
        encoding: str = TREETEXTCONF_ENCODING,
    ) -> None:
        base = options or ParserOptions()
        self.options = base.merged(max_depth=max_depth, max_size=max_size)
        if isinstance(source, LineSource):
            self._lines = source
            if self.options.max_size is not None:
                source.size_limit = self.options.max_size
        else:
            self._lines = LineSource(source, encoding=encoding, size_limit=self.options.max_size)
        self._used = False

    def parse(self) -> ParseResult:
        """Consume the source and return the tree with the first error, if any.

        Errors are returned rather than raised; call
        ``ParseResult.raise_for_error`` to raise them. Read, decode and
        encode errors from the source are returned unchanged, as is the
        ValueError raised when reading a closed stream.

        Raises:
            RuntimeError: If this parser has already been run.
        """
        if self._used:
            raise RuntimeError("Parser instances are single-use; create a new one per input")
        self._used = True

        root = Node(name=ROOT_NAME)
        try:
            error = self._build(root)
        except (OSError, ValueError) as exc:
            error = exc
        if error is not None:
            logger.debug("Parse stopped after %d lines: %s", self._lines.lines, error)
        return ParseResult(root=root, error=error, lines=self._lines.lines, size=self._lines.size)

    def _build(self, root: Node) -> Exception | None:
        stack = [root]
        max_depth = self.options.max_depth
        max_size = self.options.max_size

        for line in self._lines:
            lineno = self._lines.lines
            if max_size is not None and self._lines.size >= max_size:
                return SizeLimitError(max_size, lineno)

            classified = classify_line(line)
            kind = classified.kind
            if kind in (LineKind.BLANK, LineKind.COMMENT):
                continue

            if kind is LineKind.CLOSE:
                if len(stack) == 1:
                    return ExtraTerminatorError(lineno)
                closed = stack.pop()
                logger.debug("line %d: closed group %r", lineno, closed.name)
            elif kind is LineKind.OPEN:
                group = stack[-1].add(Node(name=classified.name))
                stack.append(group)
                depth = len(stack) - 1
                logger.debug("line %d: opened group %r at depth %d", lineno, group.name, depth)
                if max_depth is not None and depth > max_depth:
                    return DepthLimitError(max_depth, lineno)
            elif kind is LineKind.PAIR:
                pair = stack[-1].add(Node(name=classified.name))
                pair.add(Node(name=classified.value or ""))
            else:
                stack[-1].add(Node(name=classified.name))

        if len(stack) > 1:
            return UnterminatedGroupError(self._lines.lines)
        return None


def loads(
    text: str | bytes,
    *,
    max_depth: int | None = None,
    max_size: int | None = None,
    encoding: str = TREETEXTCONF_ENCODING,
) -> Node:
    """Parse a configuration string and return its root node.

    Raises:
        InvalidOptionError: If a limit is not strictly positive.
        ConfigError: On structural or limit errors. The partial tree is
            available as ``exc.partial``.
    """
    stream: IO = io.BytesIO(text) if isinstance(text, bytes) else io.StringIO(text)
    parser = Parser(stream, max_depth=max_depth, max_size=max_size, encoding=encoding)
    return parser.parse().raise_for_error()


def load(
    fp: IO,
    *,
    max_depth: int | None = None,
    max_size: int | None = None,
    encoding: str = TREETEXTCONF_ENCODING,
) -> Node:
    """Parse a configuration from an open text or binary file."""
    parser = Parser(fp, max_depth=max_depth, max_size=max_size, encoding=encoding)
    return parser.parse().raise_for_error()


def load_path(
    path: str | Path,
    *,
    max_depth: int | None = None,
    max_size: int | None = None,
    encoding: str = TREETEXTCONF_ENCODING,
) -> Node:
    """Parse the configuration file at ``path``."""
    with Path(path).open("rb") as fp:
        return load(fp, max_depth=max_depth, max_size=max_size, encoding=encoding)
