"""Custom exceptions for treetextconf."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treetextconf.schemas import Node


class TreeTextConfError(Exception):
    """Base exception for treetextconf operations."""


class InvalidOptionError(TreeTextConfError, ValueError):
    """A parser limit option was rejected at construction."""


class ConfigError(TreeTextConfError):
    """Error in the configuration text, with line and column context.

    Attributes:
        message: Human readable description of the problem.
        line: 1-based logical line number where the error was detected.
        col: Column of the error. Columns are not tracked, so this is always 0.
        partial: Tree built before the error, attached by
            ``ParseResult.raise_for_error``.
    """

    def __init__(self, message: str, line: int, col: int = 0) -> None:
        super().__init__(f"line:{line} col:{col} Error: {message}")
        self.message = message
        self.line = line
        self.col = col
        self.partial: Node | None = None


class UnterminatedGroupError(ConfigError):
    """Input ended while compound groups were still open."""

    def __init__(self, line: int) -> None:
        super().__init__("Unterminated compound group, not enough ':'", line)


class ExtraTerminatorError(ConfigError):
    """A group terminator was found with no open group to close."""

    def __init__(self, line: int) -> None:
        super().__init__("Too many compound terminators ':'", line)


class DepthLimitError(ConfigError):
    """Nesting went deeper than the configured maximum depth."""

    def __init__(self, limit: int, line: int) -> None:
        super().__init__(f"tree height exceeds limit: {limit}", line)
        self.limit = limit


class SizeLimitError(ConfigError):
    """Consumed input reached the configured maximum size."""

    def __init__(self, limit: int, line: int) -> None:
        super().__init__(f"size of config exceeds limit: {limit}", line)
        self.limit = limit
