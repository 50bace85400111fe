"""Parse output model."""

from __future__ import annotations

from dataclasses import dataclass

from treetextconf.exceptions import ConfigError
from treetextconf.schemas.tree import Node


@dataclass
class ParseResult:
    """Outcome of a single parse.

    The tree is always present. When ``error`` is set it holds whatever was
    built before the failure and must be treated as incomplete.

    Attributes:
        root: Synthetic root node named ``__root__``.
        error: The first error met, or None on success.
        lines: Logical lines consumed.
        size: Bytes consumed, line terminators excluded.
    """

    root: Node
    error: Exception | None = None
    lines: int = 0
    size: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Node:
        """Return the root, or raise the recorded error."""
        if self.error is None:
            return self.root
        if isinstance(self.error, ConfigError):
            self.error.partial = self.root
        raise self.error
