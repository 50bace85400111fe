"""Configuration tree models."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field

ROOT_NAME = "__root__"


class Node(BaseModel):
    """A named node of a parsed configuration.

    Every value in the format is text. A group is a node whose children are
    the lines between its opening and closing terminator, a ``name: value``
    pair is a node with exactly one child, and a plain line is a node with
    no children.

    Attributes:
        name: The node text. May be empty.
        children: Child nodes in input order.
    """

    name: str = ""
    children: list["Node"] = Field(default_factory=list)

    def add(self, child: Node) -> Node:
        """Append ``child`` and return it."""
        self.children.append(child)
        return child

    @property
    def value(self) -> str | None:
        """Text of the first child, which is the value of a pair node."""
        if not self.children:
            return None
        return self.children[0].name

    def walk(self) -> Iterator[tuple[int, Node]]:
        """Yield ``(depth, node)`` in pre-order, starting with this node at depth 0."""
        stack: list[tuple[int, Node]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            for child in reversed(node.children):
                stack.append((depth + 1, child))
