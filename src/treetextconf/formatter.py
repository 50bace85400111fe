"""Render parsed trees for inspection."""

from __future__ import annotations

from treetextconf.schemas import Node


def format_tree(root: Node, *, pad: str = "-") -> str:
    """Render ``root`` in pre-order, one name per line indented by depth.

    The root itself is printed unpadded, its children with one ``pad``,
    their children with two, and so on.
    """
    return "\n".join(f"{pad * depth}{node.name}" for depth, node in root.walk())


def count_nodes(root: Node) -> int:
    """Count nodes below ``root``."""
    return sum(1 for _ in root.walk()) - 1
