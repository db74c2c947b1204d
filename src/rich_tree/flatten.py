"""Visible-node flattening."""

from __future__ import annotations

from .types import Node, VisibleNode


def flatten(root: Node) -> list[VisibleNode]:
    """Return the currently visible nodes in depth-first display order.

    The root itself is never listed; its children are at depth 0. A node's
    children are listed only when it is open and they have been materialized.
    """
    visible: list[VisibleNode] = []

    def _walk(node: Node, depth: int) -> None:
        if not isinstance(node.children, list):
            return
        for child in node.children:
            visible.append(VisibleNode(child, depth))
            if child.open:
                _walk(child, depth + 1)

    _walk(root, 0)
    return visible
