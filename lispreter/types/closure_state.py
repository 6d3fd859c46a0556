from __future__ import annotations

from typing import Optional

from lispreter.types.node import Node


class ClosureState:
    """Tracks the formals node of the most recently registered lambda."""

    __slots__ = ("next_node",)

    def __init__(self):
        self.next_node: Optional[Node] = None

    def set_next_node(self, node: Node) -> None:
        self.next_node = node

    def resolve(self, candidate: Node) -> Node:
        """Return the registered key for `candidate`, consuming it if it matches."""
        node = self.next_node
        if node is not None and node == candidate:
            self.next_node = None
            return node
        return candidate
