"""Binary search tree of integers with insertion, deletion and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree.

    Values greater than a node go to its right; equal or smaller values go
    to its left.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: int) -> None:
        """Add *value* to the tree."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if node.value < value:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.right if node.value < value else node.left  # type: ignore[operator]
        return False

    def delete(self, value: int) -> None:
        """Remove one occurrence of *value*; do nothing if it is absent."""
        self._root = self._delete(self._root, value)

    @staticmethod
    def _leftmost(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    def _delete(self, node: Optional[_Node], value: int) -> Optional[_Node]:
        if node is None:
            return None
        if value > node.value:
            node.right = self._delete(node.right, value)
        elif value < node.value:
            node.left = self._delete(node.left, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = self._leftmost(node.right)
            node.value, successor.value = successor.value, node.value
            node.right = self._delete(node.right, value)
        return node

    def render(self) -> str:
        """Describe every node and its children, one line per node, in preorder."""
        lines: list[str] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            line = f"{node.value}:"
            if node.left is not None:
                line += f"L:{node.left.value},"
            if node.right is not None:
                line += f"R:{node.right.value}"
            lines.append(line)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return "".join(f"{line}\n" for line in lines)