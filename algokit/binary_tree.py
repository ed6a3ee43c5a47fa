"""Binary trees of integers: building from input sequences and common queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A binary tree node."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _take(stream: Iterator[int]) -> int:
    try:
        return next(stream)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_preorder(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a preorder listing where -1 marks a missing child."""
    stream = iter(values)
    value = _take(stream)
    if value == NULL_MARKER:
        return None
    root = TreeNode(value)
    # Each entry is a node still waiting for (left, right); True means left.
    pending: list[tuple[TreeNode, bool]] = [(root, False), (root, True)]
    while pending:
        parent, is_left = pending.pop()
        value = _take(stream)
        if value == NULL_MARKER:
            continue
        child = TreeNode(value)
        if is_left:
            parent.left = child
        else:
            parent.right = child
        pending.append((child, False))
        pending.append((child, True))
    return root


def build_level_order(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where -1 marks a missing child."""
    stream = iter(values)
    value = _take(stream)
    if value == NULL_MARKER:
        return None
    root = TreeNode(value)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = _take(stream)
        right = _take(stream)
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            queue.append(node.left)
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def render(root: Optional[TreeNode]) -> str:
    """Describe every node as "value:L<left>R<right>", one line each, in preorder."""
    lines = []
    for node in _preorder_nodes(root):
        line = f"{node.value}:"
        if node.left is not None:
            line += f"L{node.left.value}"
        if node.right is not None:
            line += f"R{node.right.value}"
        lines.append(line + "\n")
    return "".join(lines)


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in preorder."""
    return [node.value for node in _preorder_nodes(root)]


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Return the values level by level, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    levels = 0
    level = [root] if root is not None else []
    while level:
        levels += 1
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return levels


def _heights_and_best(root: Optional[TreeNode]) -> tuple[int, int]:
    """Return (height, max over nodes of left height + right height)."""
    if root is None:
        return 0, 0
    left_h, left_best = _heights_and_best(root.left)
    right_h, right_best = _heights_and_best(root.right)
    return 1 + max(left_h, right_h), max(left_h + right_h, left_best, right_best)


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    return _heights_and_best(root)[1]


def node_diameter(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between two nodes."""
    if root is None:
        return 0
    return diameter(root) + 1


def mirror(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    for node in list(_preorder_nodes(root)):
        node.left, node.right = node.right, node.left
    return root


def contains(root: Optional[TreeNode], value: int) -> bool:
    """Return whether some node holds *value*."""
    return any(node.value == value for node in _preorder_nodes(root))


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _preorder_nodes(root))


def count_leaves(root: Optional[TreeNode]) -> int:
    """Return the number of nodes without children."""
    return sum(
        1
        for node in _preorder_nodes(root)
        if node.left is None and node.right is None
    )


def path_to(root: Optional[TreeNode], value: int) -> Optional[list[int]]:
    """Return the values from the first node holding *value* up to the root.

    The left subtree is searched before the right. Returns None when no node
    holds *value*.
    """
    if root is None:
        return None
    if root.value == value:
        return [root.value]
    for child in (root.left, root.right):
        found = path_to(child, value)
        if found is not None:
            found.append(root.value)
            return found
    return None