"""Binary search tree with subtree sizes and rank queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree; size counts the nodes of its subtree."""

    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None
    size: int = 1


def _in_order(root: BSTNode | None) -> Iterator[BSTNode]:
    stack: list[BSTNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _pre_order(root: BSTNode | None) -> Iterator[tuple[BSTNode, int]]:
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, level = stack.pop()
        yield node, level
        if node.right is not None:
            stack.append((node.right, level + 1))
        if node.left is not None:
            stack.append((node.left, level + 1))


class BST:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, value: int) -> None:
        """Add a value as a new leaf, keeping subtree sizes current."""
        if self.root is None:
            self.root = BSTNode(value)
            return
        node = self.root
        while True:
            node.size += 1
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(value)
                    return
                node = node.right

    def find(self, value: int) -> BSTNode | None:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def traverse(self) -> str:
        """Pre-order listing, one node per line, indented by depth."""
        return "".join(
            f"{'-' * (2 * level)}{node.value} | s = {node.size}\n"
            for node, level in _pre_order(self.root)
        )

    def ascending(self) -> list[int]:
        """All values in ascending order."""
        return list(self)

    def update_sizes(self) -> None:
        """Recompute every subtree size from the children."""
        for node, _ in reversed(list(_pre_order(self.root))):
            left = node.left.size if node.left is not None else 0
            right = node.right.size if node.right is not None else 0
            node.size = left + right + 1

    def kth(self, k: int) -> BSTNode | None:
        """Return the node of rank k (1-based), or None when out of range."""
        node = self.root
        while node is not None:
            position = (node.left.size if node.left is not None else 0) + 1
            if k == position:
                return node
            if k > position:
                k -= position
                node = node.right
            else:
                node = node.left
        return None

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in _in_order(self.root))