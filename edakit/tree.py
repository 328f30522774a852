"""General tree whose nodes keep their children newest first."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class TreeNode:
    """A node of a general tree; the most recently added child comes first."""

    value: int = -1
    parent: TreeNode | None = None
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, node: TreeNode) -> None:
        """Put node in front of the children."""
        node.parent = self
        self.children.insert(0, node)

    def remove_child(self, value: int) -> None:
        """Drop every child holding value, together with its subtree."""
        self.children = [child for child in self.children if child.value != value]

    def find_child(self, value: int) -> TreeNode:
        """Return the first child holding value.

        Raises KeyError when no child holds it.
        """
        for child in self.children:
            if child.value == value:
                return child
        raise KeyError(value)


def _pre_order(root: TreeNode | None) -> Iterator[tuple[TreeNode, int]]:
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, level = stack.pop()
        yield node, level
        stack.extend((child, level + 1) for child in reversed(node.children))


class Tree:
    """A rooted tree of integer values."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def set_root(self, node: TreeNode) -> None:
        """Install node as the root unless the tree already has one."""
        if self.root is None:
            self.root = node

    def insert(self, value: int, parent_value: int) -> TreeNode | None:
        """Add value as a child of the first node holding parent_value.

        Returns the new node, or None when no such parent exists.
        """
        parent = self.find(parent_value)
        if parent is None:
            return None
        child = TreeNode(value)
        parent.add_child(child)
        return child

    def find(self, value: int) -> TreeNode | None:
        """Return the first node in pre-order holding value, or None."""
        for node, _ in _pre_order(self.root):
            if node.value == value:
                return node
        return None

    def traverse(self) -> str:
        """Pre-order listing, one node per line, indented by depth."""
        return "".join(
            f"{'-' * (2 * level)}{node.value} at level {level}\n"
            for node, level in _pre_order(self.root)
        )