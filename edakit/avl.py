"""Self-balancing AVL tree with parent links and stored child heights."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class RotationType(Enum):
    LEFT = 10
    RIGHT = 20
    LEFT_RIGHT = 30
    RIGHT_LEFT = 40


class Side(Enum):
    """Which child of its parent a node is."""

    LEFT = 10
    RIGHT = 20

    @property
    def letter(self) -> str:
        return "L" if self is Side.LEFT else "R"


@dataclass(eq=False)
class AVLNode:
    """A node holding the heights of its two subtrees."""

    value: int
    parent: AVLNode | None = None
    left: AVLNode | None = None
    right: AVLNode | None = None
    left_height: int = 0
    right_height: int = 0
    side: Side = Side.LEFT

    def set_left(self, node: AVLNode | None) -> None:
        """Attach node as the left child, updating its parent and side."""
        self.left = node
        if node is not None:
            node.parent = self
            node.side = Side.LEFT

    def set_right(self, node: AVLNode | None) -> None:
        """Attach node as the right child, updating its parent and side."""
        self.right = node
        if node is not None:
            node.parent = self
            node.side = Side.RIGHT

    @property
    def is_left(self) -> bool:
        return self.side is Side.LEFT

    @property
    def is_right(self) -> bool:
        return self.side is Side.RIGHT

    @property
    def height(self) -> int:
        return max(self.left_height, self.right_height)

    @property
    def balance_score(self) -> int:
        return abs(self.left_height - self.right_height)

    def update_heights(self) -> None:
        """Recompute the stored heights from the children."""
        self.left_height = self.left.height + 1 if self.left is not None else 0
        self.right_height = self.right.height + 1 if self.right is not None else 0


class AVL:
    """AVL tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, value: int) -> None:
        """Add a value and rebalance on the way back up."""
        if self.root is None:
            self.root = AVLNode(value)
        else:
            self._insert_below(value, self.root)

    def _insert_below(self, value: int, node: AVLNode) -> None:
        if value < node.value:
            if node.left is None:
                node.set_left(AVLNode(value, node))
            else:
                self._insert_below(value, node.left)
        else:
            if node.right is None:
                node.set_right(AVLNode(value, node))
            else:
                self._insert_below(value, node.right)
        node.update_heights()
        if node.balance_score > 1:
            self._balance(node)

    @staticmethod
    def _rotation_type(node: AVLNode) -> RotationType:
        if node.left_height > node.right_height:
            child = node.left
            if child.left_height > child.right_height:
                return RotationType.RIGHT
            return RotationType.LEFT_RIGHT
        child = node.right
        if child.left_height > child.right_height:
            return RotationType.RIGHT_LEFT
        return RotationType.LEFT

    def _balance(self, node: AVLNode) -> None:
        rotation = self._rotation_type(node)
        logger.debug("rotation type %s at %s", rotation.name, node.value)
        if rotation is RotationType.LEFT:
            self._rotate_left(node)
        elif rotation is RotationType.RIGHT:
            self._rotate_right(node)
        elif rotation is RotationType.LEFT_RIGHT:
            self._rotate_left(node.left)
            self._rotate_right(node)
        else:
            self._rotate_right(node.right)
            self._rotate_left(node)

    def _replace(self, node: AVLNode, pivot: AVLNode, parent, was_left: bool) -> None:
        if node is self.root:
            self.root = pivot
            pivot.parent = None
            return
        if was_left:
            parent.set_left(pivot)
        else:
            parent.set_right(pivot)
        parent.update_heights()

    def _rotate_left(self, node: AVLNode) -> None:
        pivot = node.right
        parent, was_left = node.parent, node.is_left
        node.set_right(pivot.left)
        pivot.set_left(node)
        node.update_heights()
        pivot.update_heights()
        self._replace(node, pivot, parent, was_left)

    def _rotate_right(self, node: AVLNode) -> None:
        pivot = node.left
        parent, was_left = node.parent, node.is_left
        node.set_left(pivot.right)
        pivot.set_right(node)
        node.update_heights()
        pivot.update_heights()
        self._replace(node, pivot, parent, was_left)

    def find(self, value: int) -> AVLNode | None:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def traverse(self) -> str:
        """Pre-order listing: depth as stars, the value, and the node's side."""
        lines = []
        stack = [(self.root, 1)] if self.root is not None else []
        while stack:
            node, level = stack.pop()
            lines.append(f"{'*' * level}{node.value}  {node.side.letter}\n")
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))
        return "".join(lines)

    def __iter__(self) -> Iterator[int]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right