"""Binary search tree with red-black node bookkeeping.

Insertion places each key as a red leaf and does not rebalance.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from edakit.avl import Side

DEFAULT_KEYS_FILE = "keys_sorted.bin"


class NodeColor(Enum):
    RED = 10
    BLACK = 20

    @property
    def letter(self) -> str:
        return "R" if self is NodeColor.RED else "B"


@dataclass(eq=False)
class RBNode:
    """A node carrying a colour, a parent link and its side."""

    value: int
    parent: RBNode | None = None
    left: RBNode | None = None
    right: RBNode | None = None
    color: NodeColor = NodeColor.RED
    side: Side = Side.LEFT

    def set_left(self, node: RBNode | None) -> None:
        """Attach node as the left child, updating its parent and side."""
        self.left = node
        if node is not None:
            node.parent = self
            node.side = Side.LEFT

    def set_right(self, node: RBNode | None) -> None:
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


class RBTree:
    """Tree of RBNode; equal values go to the right."""

    def __init__(self) -> None:
        self.root: RBNode | None = None

    def insert(self, value: int) -> None:
        """Add value as a new red leaf."""
        if self.root is None:
            self.root = RBNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.set_left(RBNode(value, node))
                    return
                node = node.left
            else:
                if node.right is None:
                    node.set_right(RBNode(value, node))
                    return
                node = node.right

    def find(self, value: int) -> RBNode | None:
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


def read_keys(path: str | Path) -> list[int]:
    """Read little-endian 32-bit signed integers; a trailing partial key is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % 4
    return [key for (key,) in struct.iter_unpack("<i", data[:usable])]


def main(argv: list[str] | None = None) -> int:
    """Insert the keys of a binary file into a tree and print it."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_KEYS_FILE
    try:
        keys = read_keys(path)
    except OSError as error:
        print(f"cannot read {path}: {error}", file=sys.stderr)
        return 1
    tree = RBTree()
    for key in keys:
        print(f"inserting {key}")
        tree.insert(key)
    sys.stdout.write(tree.traverse())
    return 0