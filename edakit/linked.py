"""Singly linked list, stack and queue, plus a parenthesis checker."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class Node:
    """A link of a singly linked list."""

    value: Any = -1
    next: Node | None = None

    def __str__(self) -> str:
        return str(self.value)


class LinkedList:
    """A singly linked list with insertion at both ends."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._size = 0

    def insert_first(self, value: Any) -> None:
        """Put a value in front of the list."""
        self._head = Node(value, self._head)
        self._size += 1

    def insert_last(self, value: Any) -> None:
        """Append a value at the end of the list."""
        node = Node(value)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def remove_first(self) -> None:
        """Drop the first value; does nothing on an empty list."""
        if self._head is not None:
            self._head = self._head.next
            self._size -= 1

    def remove(self, value: Any) -> None:
        """Drop every occurrence of a value."""
        previous: Node | None = None
        current = self._head
        while current is not None:
            if current.value == value:
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                self._size -= 1
            else:
                previous = current
            current = current.next

    def clear(self) -> None:
        """Drop every value."""
        self._head = None
        self._size = 0

    def find(self, value: Any) -> Node | None:
        """Return the first node holding the value, or None."""
        current = self._head
        while current is not None and current.value != value:
            current = current.next
        return current

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self)


class Stack:
    """A last-in first-out container."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; None when empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> Any:
        """Return the top value without removing it; None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """A first-in first-out container."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value; None when empty."""
        return self._items.popleft() if self._items else None

    def peek(self) -> Any:
        """Return the front value without removing it; None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def validate_parentheses(text: str) -> tuple[bool, int]:
    """Check that parentheses in text balance.

    Returns (valid, position): position is the index of an unmatched ')'
    when one is found, otherwise the index of the last character read.
    """
    stack = Stack()
    position = -1
    for position, char in enumerate(text):
        if char == "(":
            stack.push(char)
        elif char == ")":
            if stack.is_empty():
                return False, position
            stack.pop()
    return stack.is_empty(), position