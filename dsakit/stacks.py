"""LIFO stacks: one on a dynamic array, one on a chain of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


class StackEmpty(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """Stack stored in a dynamic array."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def push(self, element: Any) -> None:
        """Put ``element`` on top of the stack."""
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmpty("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmpty("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """Stack stored as a chain of nodes, top first."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, element: Any) -> None:
        """Put ``element`` on top of the stack."""
        self._head = _Node(element, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._head is None:
            raise StackEmpty("stack is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.data

    def top(self) -> Any:
        """Return the top element without removing it."""
        if self._head is None:
            raise StackEmpty("stack is empty")
        return self._head.data

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size