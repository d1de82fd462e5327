"""FIFO queues: a growable circular buffer and a linked chain of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, islice
from typing import Any, Iterator, List, Optional


class QueueEmpty(IndexError):
    """Raised when reading from or removing out of an empty queue."""


class ArrayQueue:
    """Queue stored in a circular buffer that doubles when full."""

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: List[Any] = [None] * capacity
        self._first = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of elements the buffer holds before it has to grow."""
        return len(self._slots)

    def _grow(self) -> None:
        self._slots = list(self) + [None] * len(self._slots)
        self._first = 0

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the back of the queue."""
        if self._size == len(self._slots):
            self._grow()
        self._slots[(self._first + self._size) % len(self._slots)] = element
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self._size == 0:
            raise QueueEmpty("queue is empty")
        element = self._slots[self._first]
        self._slots[self._first] = None
        self._first = (self._first + 1) % len(self._slots)
        self._size -= 1
        if self._size == 0:
            self._first = 0
        return element

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if self._size == 0:
            raise QueueEmpty("queue is empty")
        return self._slots[self._first]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        ordered = chain(self._slots[self._first:], self._slots[: self._first])
        return islice(ordered, self._size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """Queue stored as a chain of nodes with head and tail pointers."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the back of the queue."""
        node = _Node(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self._head is None:
            raise QueueEmpty("queue is empty")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return removed.data

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if self._head is None:
            raise QueueEmpty("queue is empty")
        return self._head.data

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"