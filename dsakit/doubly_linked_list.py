"""A doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """Doubly linked list that tracks both its first and last node.

    Insertion at either end needs an existing list: an empty list can only
    be filled through the constructor.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: Any) -> None:
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` before the first node."""
        if self._head is None:
            raise IndexError("list is empty")
        node = _Node(value, next=self._head)
        self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        if self._tail is None:
            raise IndexError("list is empty")
        self._append(value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        A position one past the last node appends.
        """
        if self._head is None:
            raise IndexError("list is empty")
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.insert_at_beginning(value)
            return
        node: Optional[_Node] = self._head
        steps = 1
        while steps < position - 1 and node is not None:
            node = node.next
            steps += 1
        if node is None:
            raise IndexError(f"invalid position {position}")
        if node is self._tail:
            self.insert_at_end(value)
            return
        new_node = _Node(value, prev=node, next=node.next)
        node.next.prev = new_node
        node.next = new_node
        self._size += 1

    def delete_from_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return removed.data

    def delete_from_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("list is empty")
        removed = self._tail
        self._tail = removed.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return removed.data

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            return self.delete_from_beginning()
        node = self._head
        steps = 1
        while steps < position and node is not None:
            node = node.next
            steps += 1
        if node is None:
            raise IndexError(f"invalid position {position}")
        if node is self._tail:
            return self.delete_from_end()
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"