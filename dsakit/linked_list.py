"""A singly linked list with positional insertion, deletion and search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Tuple


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list of values, head first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert_at_beginning(value)

    def _pairs(self) -> Iterator[Tuple[Optional[_Node], _Node]]:
        """Yield (previous node, node) for every node in order."""
        prev, node = None, self._head
        while node is not None:
            yield prev, node
            prev, node = node, node.next

    def _locate(self, value: Any) -> Tuple[Optional[_Node], _Node]:
        for prev, node in self._pairs():
            if node.data == value:
                return prev, node
        raise ValueError(f"{value!r} is not present in the list")

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        new_node = _Node(value)
        if self._head is None:
            self._head = new_node
        else:
            *_, (_, last) = self._pairs()
            last.next = new_node
        self._size += 1

    def insert_after(self, ref: Any, value: Any) -> None:
        """Insert ``value`` right after the first node holding ``ref``."""
        _, node = self._locate(ref)
        node.next = _Node(value, node.next)
        self._size += 1

    def insert_before(self, ref: Any, value: Any) -> None:
        """Insert ``value`` right before the first node holding ``ref``."""
        prev, node = self._locate(ref)
        new_node = _Node(value, node)
        if prev is None:
            self._head = new_node
        else:
            prev.next = new_node
        self._size += 1

    def delete_start(self) -> Any:
        """Remove the head node and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.data

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        *_, (prev, last) = self._pairs()
        if prev is None:
            self._head = None
        else:
            prev.next = None
        self._size -= 1
        return last.data

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        prev, node = self._locate(value)
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1

    def position(self, value: Any) -> int:
        """Return the 1-based position of the first node holding ``value``."""
        for index, data in enumerate(self, start=1):
            if data == value:
                return index
        raise ValueError(f"{value!r} is not present in the list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        current = self._head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self._head = prev

    def __iter__(self) -> Iterator[Any]:
        for _, node in self._pairs():
            yield node.data

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"