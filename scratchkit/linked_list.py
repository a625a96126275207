"""A singly linked list of integers with a tracked size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(slots=True)
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list supporting append, prepend, search and delete."""

    def __init__(self, values=()):
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, data: int) -> None:
        """Add ``data`` at the end of the list."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, data: int) -> None:
        """Add ``data`` at the beginning of the list."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def search(self, target: int) -> bool:
        """Return True if ``target`` is in the list."""
        return any(node.data == target for node in self._nodes())

    def delete(self, target: int) -> bool:
        """Remove the first node holding ``target``; return whether one was removed."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.data == target:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                if node is self._tail:
                    self._tail = prev
                self._size -= 1
                return True
            prev = node
        return False

    def render(self) -> str:
        """Return the list as ``a -> b -> NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"