"""A linked list that keeps track of its smallest and largest values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


@dataclass(slots=True)
class _Node:
    data: int
    next: Optional["_Node"] = None


class MinMaxList:
    """Head-inserting linked list with running minimum and maximum.

    An empty list reports ``INT_MAX`` as its minimum and ``INT_MIN`` as
    its maximum.
    """

    def __init__(self):
        self._head: Optional[_Node] = None
        self.min_val = INT_MAX
        self.max_val = INT_MIN

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert(self, data: int) -> None:
        """Insert ``data`` at the head and update the bounds."""
        self._head = _Node(data, self._head)
        self.max_val = max(self.max_val, data)
        self.min_val = min(self.min_val, data)

    def delete(self, value: int) -> bool:
        """Remove the first node holding ``value``; return whether one was removed."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.data == value:
                break
            prev = node
        else:
            return False

        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next

        if value in (self.min_val, self.max_val):
            values = list(self)
            self.min_val = min(values, default=INT_MAX)
            self.max_val = max(values, default=INT_MIN)
        return True

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[_Node] = None
        current = self._head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self._head = prev

    def render(self) -> str:
        """Return the values line followed by the bounds line."""
        values = "".join(f"{value} " for value in self)
        return f"{values}\nList min: {self.min_val} List max: {self.max_val}"

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())