"""A bounded stack and a double-ended queue of integers."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

MAX_SIZE = 500


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class Stack:
    """Fixed-capacity last-in, first-out stack."""

    def __init__(self, max_size: int = MAX_SIZE):
        self.max_size = max_size
        self._data: list[int] = []

    def push(self, value: int) -> None:
        """Push ``value``; raise StackOverflowError when full."""
        if len(self._data) >= self.max_size:
            raise StackOverflowError("Stack overflow")
        self._data.append(value)

    def pop(self) -> int:
        """Pop the top value; raise StackUnderflowError when empty."""
        if not self._data:
            raise StackUnderflowError("Stack underflow")
        return self._data.pop()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Stack({self._data!r}, max_size={self.max_size})"


class Deque:
    """Double-ended queue that is filled from the front."""

    def __init__(self, values: Iterable[int] = ()):
        self._items: deque[int] = deque()
        for value in values:
            self.push_front(value)

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    @property
    def front(self) -> int:
        """The value at the front; IndexError if empty."""
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[0]

    @property
    def back(self) -> int:
        """The value at the back; IndexError if empty."""
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"