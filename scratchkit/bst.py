"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(slots=True)
class _Node:
    data: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[int] = ()):
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> bool:
        """Insert ``data``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(data)
            self._size += 1
            return True
        node = self._root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = _Node(data)
                    break
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = _Node(data)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    @staticmethod
    def _in_order(node: Optional[_Node]) -> Iterator[int]:
        if node is not None:
            yield from BinarySearchTree._in_order(node.left)
            yield node.data
            yield from BinarySearchTree._in_order(node.right)

    @staticmethod
    def _pre_order(node: Optional[_Node]) -> Iterator[int]:
        if node is not None:
            yield node.data
            yield from BinarySearchTree._pre_order(node.left)
            yield from BinarySearchTree._pre_order(node.right)

    @staticmethod
    def _post_order(node: Optional[_Node]) -> Iterator[int]:
        if node is not None:
            yield from BinarySearchTree._post_order(node.left)
            yield from BinarySearchTree._post_order(node.right)
            yield node.data

    def in_order(self) -> list[int]:
        """Return the values in left, root, right order."""
        return list(self._in_order(self._root))

    def pre_order(self) -> list[int]:
        """Return the values in root, left, right order."""
        return list(self._pre_order(self._root))

    def post_order(self) -> list[int]:
        """Return the values in left, right, root order."""
        return list(self._post_order(self._root))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return self._in_order(self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.data:
                return True
            node = node.left if value < node.data else node.right  # type: ignore[operator]
        return False

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()!r})"