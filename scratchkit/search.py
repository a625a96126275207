"""Binary search and simple sorting helpers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence


def binsearch(
    values: Sequence[int],
    target: int,
    left: int = 0,
    right: Optional[int] = None,
) -> int:
    """Return the index of ``target`` in sorted ``values[left:right+1]``, or -1."""
    if right is None:
        right = len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with ``values`` sorted ascending by insertion sort."""
    result: list[int] = []
    for value in values:
        position = len(result)
        while position > 0 and result[position - 1] > value:
            position -= 1
        result.insert(position, value)
    return result


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Return the strings in lexicographic order."""
    return sorted(strings)