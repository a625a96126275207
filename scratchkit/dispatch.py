"""Functions as values: predicates, filters and keyed dispatch tables."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping, Optional


def add(x: int, y: int) -> int:
    """Return the sum of ``x`` and ``y``."""
    return x + y


def is_even(x: int) -> bool:
    """Return True if ``x`` is even."""
    return x % 2 == 0


def select_if(values: Iterable[int], predicate: Callable[[int], bool]) -> list[int]:
    """Return the values for which ``predicate`` holds, in order."""
    return [value for value in values if predicate(value)]


class DispatchTable:
    """Maps string keys to callables and invokes them by key."""

    def __init__(self, entries: Optional[Mapping[str, Callable[[], Any]]] = None):
        self._entries: dict[str, Callable[[], Any]] = dict(entries or {})

    def register(self, key: str, function: Callable[[], Any]) -> None:
        """Bind ``key`` to ``function``, replacing any earlier binding."""
        self._entries[key] = function

    def call(self, key: str) -> Any:
        """Call the function bound to ``key``; raise KeyError if there is none."""
        try:
            function = self._entries[key]
        except KeyError:
            raise KeyError(f"Invalid key: {key}") from None
        return function()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)