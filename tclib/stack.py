"""A last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Stack:
    """A LIFO stack of arbitrary objects."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Place ``data`` on top of the stack."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item; ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        """True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack downwards."""
        return reversed(self._items)