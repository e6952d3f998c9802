"""A FIFO queue built from two stacks and a stack that tracks its minimum."""

from __future__ import annotations

from typing import Any


class StackQueue:
    """First-in first-out queue backed by two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def push(self, x: Any) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> Any:
        """Remove and return the front item."""
        self._refill()
        if not self._outbox:
            raise IndexError("pop from empty queue")
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        self._refill()
        if not self._outbox:
            raise IndexError("peek at empty queue")
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Return whether the queue holds no items."""
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class MinStack:
    """Stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def push(self, val: Any) -> None:
        """Push ``val`` onto the stack."""
        current_min = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, current_min))

    def pop(self) -> None:
        """Remove the top item; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> Any:
        """Return the top item."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> Any:
        """Return the smallest item on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)