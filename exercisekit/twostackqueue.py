"""A FIFO queue built from two stacks."""

from __future__ import annotations

from typing import Any


class QueueEmptyError(IndexError):
    """Raised when taking an item from an empty queue."""


class TwoStackQueue:
    """Queue whose items move from an inbox stack to an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back of the queue."""
        self._inbox.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if not self._outbox:
            if not self._inbox:
                raise QueueEmptyError("Queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)