"""A stack built on a queue and a queue built on a stack."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueBackedStack(Generic[T]):
    """A LIFO stack that stores its items in a FIFO queue."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def push(self, x: T) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)

    def _cycle(self, keep_last: bool) -> T:
        if not self._queue:
            raise IndexError("stack is empty")
        rebuilt: deque[T] = deque()
        last: T
        while self._queue:
            item = self._queue.popleft()
            if not self._queue:
                last = item
                if keep_last:
                    rebuilt.append(item)
            else:
                rebuilt.append(item)
        self._queue = rebuilt
        return last

    def pop(self) -> T:
        """Remove and return the top item."""
        return self._cycle(keep_last=False)

    def top(self) -> T:
        """Return the top item without removing it."""
        return self._cycle(keep_last=True)

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class StackBackedQueue(Generic[T]):
    """A FIFO queue that stores its items in a LIFO stack."""

    def __init__(self) -> None:
        self._stack: list[T] = []

    def push(self, x: T) -> None:
        """Add ``x`` at the back of the queue."""
        self._stack.append(x)

    def _reach_bottom(self, keep_bottom: bool) -> T:
        if not self._stack:
            raise IndexError("queue is empty")
        spare: list[T] = []
        while len(self._stack) > 1:
            spare.append(self._stack.pop())
        bottom = self._stack[-1] if keep_bottom else self._stack.pop()
        while spare:
            self._stack.append(spare.pop())
        return bottom

    def pop(self) -> T:
        """Remove and return the front item."""
        return self._reach_bottom(keep_bottom=False)

    def peek(self) -> T:
        """Return the front item without removing it."""
        return self._reach_bottom(keep_bottom=True)

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)