"""Stacks and queues built on linked nodes, fixed arrays and each other."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 1000


class EmptyError(IndexError):
    """Raised when reading from an empty stack or queue."""


class FullError(OverflowError):
    """Raised when pushing onto a container that is at capacity."""


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class LinkedStack:
    """A last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise EmptyError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise EmptyError("peek at an empty stack")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next


class ArrayStack:
    """A last-in, first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self._capacity:
            raise FullError("the stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """A stack kept in a single queue whose front is always the top."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top by enqueueing it and cycling the older values behind it."""
        self._queue.append(value)
        self._queue.rotate(1)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._queue:
            raise EmptyError("pop from an empty stack")
        return self._queue.popleft()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._queue:
            raise EmptyError("peek at an empty stack")
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)


class ArrayQueue:
    """A first-in, first-out queue in a circular buffer of fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._slots: list[Any] = [None] * _check_capacity(capacity)
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def push(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        if self._size == len(self._slots):
            raise FullError("the queue is full")
        self._slots[(self._start + self._size) % len(self._slots)] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._size == 0:
            raise EmptyError("pop from an empty queue")
        value = self._slots[self._start]
        self._slots[self._start] = None
        self._start = (self._start + 1) % len(self._slots)
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._size == 0:
            raise EmptyError("peek at an empty queue")
        return self._slots[self._start]

    def __len__(self) -> int:
        return self._size


class LinkedQueue:
    """A first-in, first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._head is None:
            raise EmptyError("pop from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._head is None:
            raise EmptyError("peek at an empty queue")
        return self._head.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to back."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class StackQueue:
    """A queue kept in two stacks; the main stack's top is always the front."""

    def __init__(self) -> None:
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` at the back by burying it under the existing values."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> Any:
        """Remove and return the front value."""
        if not self._main:
            raise EmptyError("pop from an empty queue")
        return self._main.pop()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._main:
            raise EmptyError("peek at an empty queue")
        return self._main[-1]

    def __len__(self) -> int:
        return len(self._main)