"""A singly linked list of values with positional and value-based edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dsakit.containers import EmptyError


@dataclass(eq=False)
class Node:
    """A list cell holding ``data`` and a link to the next cell."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    @property
    def head(self) -> Node | None:
        """The first node, or ``None`` when the list is empty."""
        return self._head

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, position: int) -> Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        self._head = Node(value, self._head)
        self._size += 1

    def insert_tail(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        if self._head is None:
            self.insert_head(value)
            return
        self._node_at(self._size).next = Node(value)
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_head(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def insert_before_value(self, value: Any, target: Any) -> bool:
        """Insert ``value`` before the first occurrence of ``target``.

        Returns whether ``target`` was found; the list is unchanged if not.
        """
        if self._head is None:
            return False
        if self._head.data == target:
            self.insert_head(value)
            return True
        node = self._head
        while node.next is not None:
            if node.next.data == target:
                node.next = Node(value, node.next)
                self._size += 1
                return True
            node = node.next
        return False

    def remove_head(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyError("remove from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def remove_tail(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise EmptyError("remove from an empty list")
        if self._size == 1:
            return self.remove_head()
        previous = self._node_at(self._size - 1)
        assert previous.next is not None
        value = previous.next.data
        previous.next = None
        self._size -= 1
        return value

    def remove_at(self, position: int) -> Any:
        """Remove and return the element at ``position`` (1 to len)."""
        if self._head is None:
            raise EmptyError("remove from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            return self.remove_head()
        previous = self._node_at(position - 1)
        assert previous.next is not None
        value = previous.next.data
        previous.next = previous.next.next
        self._size -= 1
        return value