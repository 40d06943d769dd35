"""A doubly linked list with head, tail and positional edits and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dsakit.containers import EmptyError


@dataclass(eq=False)
class Node:
    """A list cell holding ``data`` and links to both neighbours."""

    data: Any
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list; positions are counted from 1.

    Positional operations accept any position of at least 1; positions past
    the end refer to the last element.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self._link_between(value, self._tail, None)

    @property
    def head(self) -> Node | None:
        return self._head

    @property
    def tail(self) -> Node | None:
        return self._tail

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _link_between(self, value: Any, prev: Node | None, nxt: Node | None) -> None:
        node = Node(value, nxt, prev)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if nxt is None:
            self._tail = node
        else:
            nxt.prev = node
        self._size += 1

    def _unlink(self, node: Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.data

    def _node_at(self, position: int) -> Node:
        if position < 1:
            raise IndexError(f"position {position} out of range")
        node = self._head
        for _ in range(min(position, self._size) - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_before_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        self._link_between(value, None, self._head)

    def insert_after_tail(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        self._link_between(value, self._tail, None)

    def insert_after_head(self, value: Any) -> None:
        """Insert ``value`` right after the first element."""
        if self._head is None:
            self._link_between(value, None, None)
        else:
            self._link_between(value, self._head, self._head.next)

    def insert_before_tail(self, value: Any) -> None:
        """Insert ``value`` right before the last element.

        With fewer than two elements this behaves like :meth:`insert_after_head`.
        """
        if self._size <= 1:
            self.insert_after_head(value)
            return
        assert self._tail is not None
        self._link_between(value, self._tail.prev, self._tail)

    def insert_before(self, position: int, value: Any) -> None:
        """Insert ``value`` before the element at ``position``."""
        if self._head is None:
            if position < 1:
                raise IndexError(f"position {position} out of range")
            self._link_between(value, None, None)
            return
        node = self._node_at(position)
        self._link_between(value, node.prev, node)

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the element at ``position``."""
        if self._head is None:
            if position < 1:
                raise IndexError(f"position {position} out of range")
            self._link_between(value, None, None)
            return
        node = self._node_at(position)
        self._link_between(value, node, node.next)

    def delete_head(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyError("delete from an empty list")
        return self._unlink(self._head)

    def delete_tail(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise EmptyError("delete from an empty list")
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        if self._head is None:
            raise EmptyError("delete from an empty list")
        return self._unlink(self._node_at(position))

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._head
        while node is not None:
            node.next, node.prev = node.prev, node.next
            node = node.prev
        self._head, self._tail = self._tail, self._head