"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One link of a list: a value and the link that follows it."""

    value: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list of values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.head: Node[T] | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: T) -> Node[T]:
        """Add value at the beginning of the list and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: T) -> Node[T]:
        """Add value at the end of the list and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node[T] | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Callable[[T], Any] | None = None) -> None:
        """Empty the list, passing each value to delete first if given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.value)
            node.next = None
            node = following

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call func on every value, from first to last."""
        for value in self:
            func(value)

    def map(
        self, func: Callable[[T], U | None], delete: Callable[[U], Any] | None = None
    ) -> "LinkedList[U]":
        """Build a new list of func applied to every value.

        When func returns None the values built so far are passed to delete
        and ValueError is raised.
        """
        result: LinkedList[U] = LinkedList()
        for value in self:
            mapped = func(value)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function produced no value")
            result.push_back(mapped)
        return result