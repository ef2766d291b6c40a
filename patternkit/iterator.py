"""A singly linked list with Java-style and Python-style iteration, plus a take view."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sized
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    next: _Node[T] | None


class SListIterator(Generic[T]):
    """Walks the nodes of a list from the first one onwards."""

    def __init__(self, node: _Node[T] | None = None) -> None:
        self._current = node

    def has_next(self) -> bool:
        return self._current is not None

    def next(self) -> T:
        """Return the current value and move on; StopIteration when exhausted."""
        if self._current is None:
            raise StopIteration
        value = self._current.data
        self._current = self._current.next
        return value

    def __iter__(self) -> SListIterator[T]:
        return self

    def __next__(self) -> T:
        return self.next()


class SList(Generic[T]):
    """A singly linked list that grows at the front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        for item in items:
            self.push_front(item)

    def push_front(self, value: T) -> None:
        self._head = _Node(value, self._head)

    def iterator(self) -> SListIterator[T]:
        """Return an iterator positioned at the first element."""
        return SListIterator(self._head)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next


class TakeView(Generic[T]):
    """A live view of the first count elements of a container."""

    def __init__(self, container: Iterable[T], count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        self.container = container
        self.count = count

    def __iter__(self) -> Iterator[T]:
        return islice(self.container, self.count)

    def __len__(self) -> int:
        if not isinstance(self.container, Sized):
            raise TypeError("underlying container has no length")
        return min(self.count, len(self.container))