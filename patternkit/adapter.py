"""Adapting existing classes and objects to the interfaces a system expects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, MutableSequence
from typing import Generic, TypeVar

T = TypeVar("T")


class TextView:
    """Holds a string and shows it on screen."""

    def __init__(self, data: str) -> None:
        self.data = data

    def show(self) -> str:
        """Print the stored text and return it."""
        text = self.data
        print(text)
        return text


class Shape(ABC):
    """Anything the shape editor can draw."""

    @abstractmethod
    def draw(self) -> None:
        """Render the shape."""


class Rect(Shape):
    def draw(self) -> None:
        print("draw rect")


class Circle(Shape):
    def draw(self) -> None:
        print("draw circle")


class Text(TextView, Shape):
    """Class adapter: a TextView that the shape editor can draw."""

    def draw(self) -> None:
        self.show()


class ObjectAdapter(Shape):
    """Object adapter: lets an existing TextView be drawn as a shape."""

    def __init__(self, view: TextView) -> None:
        self.view = view

    def draw(self) -> None:
        self.view.show()


class Stack(Generic[T]):
    """A stack that exposes only push, pop and top over a hidden container."""

    def __init__(self, container: Callable[[], MutableSequence[T]] = deque) -> None:
        self._items: MutableSequence[T] = container()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)