"""Shapes drawn through a template method, created by a registry factory."""

from __future__ import annotations

import argparse
import copy
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import IO

DUPLICATE_PROMPT = "몇번째 도형을 복제 할까요 >> "

_AUTO_REGISTERED: dict[int, Callable[[], "Shape"]] = {}


class UnsupportedOperation(Exception):
    """Raised when a shape does not support the requested operation."""


class Shape(ABC):
    """Base shape: drawing is wrapped in a fixed lock/unlock sequence."""

    def __init_subclass__(cls, key: int | None = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if key is not None:
            _AUTO_REGISTERED[key] = cls

    def __init__(self) -> None:
        self.color = 0

    def set_color(self, color: int) -> None:
        self.color = color

    def draw(self) -> str:
        """Draw the shape between lock and unlock; return what the shape drew."""
        print("lock mutex")
        drawn = self.draw_imp()
        print("unlock mutex")
        return drawn

    @abstractmethod
    def draw_imp(self) -> str:
        """Draw the shape itself and return the text drawn."""

    def clone(self) -> Shape:
        raise UnsupportedOperation(f"{type(self).__name__} cannot be cloned")

    def get_area(self) -> int:
        return -1


class Rect(Shape, key=1):
    def draw_imp(self) -> str:
        text = "draw rect"
        print(text)
        return text

    def clone(self) -> Shape:
        return copy.copy(self)


class Circle(Shape, key=2):
    def draw_imp(self) -> str:
        text = "draw circle"
        print(text)
        return text

    def clone(self) -> Shape:
        return copy.copy(self)


class ShapeFactory:
    """Creates shapes by key from registered creators or prototypes."""

    _instance: ShapeFactory | None = None

    def __init__(self) -> None:
        self._creators: dict[int, Callable[[], Shape]] = dict(_AUTO_REGISTERED)

    @classmethod
    def get_instance(cls) -> ShapeFactory:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_shape(self, key: int, prototype: Shape) -> None:
        """Register a sample shape; created shapes are clones of it."""
        self._creators[key] = prototype.clone

    def register_creator(self, key: int, creator: Callable[[], Shape]) -> None:
        self._creators[key] = creator

    def create(self, key: int) -> Shape | None:
        creator = self._creators.get(key)
        return creator() if creator is not None else None


class ShapeEditor:
    """Holds a list of shapes and applies numeric editor commands to it."""

    def __init__(self, factory: ShapeFactory | None = None) -> None:
        self.factory = factory if factory is not None else ShapeFactory.get_instance()
        self.shapes: list[Shape] = []

    def add(self, key: int) -> Shape | None:
        shape = self.factory.create(key)
        if shape is not None:
            self.shapes.append(shape)
        return shape

    def duplicate(self, index: int) -> Shape:
        shape = self.shapes[index].clone()
        self.shapes.append(shape)
        return shape

    def draw_all(self) -> None:
        for shape in self.shapes:
            shape.draw()

    def handle(self, command: int, *args: int) -> Shape | None:
        """Run one command: 1-7 add a shape, 8 duplicate, 9 draw everything."""
        if 0 < command < 8:
            return self.add(command)
        if command == 8:
            return self.duplicate(*args)
        if command == 9:
            self.draw_all()
        return None


def _read_ints(stream: IO[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def main(argv: list[str] | None = None) -> int:
    """Read editor commands from standard input until it ends."""
    argparse.ArgumentParser(
        description="Shape editor: 1-7 add, 8 duplicate, 9 draw."
    ).parse_args(argv)
    editor = ShapeEditor()
    commands = _read_ints(sys.stdin)
    for command in commands:
        if command == 8:
            print(DUPLICATE_PROMPT, end="")
            index = next(commands, None)
            if index is None:
                break
            editor.handle(8, index)
        else:
            editor.handle(command)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())