"""A shape editor whose actions are command objects that can be undone."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import IO

CLEAR_SCREEN = "\033[2J\033[H"


class Shape(ABC):
    @abstractmethod
    def draw(self) -> None:
        """Render the shape."""


class Rect(Shape):
    def draw(self) -> None:
        print("draw rect")


class Circle(Shape):
    def draw(self) -> None:
        print("draw circle")


class Command(ABC):
    """An action on the editor that may know how to reverse itself."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""

    def can_undo(self) -> bool:
        return False

    def undo(self) -> None:
        """Reverse the action; commands that cannot be undone leave this alone."""


class AddCommand(Command):
    """Adds a new shape of the given class to the shape list."""

    def __init__(self, shapes: list[Shape], shape_type: type[Shape]) -> None:
        self.shapes = shapes
        self.shape_type = shape_type

    def execute(self) -> None:
        self.shapes.append(self.shape_type())

    def can_undo(self) -> bool:
        return True

    def undo(self) -> None:
        self.shapes.pop()


class DrawCommand(Command):
    """Draws every shape; undoing clears the screen."""

    def __init__(self, shapes: list[Shape]) -> None:
        self.shapes = shapes

    def execute(self) -> None:
        for shape in self.shapes:
            shape.draw()

    def can_undo(self) -> bool:
        return True

    def undo(self) -> None:
        print(CLEAR_SCREEN, end="")


class Macro(Command):
    """Runs a stored sequence of commands, which may include other macros."""

    def __init__(self) -> None:
        self.commands: list[Command] = []

    def add(self, command: Command) -> None:
        self.commands.append(command)

    def execute(self) -> None:
        for command in self.commands:
            command.execute()


class Editor:
    """Maps numeric codes to commands and keeps an undo history."""

    def __init__(self) -> None:
        self.shapes: list[Shape] = []
        self.undo_stack: list[Command] = []

    def _make(self, code: int) -> Command | None:
        if code == 1:
            return AddCommand(self.shapes, Rect)
        if code == 2:
            return AddCommand(self.shapes, Circle)
        if code == 9:
            return DrawCommand(self.shapes)
        return None

    def handle(self, code: int) -> Command | None:
        """1 adds a rect, 2 a circle, 9 draws, 0 undoes; return the command run."""
        if code == 0:
            if not self.undo_stack:
                return None
            command = self.undo_stack.pop()
            if command.can_undo():
                command.undo()
            return command
        command = self._make(code)
        if command is not None:
            command.execute()
            self.undo_stack.append(command)
        return command


def _read_ints(stream: IO[str]) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def main(argv: list[str] | None = None) -> int:
    """Read editor codes from standard input until it ends."""
    argparse.ArgumentParser(
        description="Shape editor: 1 rect, 2 circle, 9 draw, 0 undo."
    ).parse_args(argv)
    editor = Editor()
    for code in _read_ints(sys.stdin):
        editor.handle(code)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())