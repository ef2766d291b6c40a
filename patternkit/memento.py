"""A graphics context that saves and restores its own pen state."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Line:
    """A line drawn with the pen state current at the time."""

    x1: int
    y1: int
    x2: int
    y2: int
    width: int
    color: int


@dataclass(frozen=True)
class _Memento:
    pen_width: int
    pen_color: int


class Graphics:
    """Draws lines with a pen whose state can be saved under a token."""

    _tokens: ClassVar[itertools.count] = itertools.count(1)

    def __init__(self) -> None:
        self.pen_width = 1
        self.pen_color = 0
        self.lines: list[Line] = []
        self._mementos: dict[int, _Memento] = {}

    def set_stroke_color(self, color: int) -> None:
        self.pen_color = color

    def set_stroke_width(self, width: int) -> None:
        self.pen_width = width

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> Line:
        line = Line(x1, y1, x2, y2, self.pen_width, self.pen_color)
        self.lines.append(line)
        return line

    def save(self) -> int:
        """Store the pen state and return a token to restore it later."""
        token = next(self._tokens)
        self._mementos[token] = _Memento(self.pen_width, self.pen_color)
        return token

    def restore(self, token: int) -> None:
        """Bring back the pen state saved under token; KeyError if unknown."""
        try:
            memento = self._mementos[token]
        except KeyError:
            raise KeyError(f"no saved state for token {token}") from None
        self.pen_width = memento.pen_width
        self.pen_color = memento.pen_color