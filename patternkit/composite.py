"""Files and folders treated uniformly when measuring size."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Common base of files and folders."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def size(self) -> int:
        """Return the total size."""


class File(Component):
    """A named file with a fixed size."""

    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size


class Folder(Component):
    """A named folder whose size is the sum of what it holds."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[Component] = []

    def add(self, component: Component) -> None:
        self.children.append(component)

    def size(self) -> int:
        return sum(child.size() for child in self.children)