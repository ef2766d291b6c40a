"""Graphs observing a table and redrawing when its data changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Graph(ABC):
    """An observer that knows the subject it is attached to."""

    def __init__(self) -> None:
        self.subject: Subject | None = None

    @abstractmethod
    def update(self, value: int) -> None:
        """React to a change in the subject."""


class Subject:
    """Keeps a list of graphs and tells them about changes."""

    def __init__(self) -> None:
        self._graphs: list[Graph] = []

    @property
    def graphs(self) -> list[Graph]:
        return list(self._graphs)

    def attach(self, graph: Graph) -> None:
        self._graphs.append(graph)
        graph.subject = self

    def detach(self, graph: Graph) -> None:
        """Stop notifying graph; ValueError if it is not attached."""
        self._graphs.remove(graph)
        graph.subject = None

    def notify(self, value: int) -> None:
        for graph in self._graphs:
            graph.update(value)


class Table(Subject):
    """A table of data whose edits are announced to attached graphs."""

    def __init__(self) -> None:
        super().__init__()
        self.value = 0
        self.data = [1, 2, 3, 4, 5]

    def edit(self, values: Iterable[int]) -> None:
        """Take each value in turn as the table's new value and notify graphs."""
        for value in values:
            self.value = value
            self.notify(value)


class BarGraph(Graph):
    """Draws a bar of stars, reading the table's data on every update."""

    def __init__(self) -> None:
        super().__init__()
        self.data: list[int] = []

    def update(self, value: int) -> None:
        if isinstance(self.subject, Table):
            self.data = list(self.subject.data)
        print("Bar Graph : " + "*" * value)


class PieGraph(Graph):
    def update(self, value: int) -> None:
        print("Pie Graph : " + ")" * value)