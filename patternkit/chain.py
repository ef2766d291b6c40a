"""Passing a request along a chain until some handler takes care of it."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Handler(ABC):
    """A link in a chain: tries a problem itself, else passes it on."""

    def __init__(self, next_handler: Handler | None = None) -> None:
        self.next = next_handler

    def handle(self, problem: int) -> bool:
        """Resolve the problem here or further along; report whether anyone did."""
        if self.handle_request(problem):
            return True
        if self.next is not None:
            return self.next.handle(problem)
        return False

    @abstractmethod
    def handle_request(self, problem: int) -> bool:
        """Try to resolve the problem; return True when resolved."""


class Team1(Handler):
    def handle_request(self, problem: int) -> bool:
        print("Start Team1")
        if problem == 7:
            print("Resolved by Team1")
            return True
        return False


class Team2(Handler):
    def handle_request(self, problem: int) -> bool:
        print("Start Team2")
        if problem % 2 == 0:
            print("Resolved by Team2")
            return True
        return False


class Team3(Handler):
    def handle_request(self, problem: int) -> bool:
        print("Start Team3")
        if problem < 10:
            print("Resolved by Team3")
            return True
        return False


class Window:
    """A window in a parent/child tree whose clicks bubble up to parents."""

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.parent: Window | None = None
        self.children: list[Window] = []

    def add_child(self, child: Window) -> None:
        child.parent = self
        self.children.append(child)

    def fire_lbutton_down(self) -> bool:
        """Offer a click to this window, then to its ancestors; report if handled."""
        if self.lbutton_down():
            return True
        if self.parent is not None:
            return self.parent.fire_lbutton_down()
        return False

    def lbutton_down(self) -> bool:
        """Handle a left click; return True to stop it reaching the parent."""
        return False

    def key_down(self) -> bool:
        """Handle a key press; return True when handled. The default ignores it."""
        return False