"""A game character whose whole behaviour changes with the item it holds."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ItemState(ABC):
    """One full set of character actions; each action prints and returns its name."""

    @abstractmethod
    def run(self) -> str:
        """Run in this state's way."""

    @abstractmethod
    def attack(self) -> str:
        """Attack in this state's way."""


def _act(action: str) -> str:
    print(action)
    return action


class NoItem(ItemState):
    def run(self) -> str:
        return _act("run")

    def attack(self) -> str:
        return _act("attack")


class SuperItem(ItemState):
    def run(self) -> str:
        return _act("fast run")

    def attack(self) -> str:
        return _act("power attack")


class RedItem(ItemState):
    def run(self) -> str:
        return _act("slow run")

    def attack(self) -> str:
        return _act("weak attack")


class Character:
    """Keeps its data while its actions are swapped by changing state."""

    def __init__(self) -> None:
        self.gold = 0
        self.item = 0
        self._no_item = NoItem()
        self._super_item = SuperItem()
        self._red_item = RedItem()
        self.state: ItemState = self._no_item

    def run(self) -> str:
        return self.state.run()

    def attack(self) -> str:
        return self.state.attack()

    def acquire_super_item(self) -> None:
        self.state = self._super_item