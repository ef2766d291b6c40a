"""Controls that report changes to a mediator, and a keyed notification centre."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable
from typing import Any, Union

ENABLED_MESSAGE = "버튼 Enable"
DISABLED_MESSAGE = "버튼 disable"


class Mediator(ABC):
    """Told whenever one of its colleagues changes state."""

    @abstractmethod
    def change_state(self) -> None:
        """React to a colleague's change."""


class CheckBox:
    """A check box colleague that notifies its mediator on every change."""

    def __init__(self) -> None:
        self.checked = False
        self.mediator: Mediator | None = None

    def set_mediator(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def set_check(self, checked: bool) -> None:
        self.checked = checked
        self.change_state()
        if self.mediator is not None:
            self.mediator.change_state()

    def change_state(self) -> bool:
        """Hook run after every change; returns the new checked state."""
        return self.checked


class RadioBox:
    """A radio box colleague that notifies its mediator on every change."""

    def __init__(self) -> None:
        self.checked = False
        self.mediator: Mediator | None = None

    def set_mediator(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def set_check(self, checked: bool) -> None:
        self.checked = checked
        self.change_state()
        if self.mediator is not None:
            self.mediator.change_state()

    def change_state(self) -> bool:
        """Hook run after every change; returns the new checked state."""
        return self.checked


_Control = Union[CheckBox, RadioBox]


class LoginMediator(Mediator):
    """Enables the login button only when every control is checked."""

    def __init__(self, c1: CheckBox, c2: CheckBox, r1: RadioBox, r2: RadioBox) -> None:
        self.controls: tuple[_Control, ...] = (c1, c2, r1, r2)
        self.enabled = False
        for control in self.controls:
            control.set_mediator(self)

    def change_state(self) -> None:
        self.enabled = all(control.checked for control in self.controls)
        print(ENABLED_MESSAGE if self.enabled else DISABLED_MESSAGE)


class NotificationCenter:
    """Calls every handler registered under a name when that name is posted."""

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Callable[[Any], object]]] = defaultdict(list)

    def add_observer(self, key: str, handler: Callable[[Any], object]) -> None:
        self._handlers[key].append(handler)

    def post_notification(self, key: str, hint: Any = None) -> None:
        """Call the handlers for key, in registration order, with hint."""
        for handler in list(self._handlers.get(key, ())):
            handler(hint)