"""Look-and-feel widgets built through abstract factories and factory methods."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

OSX_OPTION = "-style:OSX"


class Button(ABC):
    """Common base of every button control."""

    @abstractmethod
    def draw(self) -> str:
        """Render the button and return the text it drew."""


class Edit(ABC):
    """Common base of every edit control."""

    @abstractmethod
    def draw(self) -> str:
        """Render the edit box and return the text it drew."""


class WinButton(Button):
    def draw(self) -> str:
        text = "Draw WinButton"
        print(text)
        return text


class WinEdit(Edit):
    def draw(self) -> str:
        text = "Draw WinEdit"
        print(text)
        return text


class OSXButton(Button):
    def draw(self) -> str:
        text = "Draw OSXButton"
        print(text)
        return text


class OSXEdit(Edit):
    def draw(self) -> str:
        text = "Draw OSXButton"
        print(text)
        return text


class WidgetFactory(ABC):
    """Creates a family of controls sharing one style."""

    @abstractmethod
    def create_button(self) -> Button:
        """Return a new button of this factory's style."""

    @abstractmethod
    def create_edit(self) -> Edit:
        """Return a new edit box of this factory's style."""


class WinFactory(WidgetFactory):
    def create_button(self) -> Button:
        return WinButton()

    def create_edit(self) -> Edit:
        return WinEdit()


class OSXFactory(WidgetFactory):
    def create_button(self) -> Button:
        return OSXButton()

    def create_edit(self) -> Edit:
        return OSXEdit()


def factory_for_option(option: str) -> WidgetFactory:
    """Pick the factory for a command-line style option."""
    if option == OSX_OPTION:
        return OSXFactory()
    return WinFactory()


class BaseDialog(ABC):
    """A dialog whose controls come from factory methods chosen by subclasses."""

    def init(self) -> None:
        button = self.create_button()
        edit = self.create_edit()
        button.draw()
        edit.draw()

    @abstractmethod
    def create_button(self) -> Button:
        """Return the button this dialog uses."""

    @abstractmethod
    def create_edit(self) -> Edit:
        """Return the edit box this dialog uses."""


class WinDialog(BaseDialog):
    def create_button(self) -> Button:
        return WinButton()

    def create_edit(self) -> Edit:
        return WinEdit()


class OSXDialog(BaseDialog):
    def create_button(self) -> Button:
        return OSXButton()

    def create_edit(self) -> Edit:
        return OSXEdit()


@dataclass(frozen=True)
class Style:
    """Names the control classes that make up one style."""

    button: type[Button]
    edit: type[Edit]


WIN_STYLE = Style(button=WinButton, edit=WinEdit)
OSX_STYLE = Style(button=OSXButton, edit=OSXEdit)


class StyledDialog:
    """A dialog parameterised by a Style instead of by subclassing."""

    def __init__(self, style: Style) -> None:
        self.style = style

    def init(self) -> None:
        button = self.style.button()
        edit = self.style.edit()
        button.draw()
        edit.draw()


def main(argv: list[str] | None = None) -> int:
    """Draw a button in the style chosen on the command line."""
    args = sys.argv[1:] if argv is None else argv
    option = args[0] if args else ""
    factory = factory_for_option(option)
    factory.create_button().draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())