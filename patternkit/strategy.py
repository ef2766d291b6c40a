"""An input box whose validation rule is a hook or a swappable strategy."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from collections.abc import Iterable

ENTER_KEYS = frozenset({"\r", "\n"})


def _is_digit(char: str) -> bool:
    return len(char) == 1 and char in string.digits


class Validator(ABC):
    """Decides which keys an edit box accepts and when input is complete."""

    @abstractmethod
    def validate(self, text: str, char: str) -> bool:
        """Return True when char may be appended to text."""

    def is_complete(self, text: str) -> bool:
        return True


class LimitDigitValidator(Validator):
    """Accepts exactly limit digits."""

    def __init__(self, limit: int) -> None:
        self.limit = limit

    def validate(self, text: str, char: str) -> bool:
        return len(text) < self.limit and _is_digit(char)

    def is_complete(self, text: str) -> bool:
        return len(text) == self.limit


class Edit:
    """Reads keys into a string, echoing the ones the validation accepts."""

    def __init__(self, validator: Validator | None = None) -> None:
        self.validator = validator
        self.data = ""

    def set_validator(self, validator: Validator | None) -> None:
        self.validator = validator

    def validate(self, text: str, char: str) -> bool:
        """Accept char; subclasses override this, or a validator decides."""
        if self.validator is None:
            return True
        return self.validator.validate(text, char)

    def _is_complete(self, text: str) -> bool:
        return self.validator is None or self.validator.is_complete(text)

    def get_data(self, keys: Iterable[str]) -> str:
        """Consume keys until Enter on complete input; EOFError if keys run out."""
        self.data = ""
        for char in keys:
            if char in ENTER_KEYS and self._is_complete(self.data):
                print()
                return self.data
            if self.validate(self.data, char):
                self.data += char
                print(char, end="")
        raise EOFError("input ended before it was complete")


class NumEdit(Edit):
    """An edit box that accepts digits only."""

    def validate(self, text: str, char: str) -> bool:
        return _is_digit(char)