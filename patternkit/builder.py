"""Building a game character through interchangeable part builders."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod

DEFAULT_PARTS = ("야구모자", "파란색티셔츠", "운동화")


class CharacterBuilder(ABC):
    """Makes the individual parts of a character."""

    @abstractmethod
    def make_hat(self) -> str:
        """Return the hat part."""

    @abstractmethod
    def make_uniform(self) -> str:
        """Return the uniform part."""

    @abstractmethod
    def make_shoes(self) -> str:
        """Return the shoes part."""


class Korean(CharacterBuilder):
    def make_hat(self) -> str:
        return "갓\n"

    def make_uniform(self) -> str:
        return "한복\n"

    def make_shoes(self) -> str:
        return "짚신\n"


class American(CharacterBuilder):
    def make_hat(self) -> str:
        return "야구모자\n"

    def make_uniform(self) -> str:
        return "양복\n"

    def make_shoes(self) -> str:
        return "구두\n"


class Director:
    """Runs the fixed construction process, delegating parts to a builder."""

    def __init__(self, builder: CharacterBuilder | None = None) -> None:
        self.builder = builder

    def set_builder(self, builder: CharacterBuilder) -> None:
        self.builder = builder

    def construct(self) -> str:
        if self.builder is None:
            return "".join(DEFAULT_PARTS)
        return (
            self.builder.make_hat()
            + self.builder.make_uniform()
            + self.builder.make_shoes()
        )


_BUILDERS = {"korean": Korean, "american": American}


def main(argv: list[str] | None = None) -> int:
    """Print a character built with the chosen nationality's builder."""
    parser = argparse.ArgumentParser(description="Build a game character.")
    parser.add_argument("nationality", nargs="?", choices=sorted(_BUILDERS), default="korean")
    args = parser.parse_args(argv)
    director = Director()
    director.set_builder(_BUILDERS[args.nationality]())
    print(director.construct())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())