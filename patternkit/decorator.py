"""Adding behaviour to existing objects by wrapping them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

EMOTICON_LINE = "@@@@@@@@@@@@@@"
FRAME_LINE = "##############"


class Drawable(ABC):
    """Anything that can be drawn, decorated or not."""

    @abstractmethod
    def draw(self) -> None:
        """Render the object."""


class PhotoSticker(Drawable):
    """A photo sticker that can be taken and printed."""

    def __init__(self) -> None:
        self.taken = False

    def take(self) -> None:
        self.taken = True
        print("take Photo")

    def draw(self) -> None:
        print("draw Photo")


class Decorator(Drawable):
    """Base of decorations: holds the wrapped object and where to draw."""

    def __init__(self, origin: Drawable) -> None:
        self.origin = origin
        self.x = 0
        self.y = 0

    def draw(self) -> None:
        self.origin.draw()


class Emoticon(Decorator):
    def draw(self) -> None:
        print(EMOTICON_LINE)
        super().draw()
        print(EMOTICON_LINE)


class Frame(Decorator):
    def draw(self) -> None:
        print(FRAME_LINE)
        super().draw()
        print(FRAME_LINE)


class Stream(ABC):
    """A destination that accepts text."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text to the stream."""


class FileStream(Stream):
    """A stream backed by an open file."""

    def __init__(self, path: str, mode: str = "wt") -> None:
        self._file = open(path, mode, encoding="utf-8")

    def write(self, text: str) -> None:
        print(f"{text} 쓰기")

    def close(self) -> None:
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def __enter__(self) -> FileStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ZipDecorator(Stream):
    """Compresses text before passing it on."""

    def __init__(self, origin: Stream) -> None:
        self.origin = origin

    def write(self, text: str) -> None:
        self.origin.write(f"[ {text}] 압축됨")


class EncryptDecorator(Stream):
    """Encrypts text before passing it on."""

    def __init__(self, origin: Stream) -> None:
        self.origin = origin

    def write(self, text: str) -> None:
        self.origin.write(f"[ {text}] 암호화됨")