"""Separating the MP3 player users see from the devices that implement it."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MP3Device(ABC):
    """Implementation layer: a device able to play music."""

    @abstractmethod
    def play(self) -> None:
        """Start playing."""

    @abstractmethod
    def stop(self) -> None:
        """Stop playing."""


class IPod(MP3Device):
    """A device that tracks whether it is playing."""

    def __init__(self) -> None:
        self.playing = False

    def play(self) -> None:
        self.playing = True
        print("Play MP3 with IPod")

    def stop(self) -> None:
        self.playing = False
        print("Stop")


class MP3:
    """Abstraction layer that users talk to; forwards to a device."""

    def __init__(self, impl: MP3Device | None = None) -> None:
        self.impl = impl if impl is not None else IPod()

    def play(self) -> None:
        self.impl.play()

    def stop(self) -> None:
        self.impl.stop()

    def play_one_minute(self) -> None:
        """Preview: play, then stop once the minute is up."""
        self.impl.play()
        self.impl.stop()


class People:
    """A user of the player, coupled only to the abstraction."""

    def use(self, player: MP3) -> None:
        player.play()
        player.stop()
        player.play_one_minute()