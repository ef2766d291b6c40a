"""Sharing identical images through a caching factory."""

from __future__ import annotations


class Image:
    """An image downloaded from a URL and drawn on screen."""

    def __init__(self, url: str) -> None:
        self.url = url
        print(f"{url} Downloading...")

    def draw(self) -> str:
        """Draw the image and return the text drawn."""
        text = f"Draw {self.url}"
        print(text)
        return text


class ImageFactory:
    """Hands out one shared Image per URL."""

    _instance: ImageFactory | None = None

    def __init__(self) -> None:
        self._images: dict[str, Image] = {}

    @classmethod
    def get_instance(cls) -> ImageFactory:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create(self, url: str) -> Image:
        image = self._images.get(url)
        if image is None:
            image = self._images[url] = Image(url)
        return image