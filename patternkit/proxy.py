"""A caching stand-in for a slow name resolver."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

RESOLVED_ADDRESS = "100.100.100.100"
KNOWN_HOSTS = {"www.samsung.com": RESOLVED_ADDRESS}


class Resolver(ABC):
    """Turns a host name into an IP address."""

    @abstractmethod
    def resolve(self, url: str) -> str:
        """Return the IP address for url."""


class DNS(Resolver):
    """Asks the server every time, which is slow."""

    def __init__(self, delay: float = 3.0) -> None:
        self.delay = delay

    def resolve(self, url: str) -> str:
        print(f"서버에 접속해서 {url}에 대한 IP 정보 얻는중")
        time.sleep(self.delay)
        return RESOLVED_ADDRESS


class DNSProxy(Resolver):
    """Answers known hosts locally and asks the real resolver otherwise."""

    def __init__(
        self,
        backend: Resolver | None = None,
        known: dict[str, str] | None = None,
    ) -> None:
        self.backend = backend if backend is not None else DNS()
        self.known = dict(KNOWN_HOSTS if known is None else known)

    def resolve(self, url: str) -> str:
        address = self.known.get(url)
        if address is not None:
            return address
        return self.backend.resolve(url)