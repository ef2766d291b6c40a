"""A TCP server facade over address and socket helpers."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass
from types import TracebackType

LISTEN_BACKLOG = 5


@dataclass(frozen=True)
class IPAddress:
    """An IPv4 address and port."""

    ip: str
    port: int

    def __post_init__(self) -> None:
        ipaddress.IPv4Address(self.ip)
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    @property
    def raw(self) -> tuple[str, int]:
        """The address in the form the socket module takes."""
        return (self.ip, self.port)


class Socket:
    """An IPv4 socket of the given type."""

    def __init__(self, kind: int = socket.SOCK_STREAM) -> None:
        self._sock = socket.socket(socket.AF_INET, kind)

    @property
    def address(self) -> tuple[str, int]:
        """The local address the socket is bound to."""
        return self._sock.getsockname()

    def bind(self, address: IPAddress) -> None:
        self._sock.bind(address.raw)

    def listen(self) -> None:
        self._sock.listen(LISTEN_BACKLOG)

    def accept(self) -> tuple[socket.socket, tuple[str, int]]:
        """Wait for a client; return its connection and address."""
        return self._sock.accept()

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> Socket:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class TCPServer:
    """Binds, listens and accepts in a single call."""

    def __init__(self) -> None:
        self._sock = Socket(socket.SOCK_STREAM)

    def start(self, ip: str, port: int) -> tuple[socket.socket, tuple[str, int]]:
        """Serve on ip:port and wait for one client; return its connection."""
        self._sock.bind(IPAddress(ip, port))
        self._sock.listen()
        return self._sock.accept()

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> TCPServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()