"""Byte transport protocol consumed by the handshake controller."""

from typing import Callable, Optional, Protocol

DataCallback = Callable[[bytes], None]


class Transport(Protocol):
    """
    Byte duplex to the controller.

    Inbound data is delivered through the registered callback as
    arbitrary-length chunks, in arrival order. Chunk boundaries carry no
    meaning.
    """

    @property
    def port(self) -> Optional[str]:
        """Transport address."""
        ...

    @property
    def is_open(self) -> bool:
        """True while the duplex is open."""
        ...

    def on_data(self, callback: Optional[DataCallback]) -> None:
        """Register the inbound chunk callback (None to clear)."""
        ...

    def open(self) -> None:
        """
        Open the duplex and start delivering inbound chunks.

        Raises:
            TransportOpenError: If the port cannot be opened
        """
        ...

    def write(self, data: bytes) -> None:
        """
        Write bytes and block until they are drained.

        Raises:
            WriteError: If the write or drain fails
        """
        ...

    def reset(self) -> None:
        """Discard pending input and output buffers."""
        ...

    def close(self) -> None:
        """Close the duplex. Closing a closed transport does nothing."""
        ...
