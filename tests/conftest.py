"""Pytest fixtures for tests."""

import threading
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional

import pytest

from hueplus.devices.hueplus.commands import EXPECTED_ACK, READY_MARKER
from hueplus.exceptions import WriteError


class FakeTransport:
    """In-memory transport that records writes and lets tests push inbound chunks."""

    def __init__(self, port: str = "/dev/ttyFAKE0"):
        self._port = port
        self._open = False
        self._on_data = None
        self._cond = threading.Condition()
        self.writes: list[bytes] = []
        self.open_error: Optional[Exception] = None
        self.fail_on: Optional[bytes] = None
        self.open_calls = 0
        self.close_calls = 0
        self.reset_calls = 0

    @property
    def port(self) -> str:
        return self._port

    @property
    def is_open(self) -> bool:
        return self._open

    def on_data(self, callback) -> None:
        self._on_data = callback

    def open(self) -> None:
        self.open_calls += 1
        if self.open_error is not None:
            raise self.open_error
        self._open = True

    def write(self, data: bytes) -> None:
        if self.fail_on is not None and data == self.fail_on:
            raise WriteError(port=self._port, original_error="simulated", num_bytes=len(data))
        with self._cond:
            self.writes.append(bytes(data))
            self._cond.notify_all()

    def reset(self) -> None:
        self.reset_calls += 1

    def close(self) -> None:
        self.close_calls += 1
        self._open = False

    def feed(self, chunk) -> None:
        """Deliver an inbound chunk as the reader thread would."""
        self._on_data(bytes(chunk))

    def wait_for_writes(self, count: int, timeout: float = 2.0) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: len(self.writes) >= count, timeout)


class BackgroundConnect:
    """Runs a blocking connect() on a thread and keeps its outcome."""

    def __init__(self, target):
        self.error: Optional[Exception] = None
        self._target = target
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            self._target.connect()
        except Exception as e:
            self.error = e

    def join(self, timeout: float = 2.0) -> bool:
        """Wait for connect() to return. True if it did."""
        self._thread.join(timeout)
        return not self._thread.is_alive()


def complete_handshake(target, transport: FakeTransport) -> None:
    """Drive target (controller or HuePlus) to READY with the minimal reply sequence."""
    already_written = len(transport.writes)
    pending = BackgroundConnect(target)
    assert transport.wait_for_writes(already_written + 1)
    transport.feed([EXPECTED_ACK])
    transport.feed([0x00, READY_MARKER])
    assert pending.join()
    assert pending.error is None


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def transport():
    """Create a fake transport."""
    return FakeTransport()
