"""Connection handshake state machine for the HUE+ controller."""

import logging
import threading
from typing import Callable, Optional

from hueplus.exceptions import (
    DeviceStateError,
    HandshakeTimeoutError,
    HuePlusError,
    NotConnectedError,
    TransportError,
    WriteError,
)
from hueplus.models import ConnectionState
from hueplus.transport import Transport

from .commands import (
    ACK_PROBE_ECHO,
    ACK_RESPONSE,
    EXPECTED_ACK,
    INIT_COMMAND,
    PROBE,
    READY_MARKER,
    format_chunk,
)

logger = logging.getLogger(__name__)


class ProbeTimer:
    """Calls a function every `interval` seconds on a daemon thread until stopped."""

    def __init__(self, interval: float, callback: Callable[[], None]):
        self._interval = interval
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_active(self) -> bool:
        """True while the timer thread is running."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start ticking. The first tick happens after one interval."""
        if self.is_active:
            logger.warning("ProbeTimer is already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="hueplus-probe", daemon=True)
        self._thread.start()
        logger.debug(f"Probe timer started ({self._interval}s)")

    def stop(self) -> None:
        """Stop ticking and wait for an in-flight tick to finish."""
        self._stop_event.set()

        thread = self._thread
        self._thread = None
        if thread and thread.is_alive() and thread is not threading.current_thread():
            thread.join()
        logger.debug("Probe timer stopped")

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            self._callback()


class HandshakeController:
    """
    Brings the controller from "port just opened" to "ready for frames".

    State machine::

        IDLE ──connect()──→ PROBING ──first chunk──→ AWAITING_INIT ──chunk ending 0x56──→ READY
                             │ probe 0xC0 now           │ stop probe timer                 │ connect() returns
                             │ and every interval       │ send 0x8D 0x01                   │
                                                        │ chunk starting 0xC0:
                                                        │   send 0x8C 0x00, stay

    Inbound chunks arrive on the transport's reader thread; the probe
    timer ticks on its own thread. All transitions happen under one lock,
    so chunks and timer stops are applied in delivery order. The device
    streams its status burst in arbitrary chunks, so only the last byte of
    each chunk is checked for the ready marker.
    """

    def __init__(
        self,
        transport: Transport,
        probe_interval: float = 3.0,
        handshake_timeout: Optional[float] = None,
        strict_disconnect: bool = False,
    ):
        """
        Initialize handshake controller.

        Args:
            transport: Byte duplex to the device (not yet open)
            probe_interval: Seconds between probe bytes while waiting for the device
            handshake_timeout: Seconds connect() waits for readiness (None = forever)
            strict_disconnect: Raise NotConnectedError when disconnecting before ready
        """
        self._transport = transport
        self._probe_interval = probe_interval
        self._handshake_timeout = handshake_timeout
        self._strict_disconnect = strict_disconnect

        self._lock = threading.RLock()
        self._state = ConnectionState.IDLE
        self._probe_timer: Optional[ProbeTimer] = None
        self._done = threading.Event()
        self._failure: Optional[HuePlusError] = None

        self._transport.on_data(self._handle_data)

    # ================================================================
    # PUBLIC API
    # ================================================================

    @property
    def state(self) -> ConnectionState:
        """Current handshake state."""
        with self._lock:
            return self._state

    @property
    def is_connected(self) -> bool:
        """True once the device has signalled readiness."""
        with self._lock:
            return self._state is ConnectionState.READY

    @property
    def is_probing(self) -> bool:
        """True while the probe timer is running."""
        with self._lock:
            return self._probe_timer is not None and self._probe_timer.is_active

    def connect(self) -> None:
        """
        Open the transport and block until the device is ready.

        Raises:
            TransportOpenError: If the port cannot be opened (no retry)
            WriteError: If a handshake byte cannot be written
            HandshakeTimeoutError: If the device stays silent past the timeout
            DeviceStateError: If another connect() is already in progress
        """
        with self._lock:
            if self._state is ConnectionState.READY:
                logger.warning("Already connected to the device")
                return
            if self._state is not ConnectionState.IDLE:
                raise DeviceStateError(
                    "A connection attempt is already in progress.",
                    technical_message=f"connect() called in state {self._state.value}",
                )

            self._done.clear()
            self._failure = None
            self._state = ConnectionState.PROBING

            try:
                self._transport.open()
            except TransportError:
                self._state = ConnectionState.IDLE
                raise

            logger.info("Waiting for device...")
            self._probe_timer = ProbeTimer(self._probe_interval, self._probe_tick)
            self._probe_timer.start()

            probe_error: Optional[WriteError] = None
            try:
                self._send_probe()
            except WriteError as e:
                probe_error = e

        if probe_error is not None:
            self._abort()
            raise probe_error

        if not self._done.wait(self._handshake_timeout):
            logger.error(f"Device did not become ready within {self._handshake_timeout}s")
            self._abort()
            raise HandshakeTimeoutError(self._transport.port, self._handshake_timeout)

        with self._lock:
            if self._state is ConnectionState.READY:
                return
            failure = self._failure

        self._abort()
        raise failure or DeviceStateError("Handshake ended without the device becoming ready.")

    def disconnect(self) -> None:
        """
        Close the transport.

        Disconnecting a device that never connected does nothing unless
        strict_disconnect was requested.
        """
        logger.info("Disconnecting...")

        with self._lock:
            if self._state is not ConnectionState.READY:
                if self._strict_disconnect:
                    raise NotConnectedError("disconnect")
                logger.info("Never connected to the device.")
                return

            self._state = ConnectionState.IDLE
            self._done.clear()

        self._transport.close()

    def send_raw(self, data: bytes) -> None:
        """
        Write bytes to the device and wait until they are drained.

        Raises:
            WriteError: If the transport write fails
        """
        data = bytes(data)
        logger.debug(f"<- {format_chunk(data)}")
        self._transport.write(data)

    def reset_port(self) -> None:
        """Discard pending transport buffers."""
        self._transport.reset()

    # ================================================================
    # TRANSITIONS
    # ================================================================

    def _handle_data(self, chunk: bytes) -> None:
        """Feed one inbound chunk to the state machine."""
        if not chunk:
            return

        logger.debug(f"-> {format_chunk(chunk)}")

        with self._lock:
            if self._state is ConnectionState.PROBING:
                self._on_first_response(chunk)
            elif self._state is ConnectionState.AWAITING_INIT:
                self._on_init_reply(chunk)
            else:
                logger.debug(f"Ignoring {len(chunk)} byte(s) received while {self._state.value}")

    def _on_first_response(self, chunk: bytes) -> None:
        logger.info("Device is sending activity. Preparing it")
        self._stop_probing()

        if chunk[0] == EXPECTED_ACK:
            logger.info("Expected result, int 1")
        else:
            logger.warning(
                f"Unexpected probe answer 0x{chunk[0]:02x}; the device may have "
                "rejected an earlier init command"
            )

        self._state = ConnectionState.AWAITING_INIT
        logger.info(f"Sending init command {format_chunk(INIT_COMMAND)}")
        try:
            self.send_raw(INIT_COMMAND)
        except WriteError as e:
            self._fail(e)

    def _on_init_reply(self, chunk: bytes) -> None:
        if chunk[0] == ACK_PROBE_ECHO:
            logger.info(f"Device sent 0xc0. Sending {format_chunk(ACK_RESPONSE)}")
            try:
                self.send_raw(ACK_RESPONSE)
            except WriteError as e:
                self._fail(e)
            return

        if chunk[-1] == READY_MARKER:
            self._state = ConnectionState.READY
            logger.info("Connected to the device. Ready to send payload.")
            self._done.set()

    def _send_probe(self) -> None:
        self.send_raw(PROBE)
        logger.info("Pinged device with 0xc0")

    def _probe_tick(self) -> None:
        logger.info("Still waiting on device...")
        try:
            self._send_probe()
        except WriteError as e:
            logger.error(f"Probe failed: {e.technical_message}")
            self._fail(e)

    def _stop_probing(self) -> None:
        if self._probe_timer is not None:
            self._probe_timer.stop()
            self._probe_timer = None

    def _fail(self, error: HuePlusError) -> None:
        """Fail the pending connect() with error. Does not take the state lock."""
        if self._failure is None:
            self._failure = error
        self._done.set()

    def _abort(self) -> None:
        """Tear down a connection attempt that did not reach READY."""
        with self._lock:
            self._stop_probing()
            self._state = ConnectionState.IDLE

        try:
            self._transport.close()
        except TransportError as e:
            logger.error(f"Error closing transport after failed handshake: {e.technical_message}")
