"""pyserial-backed transport with a background reader thread."""

import logging
import threading
from typing import Optional

import serial

from hueplus.exceptions import TransportError, WriteError, wrap_serial_error
from hueplus.transport.protocols import DataCallback

logger = logging.getLogger(__name__)

DEFAULT_BAUD_RATE = 256000


class SerialTransport:
    """
    Serial duplex to the lighting controller.

    The port is configured at construction but not opened until
    open() is called. While open, a daemon thread reads whatever bytes
    are waiting and hands each chunk to the registered callback.
    """

    def __init__(
        self,
        port: str,
        baud_rate: int = DEFAULT_BAUD_RATE,
        read_timeout: float = 0.1,
        write_timeout: Optional[float] = 2.0,
    ):
        """
        Initialize serial transport.

        Args:
            port: Serial address (e.g. /dev/ttyACM0 or COM3)
            baud_rate: Line speed
            read_timeout: How long a single read may block (seconds)
            write_timeout: How long a single write may block (seconds)
        """
        # Passing no port to the constructor keeps pyserial from opening it
        self._serial = serial.Serial()
        self._serial.port = port
        self._serial.baudrate = baud_rate
        self._serial.timeout = read_timeout
        self._serial.write_timeout = write_timeout

        self._port = port
        self._running = False
        self._reader_thread: Optional[threading.Thread] = None
        self._write_lock = threading.Lock()
        self._on_data: Optional[DataCallback] = None

    @property
    def port(self) -> str:
        """Serial address."""
        return self._port

    @property
    def is_open(self) -> bool:
        """True while the port is open."""
        return self._serial.is_open

    def on_data(self, callback: Optional[DataCallback]) -> None:
        """
        Register callback for inbound chunks.

        Args:
            callback: Function that receives each chunk of bytes read
        """
        self._on_data = callback

    def open(self) -> None:
        """Open the port and start the reader thread."""
        if self._serial.is_open:
            logger.warning(f"Serial port {self._port} is already open")
            return

        try:
            self._serial.open()
        except (serial.SerialException, OSError, ValueError) as e:
            logger.error(f"Failed to open serial port {self._port}: {e}")
            raise wrap_serial_error(e, port=self._port, opening=True) from e

        logger.info(f"Opened serial port {self._port} at {self._serial.baudrate} baud")

        self._running = True
        self._reader_thread = threading.Thread(
            target=self._read_loop, name=f"serial-reader-{self._port}", daemon=True
        )
        self._reader_thread.start()

    def write(self, data: bytes) -> None:
        """Write bytes and wait until they are physically sent."""
        with self._write_lock:
            if not self._serial.is_open:
                raise WriteError(
                    port=self._port, original_error="port is not open", num_bytes=len(data)
                )
            try:
                self._serial.write(data)
                self._serial.flush()
            except (serial.SerialException, OSError) as e:
                logger.error(f"Error writing {len(data)} byte(s) to {self._port}: {e}")
                raise wrap_serial_error(e, port=self._port, num_bytes=len(data)) from e

    def reset(self) -> None:
        """Discard anything still buffered in either direction."""
        try:
            self._serial.reset_input_buffer()
            self._serial.reset_output_buffer()
        except (serial.SerialException, OSError) as e:
            logger.error(f"Error resetting serial port {self._port}: {e}")
            raise TransportError(
                f"Could not reset serial port {self._port}.",
                technical_message=f"Buffer reset on {self._port} failed: {e}",
                port=self._port,
            ) from e
        logger.debug(f"Reset buffers on {self._port}")

    def close(self) -> None:
        """Stop the reader thread and close the port."""
        self._running = False

        if self._serial.is_open:
            try:
                self._serial.close()
            except (serial.SerialException, OSError) as e:
                logger.error(f"Error closing serial port {self._port}: {e}")
                raise TransportError(
                    f"Could not close serial port {self._port}.",
                    technical_message=f"Close of {self._port} failed: {e}",
                    port=self._port,
                ) from e
            logger.info(f"Closed serial port {self._port}")

        reader = self._reader_thread
        self._reader_thread = None
        if reader and reader.is_alive() and reader is not threading.current_thread():
            reader.join(timeout=1.0)

    def _read_loop(self) -> None:
        """Read inbound chunks until the port closes."""
        logger.debug(f"Reader thread started for {self._port}")

        while self._running:
            try:
                data = self._serial.read(self._serial.in_waiting or 1)
            except (serial.SerialException, OSError, TypeError) as e:
                # pyserial raises on read when close() races the reader
                if self._running:
                    logger.error(f"Error reading from {self._port}: {e}")
                break

            if not data or not self._running:
                continue

            callback = self._on_data
            if callback is None:
                logger.debug(f"Dropping {len(data)} byte(s) with no data callback")
                continue

            try:
                callback(data)
            except Exception as e:
                logger.exception(f"Error in data callback: {e}")

        logger.debug(f"Reader thread stopped for {self._port}")

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
