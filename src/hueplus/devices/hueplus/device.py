"""
Caller-facing driver for the NZXT HUE+ lighting controller.

Usage Example
-------------

.. code-block:: python

    with HuePlus("/dev/ttyACM0") as hue:
        hue.set_all(Colour(red=255, green=0, blue=0))
        hue.update(Channel.BOTH)

        hue.set_led(1, Colour(red=100, green=0, blue=255))
        hue.update(Channel.TWO, Mode.BREATHING)

Colour setters only queue changes; nothing reaches the device until
update() is called.
"""

import logging
import time
from typing import Any, Optional

from hueplus.models import AppConfig, Channel, ConnectionState, Mode
from hueplus.transport import SerialTransport, Transport

from .frame import LedFrameEncoder
from .handshake import HandshakeController

logger = logging.getLogger(__name__)


class HuePlus:
    """
    Control the HUE+ over its serial port.

    Composes a serial transport, the handshake controller and the LED
    frame encoder behind one blocking API.
    """

    def __init__(
        self,
        port_address: str,
        config: Optional[AppConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Declare a device. The port is not opened until connect().

        Args:
            port_address: Serial address, e.g. /dev/ttyACM0 on Linux or COM3 on Windows
            config: Timing and transport settings (defaults if None)
            transport: Pre-built transport (defaults to a SerialTransport on port_address)
        """
        self.config = config or AppConfig()
        self.port_address = port_address

        self._transport = transport or SerialTransport(
            port_address,
            baud_rate=self.config.baud_rate,
            read_timeout=self.config.read_timeout,
            write_timeout=self.config.write_timeout,
        )
        self._controller = HandshakeController(
            self._transport,
            probe_interval=self.config.probe_interval,
            handshake_timeout=self.config.handshake_timeout,
            strict_disconnect=self.config.strict_disconnect,
        )
        self._encoder = LedFrameEncoder(self._controller)

        # The device may skip instructions if this is too low
        self.settle_period = self.config.settle_period

    # ================================================================
    # CONNECTION
    # ================================================================

    @property
    def is_connected(self) -> bool:
        """True once the handshake has completed."""
        return self._controller.is_connected

    @property
    def state(self) -> ConnectionState:
        """Current handshake state."""
        return self._controller.state

    def connect(self) -> None:
        """Connect to the device. Blocks until it is ready for frames."""
        logger.info(f"Connecting to HUE+ on {self.port_address}")
        self._controller.connect()

    def disconnect(self) -> None:
        """Disconnect from the device. Safe to call when never connected."""
        self._controller.disconnect()

    def reset_port(self) -> None:
        """Discard anything still buffered on the serial port."""
        self._controller.reset_port()

    # ================================================================
    # LED COLOURS
    # ================================================================

    @property
    def payload(self) -> bytes:
        """Queued colour payload (green, red, blue per LED)."""
        return self._encoder.payload

    def set_led(self, index: int, colour: Any) -> None:
        """Queue one LED colour. Applies on the next update()."""
        self._encoder.set_led(index, colour)

    def set_all(self, colour: Any) -> None:
        """Queue the same colour for all LEDs. Applies on the next update()."""
        self._encoder.set_all(colour)

    def reset(self) -> None:
        """Queue all LEDs off. Applies on the next update()."""
        self._encoder.reset()

    def update(self, channel: Channel | int, mode: Mode | int = Mode.FIXED) -> None:
        """
        Send the queued colours to a channel, then wait the settle period.

        Args:
            channel: The channel to update
            mode: The effect to update the channel with (default: fixed)

        Raises:
            NotConnectedError: If connect() has not completed
            WriteError: If the frame cannot be written
        """
        self._encoder.send_frame(channel, mode)
        if self.settle_period > 0:
            time.sleep(self.settle_period)

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
