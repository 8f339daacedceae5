"""LED colour payload and frame builder."""

import logging
from collections.abc import Mapping
from numbers import Integral
from typing import TYPE_CHECKING, Any, Optional

from hueplus.exceptions import IndexOutOfRangeError, InvalidColourError, NotConnectedError
from hueplus.models import Channel, Colour, Mode

from .commands import (
    BYTES_PER_LED,
    FRAME_HEADER,
    FRAME_TRAILER,
    LEDS_PER_CHANNEL,
    PAYLOAD_LENGTH,
    colour_to_wire,
    format_chunk,
)

if TYPE_CHECKING:
    from .handshake import HandshakeController

logger = logging.getLogger(__name__)


class LedFrameEncoder:
    """
    Holds the colour of every LED slot and serializes it into frames.

    The 120-byte payload lives as long as the encoder and is only ever
    overwritten in place, so colours set before one update carry over
    to the next. Setters validate everything before touching the
    payload: a rejected call leaves it unchanged.
    """

    def __init__(self, controller: Optional["HandshakeController"] = None):
        """
        Initialize encoder with all LEDs off.

        Args:
            controller: Connection used by send_frame (None for pure encoding)
        """
        self._payload = bytearray(PAYLOAD_LENGTH)
        self._controller = controller

    @property
    def payload(self) -> bytes:
        """Copy of the current colour payload (green, red, blue per LED)."""
        return bytes(self._payload)

    def set_led(self, index: int, colour: Any) -> None:
        """
        Queue a colour for one LED. Applies on the next frame.

        Args:
            index: LED slot (0-39)
            colour: Colour, mapping with red/green/blue keys or (r, g, b) tuple

        Raises:
            IndexOutOfRangeError: If index is not an integer in 0-39
            InvalidColourError: If any channel is outside 0-255 or not a number
        """
        offset = self._slot_offset(index)
        self._payload[offset:offset + BYTES_PER_LED] = self._wire_colour(colour)

    def set_all(self, colour: Any) -> None:
        """Queue the same colour for all 40 LEDs."""
        wire = self._wire_colour(colour)
        self._payload[:] = wire * LEDS_PER_CHANNEL

    def reset(self) -> None:
        """Queue all LEDs off."""
        self.set_all(Colour.off())

    def build_frame(self, channel: Channel | int, mode: Mode | int = Mode.FIXED) -> bytes:
        """
        Build the 125-byte LED update frame.

        Args:
            channel: Strip group to address
            mode: Rendering effect

        Returns:
            Header [0x4B, channel, mode, 0x01, 0x02] followed by the payload
        """
        channel = Channel(channel)
        mode = Mode(mode)
        header = bytes([FRAME_HEADER, channel.value, mode.value]) + FRAME_TRAILER
        return header + bytes(self._payload)

    def send_frame(self, channel: Channel | int, mode: Mode | int = Mode.FIXED) -> None:
        """
        Send the current payload to the device.

        Raises:
            NotConnectedError: If the handshake has not completed
            WriteError: If the transport write fails
        """
        if self._controller is None or not self._controller.is_connected:
            raise NotConnectedError("send LED frame")

        frame = self.build_frame(channel, mode)
        logger.info(f"Sending LED frame to {Channel(channel).name} ({Mode(mode).name})")
        logger.debug(f"Frame header: {format_chunk(frame[:5])}")
        self._controller.send_raw(frame)

    @staticmethod
    def _slot_offset(index: Any) -> int:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise IndexOutOfRangeError(index, LEDS_PER_CHANNEL - 1)
        if not 0 <= index < LEDS_PER_CHANNEL:
            raise IndexOutOfRangeError(index, LEDS_PER_CHANNEL - 1)
        return int(index) * BYTES_PER_LED

    @staticmethod
    def _wire_colour(colour: Any) -> bytes:
        if isinstance(colour, (Mapping, tuple, list)):
            colour = Colour.coerce(colour)
        try:
            red, green, blue = colour.red, colour.green, colour.blue
        except AttributeError:
            raise InvalidColourError("value", colour) from None
        return colour_to_wire(red, green, blue)
