"""
Wire constants and byte helpers for the NZXT HUE+ controller.

Handshake
---------

::

    host                               device
     │  0xC0  (probe, every 3s)  ──────→ │
     │ ←──────────────────────  [0x01]   │  first answer, probing stops
     │  0x8D 0x01  (init)  ────────────→ │
     │ ←──────────────────  [0xC0, ...]  │  optional
     │  0x8C 0x00  (ack response) ─────→ │
     │ ←──────────────  [..., ..., 0x56] │  status burst ends in 0x56
     │                                   │  → ready

LED frame (125 bytes, one write)
--------------------------------

::

    [0x4B] [channel] [mode] [0x01] [0x02] [G R B] x 40
      │       │        │     └──┬──┘
      │       │        │     undocumented, required
      │       │        └─ 0x00 fixed, 0x07 breathing
      │       └─ 0x00 both, 0x01 strip 1, 0x02 strip 2
      └─ LED payload header

Each LED is sent as green, red, blue. The device shows wrong colours
if RGB order is used.
"""

from collections.abc import Iterable
from numbers import Integral

from hueplus.exceptions import InvalidColourError

# Handshake
PROBE = bytes([0xC0])
EXPECTED_ACK = 0x01
INIT_COMMAND = bytes([0x8D, 0x01])
ACK_PROBE_ECHO = 0xC0
ACK_RESPONSE = bytes([0x8C, 0x00])
READY_MARKER = 0x56

# Frames
FRAME_HEADER = 0x4B
FRAME_TRAILER = bytes([0x01, 0x02])
HEADER_LENGTH = 5
LEDS_PER_CHANNEL = 40
BYTES_PER_LED = 3
PAYLOAD_LENGTH = LEDS_PER_CHANNEL * BYTES_PER_LED
FRAME_LENGTH = HEADER_LENGTH + PAYLOAD_LENGTH


def to_byte(value, channel: str = "value") -> int:
    """
    Map a decimal colour value straight onto one byte.

    Args:
        value: Integer 0-255
        channel: Channel name used in the error message

    Raises:
        InvalidColourError: If value is not an integer in 0-255
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidColourError(channel, value)
    if not 0 <= value <= 255:
        raise InvalidColourError(channel, value)
    return int(value)


def colour_to_wire(red, green, blue) -> bytes:
    """Encode one LED as the three bytes the device expects (G, R, B)."""
    return bytes(
        (
            to_byte(green, "green"),
            to_byte(red, "red"),
            to_byte(blue, "blue"),
        )
    )


def format_chunk(data: Iterable[int]) -> str:
    """Hex dump for logging, e.g. '8d 01'."""
    return " ".join(f"{b:02x}" for b in data)
