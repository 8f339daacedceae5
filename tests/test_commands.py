"""Unit tests for wire constants and byte helpers."""

import pytest

from hueplus.devices.hueplus import commands
from hueplus.exceptions import InvalidColourError


@pytest.mark.unit
class TestByteHelpers:
    """Test byte conversion helpers."""

    @pytest.mark.parametrize("value,expected", [(0, 0x00), (1, 0x01), (128, 0x80), (255, 0xFF)])
    def test_to_byte_direct_mapping(self, value, expected):
        """Test decimal values map straight onto bytes with no gamma or clamping."""
        assert commands.to_byte(value) == expected

    @pytest.mark.parametrize("value", [-1, 256, 1000, float("nan"), 3.0, "7", None, False])
    def test_to_byte_rejects(self, value):
        """Test values outside 0-255 or not integers are rejected, never clamped."""
        with pytest.raises(InvalidColourError):
            commands.to_byte(value, "red")

    def test_colour_to_wire_is_grb(self):
        """Test one LED encodes as green, red, blue."""
        assert commands.colour_to_wire(red=1, green=2, blue=3) == bytes([2, 1, 3])

    def test_format_chunk(self):
        """Test hex dumps used in log lines."""
        assert commands.format_chunk(b"\x8d\x01") == "8d 01"
        assert commands.format_chunk(b"") == ""


@pytest.mark.unit
class TestFrameLayout:
    """Test frame size constants."""

    def test_sizes(self):
        """Test 5-byte header + 40 LEDs x 3 bytes."""
        assert commands.HEADER_LENGTH == 5
        assert commands.PAYLOAD_LENGTH == 120
        assert commands.FRAME_LENGTH == 125

    def test_markers(self):
        """Test frame and handshake marker bytes."""
        assert commands.FRAME_HEADER == 0x4B
        assert commands.FRAME_TRAILER == b"\x01\x02"
        assert commands.READY_MARKER == 0x56
        assert commands.EXPECTED_ACK == 0x01
