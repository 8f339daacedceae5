"""Tests for the exception hierarchy and handlers."""

import pytest
import serial

from hueplus.exceptions import (
    HandshakeTimeoutError,
    HuePlusError,
    IndexOutOfRangeError,
    NotConnectedError,
    TransportError,
    TransportOpenError,
    WriteError,
    format_error_for_display,
    wrap_serial_error,
)


@pytest.mark.unit
class TestHierarchy:
    """Test exception types and messages."""

    def test_all_derive_from_base(self):
        """Test every error can be caught as HuePlusError."""
        for error in (
            TransportOpenError(port="/dev/x"),
            WriteError(port="/dev/x"),
            NotConnectedError(),
            HandshakeTimeoutError(port="/dev/x", timeout=1.0),
            IndexOutOfRangeError(40),
        ):
            assert isinstance(error, HuePlusError)

    def test_transport_open_error(self):
        """Test open errors keep the port and original error."""
        error = TransportOpenError(port="COM3", original_error="Access is denied")

        assert error.port == "COM3"
        assert "COM3" in str(error)
        assert "Access is denied" in error.technical_message
        assert error.recoverable

    def test_full_message_includes_hint(self):
        """Test get_full_message appends the recovery hint."""
        error = NotConnectedError("update")

        assert "Cannot update" in error.get_full_message()
        assert "Suggestion: Call connect()" in error.get_full_message()


@pytest.mark.unit
class TestHandlers:
    """Test error conversion helpers."""

    def test_wrap_serial_error_on_open(self):
        """Test open failures become TransportOpenError."""
        wrapped = wrap_serial_error(serial.SerialException("busy"), port="/dev/x", opening=True)

        assert isinstance(wrapped, TransportOpenError)
        assert "busy" in wrapped.technical_message

    def test_wrap_serial_error_on_write(self):
        """Test write failures become WriteError."""
        wrapped = wrap_serial_error(serial.SerialTimeoutException("Write timeout"), port="/dev/x", num_bytes=125)

        assert isinstance(wrapped, WriteError)
        assert wrapped.num_bytes == 125

    def test_wrap_serial_error_passthrough(self):
        """Test already-wrapped errors are returned unchanged."""
        error = WriteError(port="/dev/x")

        assert wrap_serial_error(error) is error

    def test_format_custom_error(self):
        """Test formatting of hueplus errors."""
        message, hint = format_error_for_display(TransportError("broken", recovery_hint="fix it"))

        assert message == "broken"
        assert hint == "fix it"

    def test_format_standard_error(self):
        """Test formatting of other exceptions."""
        message, hint = format_error_for_display(ValueError("nope"))

        assert message == "ValueError: nope"
        assert hint is None
