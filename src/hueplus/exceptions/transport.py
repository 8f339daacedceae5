"""Transport and device-state exceptions.

This module defines exceptions raised while talking to the controller:
- TransportError: Base class for serial transport failures
- TransportOpenError: The serial port could not be opened
- WriteError: A write (or its drain) failed
- DeviceStateError: Base class for "wrong state for this operation"
- NotConnectedError: Operation needs a completed handshake
- HandshakeTimeoutError: The device never signalled readiness
"""

from typing import Optional

from .base import HuePlusError


class TransportError(HuePlusError):
    """Serial transport operation failed."""

    def __init__(self, user_message: str, port: Optional[str] = None, **kwargs):
        """
        Initialize transport error.

        Args:
            user_message: User-friendly error message
            port: The transport address involved (if known)
        """
        super().__init__(user_message, **kwargs)
        self.port = port


class TransportOpenError(TransportError):
    """Serial port is unreachable or busy."""

    def __init__(self, port: Optional[str], original_error: Optional[str] = None):
        """
        Initialize transport-open error.

        Args:
            port: The address that failed to open
            original_error: The original error message from pyserial
        """
        user_msg = f"Could not open serial port {port}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        recovery = (
            "Check that the controller is plugged in, that the address is correct "
            "(e.g. /dev/ttyACM0 or COM3) and that no other program has the port open."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            port=port,
            recoverable=True,
            recovery_hint=recovery,
        )


class WriteError(TransportError):
    """Transport rejected or failed a write."""

    def __init__(
        self,
        port: Optional[str] = None,
        original_error: Optional[str] = None,
        num_bytes: Optional[int] = None,
    ):
        """
        Initialize write error.

        Args:
            port: The address being written to
            original_error: The original error message from pyserial
            num_bytes: Size of the write that failed
        """
        user_msg = "Failed to write to the lighting controller."
        tech_msg = f"Write of {num_bytes} byte(s) to {port} failed"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            port=port,
            recoverable=True,
            recovery_hint="Reconnect the device and try again.",
        )
        self.num_bytes = num_bytes


class DeviceStateError(HuePlusError):
    """Operation attempted while the device is in the wrong state."""
    pass


class NotConnectedError(DeviceStateError):
    """Operation requiring a completed handshake was attempted too early."""

    def __init__(self, operation: str = "update"):
        """
        Initialize not-connected error.

        Args:
            operation: Name of the operation that was refused
        """
        super().__init__(
            user_message=f"Cannot {operation} because the device is not connected.",
            recoverable=True,
            recovery_hint="Call connect() and wait for it to return first.",
        )
        self.operation = operation


class HandshakeTimeoutError(DeviceStateError):
    """Device never signalled readiness within the handshake timeout."""

    def __init__(self, port: Optional[str], timeout: float):
        """
        Initialize handshake timeout error.

        Args:
            port: The address being connected to
            timeout: Seconds waited before giving up
        """
        super().__init__(
            user_message=f"Device on {port} did not finish the handshake within {timeout:g}s.",
            recoverable=True,
            recovery_hint=(
                "Power-cycle the controller (unplug the USB cable) and try again. "
                "Increase the handshake timeout with 'hueplus config set --handshake-timeout'."
            ),
        )
        self.port = port
        self.timeout = timeout
