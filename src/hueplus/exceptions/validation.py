"""LED input validation exceptions.

Raised synchronously by the frame encoder before any payload byte changes:
- LedValidationError: Base class for rejected LED inputs
- IndexOutOfRangeError: LED slot outside 0-39
- InvalidColourError: Colour channel outside 0-255 or not a number
"""

from typing import Any

from .base import HuePlusError


class LedValidationError(HuePlusError):
    """An LED slot or colour was rejected."""
    pass


class IndexOutOfRangeError(LedValidationError):
    """LED slot is not an integer in 0..max_index."""

    def __init__(self, index: Any, max_index: int = 39):
        """
        Initialize index error.

        Args:
            index: The rejected slot value
            max_index: Highest valid slot
        """
        super().__init__(
            user_message=f"LED index {index!r} is out of bounds (0-{max_index}).",
            technical_message=f"LED index {index!r} ({type(index).__name__}) not in 0..{max_index}",
        )
        self.index = index
        self.max_index = max_index


class InvalidColourError(LedValidationError):
    """Colour channel is outside 0-255 or not a number."""

    def __init__(self, channel: str, value: Any):
        """
        Initialize colour error.

        Args:
            channel: Name of the offending channel ("red", "green", "blue")
            value: The rejected value
        """
        super().__init__(
            user_message=f"Colour {channel} must be in the range 0-255, got {value!r}.",
            recovery_hint="Use whole numbers between 0 and 255 for red, green and blue.",
        )
        self.channel = channel
        self.value = value
