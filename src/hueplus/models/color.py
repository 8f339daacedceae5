"""Colour model for LED control."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hueplus.exceptions import InvalidColourError


class Colour(BaseModel):
    """Standard 8-bit RGB colour.

    The controller takes one byte per channel with no gamma correction,
    so values map straight onto the wire. Channels must be real ints:
    strings, bools and floats are rejected, as are out-of-range values.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Colour":
        """Create off (black) colour."""
        return cls(red=0, green=0, blue=0)

    @classmethod
    def coerce(cls, value: Any) -> "Colour":
        """Build a Colour from a Colour, a mapping or an (r, g, b) tuple.

        Raises:
            InvalidColourError: If any channel is missing, not a number or
                outside 0-255
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, Mapping):
            data = dict(value)
        elif isinstance(value, (tuple, list)) and len(value) == 3:
            data = dict(zip(("red", "green", "blue"), value))
        else:
            raise InvalidColourError("value", value)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first_error = e.errors()[0]
            channel = str(first_error.get("loc", ("value",))[0])
            raise InvalidColourError(channel, data.get(channel, value)) from e
