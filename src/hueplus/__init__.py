"""hueplus: Drive the NZXT HUE+ RGB lighting controller over serial."""

__version__ = "0.1.0"

from .devices import HandshakeController, HuePlus, LedFrameEncoder
from .models import Channel, Colour, Mode

__all__ = [
    "Channel",
    "Colour",
    "HandshakeController",
    "HuePlus",
    "LedFrameEncoder",
    "Mode",
]
