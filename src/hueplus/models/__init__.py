"""Data models for the HUE+ driver."""

from .color import Colour
from .config import AppConfig
from .enums import Channel, ConnectionState, Mode

__all__ = [
    "AppConfig",
    "Channel",
    "Colour",
    "ConnectionState",
    "Mode",
]
