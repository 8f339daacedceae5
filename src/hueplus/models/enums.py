"""Enumerations for the HUE+ controller."""

from enum import Enum


class Channel(Enum):
    """LED strip group addressed by a frame."""

    BOTH = 0x00  # Broadcast to both strips, not a third physical channel
    ONE = 0x01
    TWO = 0x02


class Mode(Enum):
    """Built-in colour rendering effect carried in every frame header."""

    FIXED = 0x00
    BREATHING = 0x07


class ConnectionState(str, Enum):
    """Handshake progress of a connection."""

    IDLE = "idle"  # Constructed or disconnected
    PROBING = "probing"  # Port open, probe byte repeating
    AWAITING_INIT = "awaiting_init"  # Device answered, init command sent
    READY = "ready"  # Device accepts LED frames
