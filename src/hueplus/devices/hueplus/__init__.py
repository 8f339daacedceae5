"""NZXT HUE+ device code."""

from . import commands
from .device import HuePlus
from .frame import LedFrameEncoder
from .handshake import HandshakeController, ProbeTimer

__all__ = ["HandshakeController", "HuePlus", "LedFrameEncoder", "ProbeTimer", "commands"]
