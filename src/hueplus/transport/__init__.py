"""Byte transports to the controller."""

from .protocols import DataCallback, Transport
from .serial_port import DEFAULT_BAUD_RATE, SerialTransport

__all__ = ["DEFAULT_BAUD_RATE", "DataCallback", "SerialTransport", "Transport"]
