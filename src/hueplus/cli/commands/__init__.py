"""CLI commands for hueplus."""

from .config import config
from .device import colour, off

__all__ = ["colour", "config", "off"]
