"""Device drivers."""

from .hueplus import HandshakeController, HuePlus, LedFrameEncoder

__all__ = ["HandshakeController", "HuePlus", "LedFrameEncoder"]
