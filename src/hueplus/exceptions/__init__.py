"""
Custom exception hierarchy for hueplus.

## Exception Hierarchy

```
HuePlusError (base)
├── TransportError
│   ├── TransportOpenError
│   └── WriteError
├── DeviceStateError
│   ├── NotConnectedError
│   └── HandshakeTimeoutError
├── LedValidationError
│   ├── IndexOutOfRangeError
│   └── InvalidColourError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Validation errors are raised before any LED state changes. Transport
errors abort the pending call but never reset the handshake on their own;
the caller decides whether to retry the whole sequence.
"""

from .base import HuePlusError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error, wrap_serial_error
from .transport import (
    DeviceStateError,
    HandshakeTimeoutError,
    NotConnectedError,
    TransportError,
    TransportOpenError,
    WriteError,
)
from .validation import IndexOutOfRangeError, InvalidColourError, LedValidationError

__all__ = [
    # Base
    "HuePlusError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device state
    "DeviceStateError",
    "HandshakeTimeoutError",
    "NotConnectedError",
    # Validation
    "IndexOutOfRangeError",
    "InvalidColourError",
    "LedValidationError",
    # Transport
    "TransportError",
    "TransportOpenError",
    "WriteError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_serial_error",
]
