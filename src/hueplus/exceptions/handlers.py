"""
Error conversion and display helpers.

Low-level errors (pyserial, pydantic) are converted into the typed
hueplus exceptions here so that callers only ever see HuePlusError
subclasses with user-friendly messages and recovery hints.

## Examples

### Converting serial errors

```python
from hueplus.exceptions import wrap_serial_error

try:
    self._serial.open()
except (serial.SerialException, OSError) as e:
    raise wrap_serial_error(e, port=self.port, opening=True) from e
```

### Config validation

```python
from hueplus.exceptions import wrap_pydantic_error

try:
    config = AppConfig.model_validate_json(path.read_text())
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```

### CLI display

```python
user_message, recovery_hint = format_error_for_display(e)
```
"""

import logging
from typing import Optional

from .base import HuePlusError
from .config import ConfigFileInvalidError, ConfigValidationError
from .transport import TransportError, TransportOpenError, WriteError

logger = logging.getLogger(__name__)


def wrap_serial_error(
    error: Exception,
    port: Optional[str] = None,
    opening: bool = False,
    num_bytes: Optional[int] = None,
) -> TransportError:
    """
    Convert a pyserial/OS error to a hueplus transport exception.

    Args:
        error: The original exception
        port: Transport address involved
        opening: True if the error happened while opening the port
        num_bytes: Size of the write that failed (writes only)

    Returns:
        TransportOpenError when opening, WriteError otherwise
    """
    if isinstance(error, TransportError):
        return error

    error_msg = str(error) or type(error).__name__

    if opening:
        return TransportOpenError(port=port, original_error=error_msg)

    return WriteError(port=port, original_error=error_msg, num_bytes=num_bytes)


def wrap_pydantic_error(error: Exception, file_path: str) -> HuePlusError:
    """
    Convert Pydantic validation errors to hueplus exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input'),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HuePlusError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
