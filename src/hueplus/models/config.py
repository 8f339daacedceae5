"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from hueplus.utils.persistence import load_model, save_model

DEFAULT_CONFIG_PATH = Path.home() / ".hueplus" / "config.json"


class AppConfig(BaseModel):
    """Driver configuration and settings."""

    # Transport
    port: str | None = Field(
        default=None,
        description="Serial port of the controller (e.g. /dev/ttyACM0 or COM3)",
    )
    baud_rate: int = Field(default=256000, gt=0, description="Serial baud rate")
    read_timeout: float = Field(
        default=0.1, gt=0, description="Reader thread poll granularity (seconds)"
    )
    write_timeout: float = Field(
        default=2.0, gt=0, description="Maximum time a single write may block (seconds)"
    )

    # Handshake
    probe_interval: float = Field(
        default=3.0, gt=0, description="How often to re-send the probe byte (seconds)"
    )
    handshake_timeout: float | None = Field(
        default=30.0,
        gt=0,
        description="Give up on connect() after this many seconds (None = wait forever)",
    )
    strict_disconnect: bool = Field(
        default=False,
        description="Raise when disconnecting a device that never connected",
    )

    # Frames
    settle_period: float = Field(
        default=0.3,
        ge=0,
        description=(
            "Wait after each frame (seconds). The device may skip instructions "
            "if frames arrive faster than this."
        ),
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.hueplus/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return load_model(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        save_model(self, path)
