"""Tests for data models."""

import json

import pytest
from pydantic import ValidationError

from hueplus.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    InvalidColourError,
)
from hueplus.models import AppConfig, ConnectionState, Colour


@pytest.mark.unit
class TestColour:
    """Test Colour model."""

    def test_create(self):
        """Test creating a colour."""
        colour = Colour(red=255, green=128, blue=0)

        assert (colour.red, colour.green, colour.blue) == (255, 128, 0)

    def test_off(self):
        """Test off colour."""
        assert Colour.off() == Colour(red=0, green=0, blue=0)

    def test_frozen(self):
        """Test colours are immutable values."""
        colour = Colour(red=1, green=2, blue=3)

        with pytest.raises(ValidationError):
            colour.red = 5

    @pytest.mark.parametrize("field", ["red", "green", "blue"])
    def test_range(self, field):
        """Test construction rejects out-of-range channels."""
        values = {"red": 0, "green": 0, "blue": 0}
        values[field] = 256

        with pytest.raises(ValidationError):
            Colour(**values)

    def test_coerce_passthrough(self):
        """Test coerce returns Colour instances unchanged."""
        colour = Colour(red=1, green=2, blue=3)

        assert Colour.coerce(colour) is colour

    def test_coerce_mapping_and_tuple(self):
        """Test coerce builds colours from mappings and tuples."""
        assert Colour.coerce({"red": 1, "green": 2, "blue": 3}) == Colour(red=1, green=2, blue=3)
        assert Colour.coerce((4, 5, 6)) == Colour(red=4, green=5, blue=6)

    def test_coerce_reports_channel(self):
        """Test coerce raises InvalidColourError naming the bad channel."""
        with pytest.raises(InvalidColourError) as exc_info:
            Colour.coerce({"red": 1, "green": 2, "blue": -3})

        assert exc_info.value.channel == "blue"
        assert exc_info.value.value == -3

    @pytest.mark.parametrize(
        "value, channel, bad",
        [
            ({"red": "255", "green": 0, "blue": 0}, "red", "255"),
            (("0", "0", "0"), "red", "0"),
            ((0, True, 0), "green", True),
            ({"red": 0, "green": 0, "blue": 12.0}, "blue", 12.0),
        ],
    )
    def test_coerce_rejects_non_int_channels(self, value, channel, bad):
        """Test strings, bools and floats are not converted to channel values."""
        with pytest.raises(InvalidColourError) as exc_info:
            Colour.coerce(value)

        assert exc_info.value.channel == channel
        assert exc_info.value.value == bad


@pytest.mark.unit
class TestConnectionState:
    """Test ConnectionState enum."""

    def test_values(self):
        """Test state names."""
        assert [s.value for s in ConnectionState] == ["idle", "probing", "awaiting_init", "ready"]


@pytest.mark.unit
class TestAppConfig:
    """Test AppConfig model."""

    def test_defaults(self):
        """Test default timings match the device's needs."""
        config = AppConfig()

        assert config.port is None
        assert config.baud_rate == 256000
        assert config.probe_interval == 3.0
        assert config.settle_period == 0.3
        assert config.handshake_timeout == 30.0
        assert config.strict_disconnect is False

    def test_handshake_timeout_may_be_none(self):
        """Test None means wait forever."""
        assert AppConfig(handshake_timeout=None).handshake_timeout is None

    def test_rejects_non_positive_interval(self):
        """Test the probe interval must be positive."""
        with pytest.raises(ValidationError):
            AppConfig(probe_interval=0)

    def test_save_and_load(self, temp_dir):
        """Test saving then loading a config file."""
        path = temp_dir / "config.json"
        AppConfig(port="/dev/ttyACM0", settle_period=0.5).save(path)

        loaded = AppConfig.load_or_default(path)

        assert loaded.port == "/dev/ttyACM0"
        assert loaded.settle_period == 0.5

    def test_save_keeps_backup(self, temp_dir):
        """Test overwriting a config leaves a .bak copy of the old one."""
        path = temp_dir / "config.json"
        AppConfig(port="/dev/old").save(path)
        AppConfig(port="/dev/new").save(path)

        backup = json.loads((temp_dir / "config.json.bak").read_text())
        assert backup["port"] == "/dev/old"

    def test_save_failure_raises_configuration_error(self, temp_dir):
        """Test an unwritable location raises ConfigurationError and leaves no temp file."""
        blocker = temp_dir / "not_a_dir"
        blocker.write_text("")
        path = blocker / "config.json"

        with pytest.raises(ConfigurationError):
            AppConfig().save(path)

        assert list(temp_dir.iterdir()) == [blocker]

    def test_missing_file_uses_defaults(self, temp_dir):
        """Test a missing file gives defaults without writing anything."""
        path = temp_dir / "missing.json"

        config = AppConfig.load_or_default(path)

        assert config == AppConfig()
        assert not path.exists()

    def test_invalid_json(self, temp_dir):
        """Test bad JSON raises ConfigFileInvalidError."""
        path = temp_dir / "config.json"
        path.write_text('{"port": "/dev/x",}')

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_empty_file(self, temp_dir):
        """Test an empty file raises ConfigFileInvalidError."""
        path = temp_dir / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(path)

    def test_invalid_value(self, temp_dir):
        """Test a bad value raises ConfigValidationError naming the field."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"settle_period": "soon"}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "settle_period"
        assert str(path) in exc_info.value.recovery_hint
