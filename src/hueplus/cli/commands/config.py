"""Config command implementations."""

import click

from hueplus.exceptions import ConfigurationError, format_error_for_display
from hueplus.models import AppConfig


def _to_click_error(error: ConfigurationError) -> click.ClickException:
    user_message, recovery_hint = format_error_for_display(error)
    message = user_message if not recovery_hint else f"{user_message}\n{recovery_hint}"
    return click.ClickException(message)


def _load(ctx: click.Context) -> AppConfig:
    try:
        return AppConfig.load_or_default(ctx.obj["config_path"])
    except ConfigurationError as e:
        raise _to_click_error(e) from e


def _save(ctx: click.Context, config_obj: AppConfig) -> None:
    try:
        config_obj.save(ctx.obj["config_path"])
    except ConfigurationError as e:
        raise _to_click_error(e) from e


@click.group(name="config")
def config():
    """Show or change saved settings."""
    pass


@config.command(name="show")
@click.pass_context
def show(ctx):
    """Display configuration."""
    config_obj = _load(ctx)
    click.echo(f"Config file: {ctx.obj['config_path']}\n")
    for name, value in config_obj.model_dump().items():
        click.echo(f"  {name}: {value}")


@config.command(name="set")
@click.option("--port", "-p", default=None, help="Serial port of the controller")
@click.option("--settle-period", type=click.FloatRange(min=0), default=None,
              help="Seconds to wait after each frame")
@click.option("--probe-interval", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Seconds between probe bytes during the handshake")
@click.option("--handshake-timeout", type=click.FloatRange(min=0), default=None,
              help="Seconds to wait for the device (0 = wait forever)")
@click.option("--strict-disconnect/--lenient-disconnect", default=None,
              help="Fail when disconnecting a device that never connected")
@click.pass_context
def set_values(ctx, port, settle_period, probe_interval, handshake_timeout, strict_disconnect):
    """Update configuration values and save."""
    config_obj = _load(ctx)

    updates = {
        "port": port,
        "settle_period": settle_period,
        "probe_interval": probe_interval,
        "strict_disconnect": strict_disconnect,
    }
    updates = {name: value for name, value in updates.items() if value is not None}
    if handshake_timeout is not None:
        updates["handshake_timeout"] = handshake_timeout or None

    if not updates:
        raise click.UsageError("Nothing to set. See 'hueplus config set --help'.")

    config_obj = AppConfig.model_validate({**config_obj.model_dump(), **updates})
    _save(ctx, config_obj)

    for name, value in updates.items():
        click.echo(f"  {name}: {value}")
    click.echo(f"Saved to {ctx.obj['config_path']}")


@config.command(name="reset")
@click.confirmation_option(prompt="Reset all settings to defaults?")
@click.pass_context
def reset(ctx):
    """Reset configuration to defaults."""
    _save(ctx, AppConfig())
    click.echo(f"Reset {ctx.obj['config_path']} to defaults")
