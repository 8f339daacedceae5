"""Device command implementations."""

import logging
import sys
from collections.abc import Callable
from typing import Optional

import click

from hueplus.devices import HuePlus
from hueplus.exceptions import format_error_for_display
from hueplus.models import AppConfig, Channel, Colour, Mode

logger = logging.getLogger(__name__)

CHANNEL_CHOICES = click.Choice([c.name.lower() for c in Channel], case_sensitive=False)
MODE_CHOICES = click.Choice([m.name.lower() for m in Mode], case_sensitive=False)


def run_on_device(
    ctx: click.Context,
    port: Optional[str],
    channel: str,
    mode: str,
    prepare: Callable[[HuePlus], None],
) -> None:
    """
    Connect, queue colours with `prepare`, send one frame and disconnect.

    Errors are logged with traceback and shown to the user without one.
    """
    hue = None
    try:
        config_obj = AppConfig.load_or_default(ctx.obj["config_path"])

        port = port or config_obj.port
        if not port:
            raise click.UsageError(
                "No serial port given. Pass --port or run 'hueplus config set --port PORT'."
            )

        hue = HuePlus(port, config=config_obj)
        click.echo(f"Waiting for device on {port}...")
        hue.connect()

        prepare(hue)
        hue.update(Channel[channel.upper()], Mode[mode.upper()])
        click.echo(f"Updated channel {channel} ({mode})")

    except click.ClickException:
        raise
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        click.echo("\nInterrupted.", err=True)
        sys.exit(130)
    except Exception as e:
        logger.exception("Error talking to device")

        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        click.echo(f"\nFor details, check the log file: {ctx.obj['log_path']}", err=True)
        sys.exit(1)
    finally:
        if hue is not None and hue.is_connected:
            hue.disconnect()


@click.command(name="colour")
@click.argument("red", type=click.IntRange(0, 255))
@click.argument("green", type=click.IntRange(0, 255))
@click.argument("blue", type=click.IntRange(0, 255))
@click.option("--port", "-p", default=None, help="Serial port (default: from config)")
@click.option("--channel", "-c", type=CHANNEL_CHOICES, default="both", show_default=True)
@click.option("--mode", "-m", type=MODE_CHOICES, default="fixed", show_default=True)
@click.option(
    "--led",
    "-l",
    "leds",
    type=click.IntRange(0, 39),
    multiple=True,
    help="Only colour this LED slot (repeatable; others stay off)",
)
@click.pass_context
def colour(ctx, red: int, green: int, blue: int, port, channel: str, mode: str, leds):
    """Set LEDs to RED GREEN BLUE (0-255 each)."""
    rgb = Colour(red=red, green=green, blue=blue)

    def prepare(hue: HuePlus) -> None:
        if not leds:
            hue.set_all(rgb)
            return
        for index in leds:
            hue.set_led(index, rgb)

    run_on_device(ctx, port, channel, mode, prepare)


@click.command(name="off")
@click.option("--port", "-p", default=None, help="Serial port (default: from config)")
@click.option("--channel", "-c", type=CHANNEL_CHOICES, default="both", show_default=True)
@click.pass_context
def off(ctx, port, channel: str):
    """Turn all LEDs off."""
    run_on_device(ctx, port, channel, "fixed", lambda hue: hue.reset())
