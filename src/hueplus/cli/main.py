"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from hueplus.models.config import DEFAULT_CONFIG_PATH

from .commands import colour, config, off

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path.home() / ".hueplus" / "logs" / "hueplus.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level
        log_file: Custom log file path (optional)

    Returns:
        Path of the log file in use
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    log_path = log_file or DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    if verbose or debug:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        root_logger.addHandler(console_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="hueplus")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Configuration file to use'
)
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path], config_file: Path):
    """
    HUE+ - Control the NZXT HUE+ RGB lighting controller over serial.

    \b
    Examples:
      # All LEDs red on both channels
      hueplus colour 255 0 0 --port /dev/ttyACM0

      # LEDs 0 and 1 purple, breathing, on channel two
      hueplus colour 100 0 255 --led 0 --led 1 --channel two --mode breathing

      # Turn channel one off
      hueplus off --channel one

      # Remember the port
      hueplus config set --port /dev/ttyACM0
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file)


cli.add_command(colour)
cli.add_command(off)
cli.add_command(config)

if __name__ == "__main__":
    cli()
