"""Main entry point for hueplus."""

from hueplus.cli.main import cli

if __name__ == "__main__":
    cli()
