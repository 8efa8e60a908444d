"""CLI command definitions for flexjson."""

import click

from flexjson import setup_logging
from flexjson.commands.config import config
from flexjson.commands.detect import detect
from flexjson.commands.parse import parse


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.version_option(package_name="flexjson")
def cli(debug):
    """Parse JSON, JSON with comments (JSONC) and JSON Lines."""
    setup_logging(debug)


cli.add_command(detect)
cli.add_command(parse)
cli.add_command(config)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
