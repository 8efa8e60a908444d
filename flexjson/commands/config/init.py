"""Initialize settings command implementation."""

import logging
import sys

import click

from flexjson import format_error
from flexjson.paths import get_config_path
from flexjson.settings import DEFAULT_SETTINGS_TEXT

_logging = logging.getLogger(__name__)


@click.command(name="init")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Force re-initialization, overwriting existing settings",
)
def config_init(force: bool):
    """Create the settings file with commented defaults.

    Creates ~/.config/flexjson/config.jsonc (or $FLEXJSON_CONFIG).

    Use --force to overwrite an existing file (creates backup first).
    """
    config_path = get_config_path()

    if config_path.exists() and not force:
        click.echo(f"Settings file already exists: {config_path}")
        click.echo("Use --force to re-initialize (creates backup first).")
        sys.exit(1)

    try:
        if config_path.exists():
            backup_path = config_path.with_name(config_path.name + ".bak")
            click.echo(f"Backing up existing settings to {backup_path}...")
            config_path.replace(backup_path)

        click.echo(f"Initializing settings at {config_path}...")
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_SETTINGS_TEXT, encoding="utf-8")
    except OSError as e:
        click.echo(format_error(f"initialization failed: {e}"), err=True)
        sys.exit(1)

    _logging.debug(f"Wrote default settings to {config_path}")
    click.echo("Settings initialized successfully")
