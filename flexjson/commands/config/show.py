"""Show settings command implementations."""

import json

import click

from flexjson.commands.utils import load_settings_or_exit
from flexjson.paths import get_config_path


@click.command(name="show")
def config_show():
    """Print the effective settings as JSONC, headed by their source.

    Values missing from the settings file (or the whole file) fall back to
    the built-in defaults.
    """
    settings = load_settings_or_exit()
    path = get_config_path()
    if path.exists():
        click.echo(f"// Settings from {path}")
    else:
        click.echo(f"// Defaults (no settings file at {path})")
    click.echo(json.dumps(settings.to_dict(), indent=2))


@click.command(name="path")
def config_path():
    """Print the path of the settings file (set FLEXJSON_CONFIG to override)."""
    click.echo(str(get_config_path()))
