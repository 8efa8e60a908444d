"""Settings management commands."""

import click

from flexjson.commands.config.init import config_init
from flexjson.commands.config.show import config_path, config_show


@click.group()
def config():
    """Settings management commands."""
    pass


config.add_command(config_init, name="init")
config.add_command(config_show, name="show")
config.add_command(config_path, name="path")
