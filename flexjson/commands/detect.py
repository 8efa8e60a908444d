"""Detect command implementation."""

import logging
import sys

import click

from flexjson import SourceError, detect_format, format_error, read_source
from flexjson.commands.utils import input_source

_logging = logging.getLogger(__name__)


@click.command()
@click.argument("file", required=False, type=click.Path(allow_dash=True))
def detect(file: str | None):
    """Print the detected format of FILE: json, jsonc or jsonl.

    Reads stdin when FILE is omitted or '-'. Detection is heuristic and
    never fails; invalid input is reported as json.
    """
    try:
        text = read_source(input_source(file))
    except SourceError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    fmt = detect_format(text)
    _logging.debug(f"Detected {fmt.value} for {file or 'stdin'}")
    click.echo(fmt.value)
