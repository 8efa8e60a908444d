"""Parse command implementation."""

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from flexjson import (
    AUTO,
    JsonFormat,
    JsonlDecodeError,
    SourceError,
    format_error,
    format_syntax_error,
    load_flexible,
)
from flexjson.commands.utils import (
    input_source,
    load_settings_or_exit,
    render_value,
    write_atomic,
)
from flexjson.settings import OUTPUT_FORMATS

_logging = logging.getLogger(__name__)


@click.command()
@click.argument("file", required=False, type=click.Path(allow_dash=True))
@click.option(
    "--format",
    "-f",
    "input_format",
    type=click.Choice([AUTO] + [f.value for f in JsonFormat]),
    default=AUTO,
    show_default=True,
    help="Input format; 'auto' detects it",
)
@click.option(
    "--to",
    "-t",
    "output",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default from settings)",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Spaces per indentation level (default from settings)",
)
@click.option("--compact", is_flag=True, help="Write JSON without indentation")
@click.option(
    "--sort-keys/--no-sort-keys",
    default=None,
    help="Sort object keys in the output (default from settings)",
)
@click.option(
    "--ascii/--no-ascii",
    "ensure_ascii",
    default=None,
    help="Escape non-ASCII characters (default from settings)",
)
@click.option(
    "--trailing-commas/--no-trailing-commas",
    default=None,
    help="Accept trailing commas in JSONC input (default from settings)",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write to this file instead of stdout",
)
def parse(
    file: str | None,
    input_format: str,
    output: str | None,
    indent: int | None,
    compact: bool,
    sort_keys: bool | None,
    ensure_ascii: bool | None,
    trailing_commas: bool | None,
    output_file: str | None,
):
    """Parse JSON, JSONC or JSONL from FILE and write normalized output.

    Reads stdin when FILE is omitted or '-'. Comments are accepted on input
    but not preserved. JSONL input becomes a list with one entry per line.
    """
    settings = load_settings_or_exit()
    settings = replace(
        settings,
        indent=None if compact else (indent if indent is not None else settings.indent),
        sort_keys=settings.sort_keys if sort_keys is None else sort_keys,
        ensure_ascii=settings.ensure_ascii if ensure_ascii is None else ensure_ascii,
        output=output or settings.output,
        trailing_commas=(
            settings.trailing_commas if trailing_commas is None else trailing_commas
        ),
    )
    _logging.debug(f"Effective settings: {settings}")

    try:
        result = load_flexible(
            input_source(file), input_format, trailing_commas=settings.trailing_commas
        )
    except SourceError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except (json.JSONDecodeError, JsonlDecodeError) as e:
        click.echo(format_syntax_error(e), err=True)
        sys.exit(1)
    except RecursionError:
        click.echo(format_error("input is nested too deeply to parse"), err=True)
        sys.exit(1)

    try:
        rendered = render_value(result.value, settings.output, settings)
    except ValueError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    if output_file is None:
        click.echo(rendered, nl=False)
        return

    write_atomic(Path(output_file), rendered)
    click.echo(f"Wrote {result.format.value} input as {settings.output} to {output_file}")
