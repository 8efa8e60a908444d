"""Shared utility functions for commands."""

import json
import logging
import sys
import uuid
from pathlib import Path

import click
import yaml

from flexjson import SettingsError, format_error, format_suggestion, load_settings
from flexjson.jsonl import dump_jsonl
from flexjson.settings import Settings
from flexjson.types import JsonValue

_logging = logging.getLogger(__name__)

STDIN = "-"


def input_source(file: str | None) -> Path | str:
    """Return the Path for a file argument, or the text of stdin when omitted or '-'."""
    if file is None or file == STDIN:
        _logging.debug("Reading input from stdin")
        return click.get_text_stream("stdin").read()
    return Path(file)


def load_settings_or_exit() -> Settings:
    """Load user settings, printing a friendly error and exiting on failure."""
    try:
        return load_settings()
    except SettingsError as e:
        click.echo(
            format_suggestion(str(e), "fix the file or run 'flexjson config init --force'"),
            err=True,
        )
        sys.exit(1)


def render_value(value: JsonValue, output: str, settings: Settings) -> str:
    """Serialize a parsed value in the requested output format.

    Args:
        value: Parsed value
        output: One of json, yaml or jsonl
        settings: Effective indentation and key ordering options

    Returns:
        Serialized text ending with a newline (empty for an empty JSONL list)

    Raises:
        ValueError: If JSONL output is requested for a value that is not a list
    """
    if output == "yaml":
        return yaml.safe_dump(
            value,
            indent=settings.indent or 2,
            sort_keys=settings.sort_keys,
            allow_unicode=not settings.ensure_ascii,
            default_flow_style=False,
        )
    if output == "jsonl":
        if not isinstance(value, list):
            raise ValueError(
                f"JSONL output requires a list of values, got {type(value).__name__}"
            )
        return dump_jsonl(
            value, ensure_ascii=settings.ensure_ascii, sort_keys=settings.sort_keys
        )
    return (
        json.dumps(
            value,
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
        )
        + "\n"
    )


def write_atomic(file_path: Path, content: str) -> None:
    """Write content to file_path through a uniquely named temp file.

    Exits with an error message if the write fails; the temp file is
    removed in that case.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = file_path.with_suffix(f".tmp.{uuid.uuid4().hex[:8]}")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(content)
        temp_path.replace(file_path)
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        click.echo(format_error(f"Error writing file: {e}"), err=True)
        sys.exit(1)
    _logging.debug(f"Wrote {len(content)} characters to {file_path}")
