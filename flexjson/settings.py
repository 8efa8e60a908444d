"""User settings: defaults for the command-line output options.

Settings live in a JSONC file (comments allowed) and are parsed with
flexjson's own JSONC parser.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from .errors import SettingsError, SourceError, format_syntax_error
from .paths import get_config_path
from .sources import read_source
from .stripper import parse_jsonc

_logging = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml", "jsonl")

DEFAULT_SETTINGS_TEXT = """\
// flexjson settings (JSON with comments)
{
  // Spaces per indentation level for JSON and YAML output, null for compact JSON
  "indent": 2,
  // Sort object keys in the output
  "sort_keys": false,
  // Escape non-ASCII characters in JSON output
  "ensure_ascii": false,
  /* Default output format for 'flexjson parse': json, yaml or jsonl */
  "output": "json",
  // Accept trailing commas in JSONC input
  "trailing_commas": false
}
"""


@dataclass
class Settings:
    """Effective output settings."""

    indent: int | None = 2
    sort_keys: bool = False
    ensure_ascii: bool = False
    output: str = "json"
    trailing_commas: bool = False

    def __post_init__(self):
        # bool is a subclass of int, reject it explicitly
        if self.indent is not None and (
            not isinstance(self.indent, int) or isinstance(self.indent, bool)
        ):
            raise ValueError("indent must be an integer or null")
        if self.indent is not None and self.indent < 0:
            raise ValueError("indent must not be negative")
        for flag in ("sort_keys", "ensure_ascii", "trailing_commas"):
            if not isinstance(getattr(self, flag), bool):
                raise ValueError(f"{flag} must be a boolean")
        if self.output not in OUTPUT_FORMATS:
            raise ValueError(
                f"output must be one of {', '.join(OUTPUT_FORMATS)}, got '{self.output}'"
            )

    def to_dict(self) -> dict:
        return asdict(self)


def validate_settings(data: object) -> Settings:
    """Validate and convert a parsed settings object to Settings.

    Args:
        data: Value parsed from the settings file

    Returns:
        Settings with defaults filled in for missing keys

    Raises:
        SettingsError: If validation fails, naming the offending field
    """
    if not isinstance(data, dict):
        raise SettingsError(
            f"Settings must be a JSON object, got {type(data).__name__}"
        )

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise SettingsError(f"Unknown settings field: {unknown[0]}")

    try:
        return Settings(**data)
    except ValueError as e:
        raise SettingsError(f"Invalid settings: {e}") from e


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from the user settings file.

    A missing file is not an error: defaults are used.

    Args:
        path: Settings file to read (default: get_config_path())

    Raises:
        SettingsError: If the file cannot be read, parsed or validated
    """
    settings_path = path if path is not None else get_config_path()
    if not settings_path.exists():
        _logging.debug(f"No settings file at {settings_path}, using defaults")
        return Settings()

    try:
        text = read_source(settings_path)
    except SourceError as e:
        raise SettingsError(str(e)) from e

    try:
        data = parse_jsonc(text)
    except json.JSONDecodeError as e:
        raise SettingsError(
            f"{settings_path}: {format_syntax_error(e)}"
        ) from e

    settings = validate_settings(data)
    _logging.debug(f"Loaded settings from {settings_path}: {settings}")
    return settings


__all__ = [
    "OUTPUT_FORMATS",
    "DEFAULT_SETTINGS_TEXT",
    "Settings",
    "validate_settings",
    "load_settings",
]
