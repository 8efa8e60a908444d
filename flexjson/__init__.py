"""Flexible JSON parsing: JSON, JSON with comments (JSONC) and JSON Lines."""

import logging

from .detect import detect_format
from .errors import (
    FlexJsonError,
    JsonlDecodeError,
    SettingsError,
    SourceError,
    format_error,
    format_suggestion,
    format_syntax_error,
)
from .flexible import AUTO, parse_as, parse_flexible, resolve_format
from .jsonl import dump_jsonl, parse_jsonl
from .paths import get_config_dir, get_config_path
from .scanner import code_positions, has_comment_markers, transform
from .settings import Settings, load_settings, validate_settings
from .sources import load_flexible, read_source
from .stripper import parse_jsonc, strip_comments, strip_trailing_commas
from .types import JsonFormat, JsonValue, ParseResult

__version__ = "0.1.0"

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the command-line tool.

    Args:
        debug: Log at DEBUG level when True, WARNING otherwise
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).setLevel(level)


__all__ = [
    "AUTO",
    "FlexJsonError",
    "JsonFormat",
    "JsonValue",
    "JsonlDecodeError",
    "ParseResult",
    "Settings",
    "SettingsError",
    "SourceError",
    "code_positions",
    "detect_format",
    "dump_jsonl",
    "format_error",
    "format_suggestion",
    "format_syntax_error",
    "get_config_dir",
    "get_config_path",
    "has_comment_markers",
    "load_flexible",
    "load_settings",
    "parse_as",
    "parse_flexible",
    "parse_jsonc",
    "parse_jsonl",
    "read_source",
    "resolve_format",
    "setup_logging",
    "strip_comments",
    "strip_trailing_commas",
    "transform",
    "validate_settings",
]
