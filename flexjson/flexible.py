"""Parse text as JSON, JSONC or JSONL, auto-detecting the format.

- **JSON**  : Standard json.loads
- **JSONC** : JSON with line and block comments stripped before parsing
- **JSONL** : One JSON value per line, parsed into a list
"""

import json

from .detect import detect_format
from .jsonl import parse_jsonl
from .stripper import parse_jsonc
from .types import JsonFormat, JsonValue, ParseResult

AUTO = "auto"


def _parse_with(text: str, fmt: JsonFormat, trailing_commas: bool) -> JsonValue:
    if fmt is JsonFormat.JSONC:
        return parse_jsonc(text, trailing_commas=trailing_commas)
    if fmt is JsonFormat.JSONL:
        return parse_jsonl(text)
    return json.loads(text)


def parse_flexible(text: str) -> JsonValue:
    """Parse a string as JSON, JSONC, or JSONL (auto-detected).

    Returns a list with one entry per line for JSONL, and any JSON value
    otherwise. Callers that need to know which branch was taken should use
    parse_as() and inspect the returned format.

    Raises:
        json.JSONDecodeError: For JSON and JSONC syntax errors
        JsonlDecodeError: For a JSONL line that is not valid JSON
    """
    return _parse_with(text, detect_format(text), trailing_commas=False)


def resolve_format(fmt: JsonFormat | str, text: str) -> JsonFormat:
    """Turn a format name (or "auto") into a concrete JsonFormat for text."""
    if isinstance(fmt, JsonFormat):
        return fmt
    if fmt == AUTO:
        return detect_format(text)
    try:
        return JsonFormat(fmt)
    except ValueError:
        choices = ", ".join([AUTO] + [f.value for f in JsonFormat])
        raise ValueError(f"Unknown format '{fmt}'. Expected one of: {choices}")


def parse_as(
    text: str, fmt: JsonFormat | str = AUTO, trailing_commas: bool = False
) -> ParseResult:
    """Parse text in the given format and tag the result with that format.

    Args:
        text: Raw input text
        fmt: A JsonFormat, a format name, or "auto" to detect it
        trailing_commas: Accept trailing commas in JSONC input

    Returns:
        ParseResult holding the format used and the parsed value

    Raises:
        ValueError: If fmt is not a known format name
        json.JSONDecodeError: For JSON and JSONC syntax errors
        JsonlDecodeError: For a JSONL line that is not valid JSON
    """
    resolved = resolve_format(fmt, text)
    return ParseResult(resolved, _parse_with(text, resolved, trailing_commas))


__all__ = ["AUTO", "parse_flexible", "parse_as", "resolve_format"]
