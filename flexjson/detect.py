"""Heuristic detection of JSON, JSONC and JSONL input.

Detection is cheap and never fails: it looks for comment markers outside
string literals and, failing that, checks whether the first non-blank line
is a complete JSON value on its own. Pretty-printed JSON almost never has a
complete first line (``{`` alone is not valid JSON), so a parseable first
line followed by more lines is taken to be JSON Lines.

Known limitations:
- JSONL with comments is detected as JSONC, and that combination is not
  supported.
- A single line of JSON Lines is indistinguishable from a JSON document and
  is detected as JSON.
"""

import json

from .scanner import COMMENT_MARKERS, has_comment_markers
from .types import JsonFormat


def detect_format(text: str) -> JsonFormat:
    """Guess the format of JSON-like text.

    Args:
        text: Raw input text

    Returns:
        JsonFormat.JSONC when a comment marker appears outside strings,
        JsonFormat.JSONL when there are several lines and the first one
        parses on its own, JsonFormat.JSON otherwise

    Examples:
        >>> detect_format('// c\\n{"a": 1}')
        <JsonFormat.JSONC: 'jsonc'>
        >>> detect_format('{"a": 1}\\n{"b": 2}')
        <JsonFormat.JSONL: 'jsonl'>
        >>> detect_format('{"url": "https://x.com"}')
        <JsonFormat.JSON: 'json'>
    """
    trimmed = text.lstrip()

    if trimmed.startswith(COMMENT_MARKERS):
        return JsonFormat.JSONC

    if has_comment_markers(trimmed):
        return JsonFormat.JSONC

    lines = [line for line in trimmed.split("\n") if line.strip()]
    if len(lines) > 1:
        try:
            json.loads(lines[0])
        except (ValueError, RecursionError):
            pass
        else:
            return JsonFormat.JSONL

    return JsonFormat.JSON


__all__ = ["detect_format"]
