"""JSON Lines decoding and encoding."""

import json
from collections.abc import Iterable

from .errors import JsonlDecodeError
from .types import JsonValue

NESTING_TOO_DEEP = "Value is nested too deeply"


def parse_jsonl(text: str) -> list[JsonValue]:
    """Parse a JSONL string (one JSON value per line).

    Blank lines, including the one left by a final newline, are skipped.
    Each remaining line is parsed independently and results keep input
    order.

    Args:
        text: JSONL content

    Returns:
        List of parsed values, one per non-blank line

    Raises:
        JsonlDecodeError: On the first line that is not valid JSON. Its
            line number counts every line of the raw input, blank ones
            included.

    Examples:
        >>> parse_jsonl('{"a": 1}\\n\\n{"b": 2}\\n')
        [{'a': 1}, {'b': 2}]
    """
    values: list[JsonValue] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            values.append(json.loads(stripped))
        except json.JSONDecodeError as e:
            raise JsonlDecodeError(lineno, line, e) from e
        except RecursionError as e:
            nesting = json.JSONDecodeError(NESTING_TOO_DEEP, stripped, 0)
            raise JsonlDecodeError(lineno, line, nesting) from e
    return values


def dump_jsonl(
    values: Iterable[JsonValue], ensure_ascii: bool = False, sort_keys: bool = False
) -> str:
    """Serialize values as JSON Lines, one compact value per line.

    Examples:
        >>> dump_jsonl([[1, "Alice"], [2, "Bob"]])
        '[1, "Alice"]\\n[2, "Bob"]\\n'
    """
    return "".join(
        json.dumps(value, ensure_ascii=ensure_ascii, sort_keys=sort_keys) + "\n"
        for value in values
    )


__all__ = ["parse_jsonl", "dump_jsonl"]
