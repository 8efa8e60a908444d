"""JSONC support: comment stripping and parsing.

Removes // line comments and /* */ block comments that appear outside
string literals, producing standard JSON for json.loads().
"""

import json

from .scanner import transform
from .types import JsonValue


def _drop_comment(text: str, i: int) -> tuple[str, int]:
    """Handle one code-position character for strip_comments().

    A line comment is skipped up to (not including) its newline so line
    numbers stay intact. An unterminated block comment runs to the end of
    input; the decoder reports whatever is left as a syntax error.
    """
    if text.startswith("//", i):
        end = text.find("\n", i + 2)
        return "", len(text) if end == -1 else end
    if text.startswith("/*", i):
        end = text.find("*/", i + 2)
        return "", len(text) if end == -1 else end + 2
    return text[i], i + 1


def _drop_trailing_comma(text: str, i: int) -> tuple[str, int]:
    """Handle one code-position character for strip_trailing_commas()."""
    char = text[i]
    if char != ",":
        return char, i + 1

    j = i + 1
    n = len(text)
    while j < n and text[j] in " \t\r\n":
        j += 1
    if j < n and text[j] in "]}":
        return "", i + 1
    return char, i + 1


def strip_comments(text: str) -> str:
    """Strip JSONC comments from text.

    Removes:
    - Single-line comments: // comment
    - Multi-line comments: /* comment */

    Preserves strings containing // or /* sequences byte for byte. Text
    without comments is returned unchanged.

    Args:
        text: JSONC content with comments

    Returns:
        Content without comments

    Examples:
        >>> strip_comments('{"a": 1} // note')
        '{"a": 1} '

        >>> strip_comments('{"url": "https://example.com"}')
        '{"url": "https://example.com"}'
    """
    return transform(text, _drop_comment)


def strip_trailing_commas(text: str) -> str:
    """Remove trailing commas before ] or } outside string literals.

    Expects comments to be stripped already.

    Examples:
        >>> strip_trailing_commas('[1, 2, 3,]')
        '[1, 2, 3]'

        >>> strip_trailing_commas('{"csv": "a,}"}')
        '{"csv": "a,}"}'
    """
    return transform(text, _drop_trailing_comma)


def parse_jsonc(text: str, trailing_commas: bool = False) -> JsonValue:
    """Parse a JSONC string (JSON with line and block comments).

    Args:
        text: JSONC content
        trailing_commas: Also accept trailing commas before ] or }

    Returns:
        The parsed value

    Raises:
        json.JSONDecodeError: If the text is not valid JSON once comments
            are removed. Text made only of comments strips to an empty
            string and fails here too.
    """
    stripped = strip_comments(text)
    if trailing_commas:
        stripped = strip_trailing_commas(stripped)
    return json.loads(stripped)


__all__ = ["strip_comments", "strip_trailing_commas", "parse_jsonc"]
