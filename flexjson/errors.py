"""Exception types and error formatting utilities.

This module provides the exception hierarchy shared by the parser, the
source loader and the settings layer, plus helper functions for formatting
error messages consistently. All user-facing errors should use these
utilities.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Syntax errors show line, column, the offending line and a caret
- Include actionable hints where helpful
- Be concise but informative
"""

import json


class FlexJsonError(ValueError):
    """Base exception for flexjson."""

    pass


class JsonlDecodeError(FlexJsonError):
    """Raised when a JSON Lines document has a line that is not valid JSON.

    Attributes:
        lineno: 1-indexed position of the failing line in the raw
            newline-split input (blank lines included)
        line: The failing line, before trimming
        error: The underlying json.JSONDecodeError for that line
    """

    def __init__(self, lineno: int, line: str, error: json.JSONDecodeError):
        self.lineno = lineno
        self.line = line
        self.error = error
        super().__init__(f"JSONL parse error on line {lineno}: {error}")


class SourceError(FlexJsonError):
    """Raised when input text cannot be read from its source."""

    pass


class SettingsError(FlexJsonError):
    """Raised when the settings file cannot be loaded or validated."""

    pass


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with 'Error: ' prefix

    Examples:
        >>> format_error("file not found")
        'Error: file not found'
    """
    return f"Error: {message}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Args:
        message: The error message
        suggestion: Helpful suggestion or hint for the user

    Returns:
        Formatted error with suggestion

    Examples:
        >>> format_suggestion("settings file not found", "run 'flexjson config init' to create one")
        "Error: settings file not found. Hint: run 'flexjson config init' to create one"
    """
    return f"{format_error(message)}. Hint: {suggestion}"


def _caret_lines(line: str, col_num: int) -> list[str]:
    # Tabs count as single characters, matching JSONDecodeError.colno
    return [line, " " * max(col_num - 1, 0) + "^"]


def format_syntax_error(error: json.JSONDecodeError | JsonlDecodeError) -> str:
    """Format a syntax error with line, caret, and context.

    For plain JSON and JSONC errors the offending line is taken from the
    document the decoder actually saw (after comment stripping). For JSONL
    errors the raw line is shown and the caret points at the column inside
    that line.

    Args:
        error: A json.JSONDecodeError or JsonlDecodeError

    Returns:
        A formatted, multi-line error message

    Examples:
        >>> try:
        ...     json.loads('{"a": }')
        ... except json.JSONDecodeError as e:
        ...     print(format_syntax_error(e))
        Syntax error at line 1, col 7: Expecting value
        {"a": }
              ^
    """
    if isinstance(error, JsonlDecodeError):
        # The inner decoder saw the stripped line
        indent = len(error.line) - len(error.line.lstrip())
        col_num = error.error.colno + indent
        msg_parts = [
            f"JSONL syntax error on line {error.lineno}, "
            f"col {col_num}: {error.error.msg}"
        ]
        msg_parts.extend(_caret_lines(error.line, col_num))
        return "\n".join(msg_parts)

    msg_parts = [f"Syntax error at line {error.lineno}, col {error.colno}: {error.msg}"]
    lines = error.doc.split("\n")
    if 1 <= error.lineno <= len(lines):
        msg_parts.extend(_caret_lines(lines[error.lineno - 1], error.colno))
    return "\n".join(msg_parts)


__all__ = [
    "FlexJsonError",
    "JsonlDecodeError",
    "SourceError",
    "SettingsError",
    "format_error",
    "format_suggestion",
    "format_syntax_error",
]
