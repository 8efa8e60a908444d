"""String-literal aware scanning of JSON-ish text.

The scanner walks text one character at a time and tracks whether the
cursor is inside a JSON string literal. Only characters in code position
are handed to the caller, so comment markers inside strings such as
"https://example.com" are never mistaken for comments.

The state machine approach ensures that:
- Escaped quotes (\\") don't end a string
- An escaped backslash (\\\\) doesn't start an escape on the closing quote
- State is local to each call, so scanning is reentrant and thread-safe
"""

from collections.abc import Callable, Iterator
from typing import Final


# State constants for the state machine
_CODE: Final[int] = 0
_IN_STRING: Final[int] = 1
_ESCAPED: Final[int] = 2

COMMENT_MARKERS: Final[tuple[str, str]] = ("//", "/*")

# Receives the full text and the index of a code-position character, returns
# the text to emit and the index to continue scanning from.
CodeHandler = Callable[[str, int], tuple[str, int]]


def _next_string_state(char: str) -> int:
    """Return the state following a character read inside a string."""
    if char == "\\":
        return _ESCAPED
    if char == '"':
        return _CODE
    return _IN_STRING


def transform(text: str, on_code: CodeHandler) -> str:
    """Rewrite text, delegating every code-position character to a handler.

    String literals (including their quotes and escape pairs) are copied
    verbatim. Everything else is passed to ``on_code``, which decides what
    to emit and may consume several characters at once.

    Args:
        text: Source text to scan
        on_code: Handler called as ``on_code(text, index)``

    Returns:
        The transformed text

    Raises:
        ValueError: If the handler does not advance past ``index``

    Example:
        >>> transform('a "a" a', lambda t, i: (t[i].upper(), i + 1))
        'A "a" A'
    """
    result: list[str] = []
    i = 0
    n = len(text)
    state = _CODE

    while i < n:
        char = text[i]

        if state == _ESCAPED:
            result.append(char)
            state = _IN_STRING
            i += 1
        elif state == _IN_STRING:
            result.append(char)
            state = _next_string_state(char)
            i += 1
        elif char == '"':
            result.append(char)
            state = _IN_STRING
            i += 1
        else:
            emitted, next_i = on_code(text, i)
            if next_i <= i:
                raise ValueError(
                    f"Code handler must advance past index {i}, got {next_i}"
                )
            result.append(emitted)
            i = next_i

    return "".join(result)


def code_positions(text: str) -> Iterator[int]:
    """Yield the index of every character that lies outside string literals.

    Opening and closing quotes belong to the string and are not yielded.

    Example:
        >>> list(code_positions('1 "//" 2'))
        [0, 1, 6, 7]
    """
    state = _CODE
    for i, char in enumerate(text):
        if state == _ESCAPED:
            state = _IN_STRING
        elif state == _IN_STRING:
            state = _next_string_state(char)
        elif char == '"':
            state = _IN_STRING
        else:
            yield i


def has_comment_markers(text: str) -> bool:
    """Check whether ``//`` or ``/*`` appears anywhere outside a string."""
    return any(text.startswith(COMMENT_MARKERS, i) for i in code_positions(text))


__all__ = [
    "COMMENT_MARKERS",
    "CodeHandler",
    "transform",
    "code_positions",
    "has_comment_markers",
]
