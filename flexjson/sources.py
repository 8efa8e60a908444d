"""Reading input text from files or strings."""

import logging
from pathlib import Path

from .errors import SourceError
from .flexible import AUTO, parse_as
from .types import JsonFormat, ParseResult

_logging = logging.getLogger(__name__)


def read_source(path_or_text: Path | str) -> str:
    """Return the text of a file path, or a string unchanged.

    Args:
        path_or_text: Either a Path to read as UTF-8, or the text itself

    Returns:
        The source text

    Raises:
        SourceError: If the file cannot be read
        TypeError: If path_or_text is neither Path nor str
    """
    if isinstance(path_or_text, str):
        return path_or_text
    if not isinstance(path_or_text, Path):
        raise TypeError(
            f"path_or_text must be Path or str, got {type(path_or_text).__name__}"
        )

    file_path = path_or_text
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SourceError(f"File not found: {file_path}")
    except PermissionError:
        raise SourceError(f"Permission denied reading file: {file_path}")
    except IsADirectoryError:
        raise SourceError(f"Expected a file but found a directory: {file_path}")
    except UnicodeDecodeError:
        raise SourceError(f"File is not valid UTF-8: {file_path}")
    except OSError as e:
        raise SourceError(f"Error reading file {file_path}: {e}")

    _logging.debug(f"Read {len(text)} characters from {file_path}")
    return text


def load_flexible(
    path_or_text: Path | str,
    fmt: JsonFormat | str = AUTO,
    trailing_commas: bool = False,
) -> ParseResult:
    """Read a source and parse it as JSON, JSONC or JSONL.

    Raises:
        SourceError: If the file cannot be read
        ValueError: If fmt is not a known format name
        json.JSONDecodeError: For JSON and JSONC syntax errors
        JsonlDecodeError: For a JSONL line that is not valid JSON
    """
    text = read_source(path_or_text)
    result = parse_as(text, fmt, trailing_commas=trailing_commas)
    _logging.debug(f"Parsed input as {result.format.value} (requested: {fmt})")
    return result


__all__ = ["read_source", "load_flexible"]
