"""Shared value types for flexjson."""

from dataclasses import dataclass
from enum import Enum

JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)


class JsonFormat(Enum):
    JSON = "json"
    JSONC = "jsonc"
    JSONL = "jsonl"


@dataclass(frozen=True)
class ParseResult:
    """A parsed document tagged with the format it was parsed as.

    ``value`` is a list with one entry per line when ``format`` is JSONL,
    and an arbitrary JSON value otherwise.
    """

    format: JsonFormat
    value: JsonValue


__all__ = ["JsonValue", "JsonFormat", "ParseResult"]
