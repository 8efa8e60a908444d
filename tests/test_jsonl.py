"""Tests for JSON Lines decoding and encoding."""

import json

import pytest

from flexjson.errors import FlexJsonError, JsonlDecodeError
from flexjson.jsonl import dump_jsonl, parse_jsonl


class TestParseJsonl:
    """Tests for parse_jsonl()."""

    def test_single_line(self):
        assert parse_jsonl('{"id": 1}') == [{"id": 1}]

    def test_multiple_lines_keep_order(self):
        text = (
            '{"id": 1, "name": "Alice"}\n'
            '{"id": 2, "name": "Bob"}\n'
            '{"id": 3, "name": "Charlie"}'
        )
        assert parse_jsonl(text) == [
            {"id": 1, "name": "Alice"},
            {"id": 2, "name": "Bob"},
            {"id": 3, "name": "Charlie"},
        ]

    def test_blank_lines_skipped(self):
        assert parse_jsonl('{"a":1}\n\n{"b":2}\n\n') == [{"a": 1}, {"b": 2}]

    def test_whitespace_only_lines_skipped(self):
        assert parse_jsonl('  {"a": 1}  \n \t \n[2]') == [{"a": 1}, [2]]

    def test_crlf_line_endings(self):
        assert parse_jsonl('{"a": 1}\r\n{"b": 2}\r\n') == [{"a": 1}, {"b": 2}]

    def test_array_rows(self):
        text = '[1, "Alice", 30]\n[2, "Bob", 25]'
        assert parse_jsonl(text) == [[1, "Alice", 30], [2, "Bob", 25]]

    def test_scalar_values(self):
        assert parse_jsonl('42\n"hello"\ntrue\nnull') == [42, "hello", True, None]

    def test_non_ascii_text(self):
        text = '{"name": "田中太郎"}\n{"name": "山田花子"}'
        assert parse_jsonl(text) == [{"name": "田中太郎"}, {"name": "山田花子"}]

    def test_empty_input(self):
        assert parse_jsonl("") == []
        assert parse_jsonl("\n\n") == []

    def test_error_reports_line_number(self):
        with pytest.raises(JsonlDecodeError, match="line 2"):
            parse_jsonl('{"valid": true}\n{invalid json}')

    def test_error_line_counts_blank_lines(self):
        """Line numbers count raw lines, blank ones included."""
        with pytest.raises(JsonlDecodeError) as exc:
            parse_jsonl('{"a": 1}\n\n{bad}')
        assert exc.value.lineno == 3
        assert "line 3" in str(exc.value)

    def test_error_details(self):
        with pytest.raises(JsonlDecodeError) as exc:
            parse_jsonl('{"ok": 1}\n  {bad}')
        error = exc.value
        assert error.line == "  {bad}"
        assert isinstance(error.error, json.JSONDecodeError)
        assert error.__cause__ is error.error
        assert str(error).startswith("JSONL parse error on line 2: ")
        assert error.error.msg in str(error)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_jsonl("[1]\n[2")
        assert issubclass(JsonlDecodeError, FlexJsonError)

    def test_deeply_nested_line_reports_line_number(self):
        """A line too deep for the decoder fails like any other bad line."""
        with pytest.raises(JsonlDecodeError) as exc:
            parse_jsonl("1\n" + "[" * 100000)
        assert exc.value.lineno == 2
        assert "line 2" in str(exc.value)
        assert "nested too deeply" in str(exc.value)
        assert isinstance(exc.value.__cause__, RecursionError)


class TestDumpJsonl:
    """Tests for dump_jsonl()."""

    def test_one_value_per_line(self):
        assert dump_jsonl([[1, "Alice"], [2, "Bob"]]) == '[1, "Alice"]\n[2, "Bob"]\n'

    def test_empty(self):
        assert dump_jsonl([]) == ""

    def test_non_ascii_kept_by_default(self):
        assert dump_jsonl([{"name": "田中"}]) == '{"name": "田中"}\n'

    def test_ensure_ascii(self):
        assert "\\u7530" in dump_jsonl([{"name": "田中"}], ensure_ascii=True)

    def test_sort_keys(self):
        assert dump_jsonl([{"b": 1, "a": 2}], sort_keys=True) == '{"a": 2, "b": 1}\n'

    def test_output_parses_back(self):
        values = [{"a": 1}, [1, 2], "x", None]
        assert parse_jsonl(dump_jsonl(values)) == values
