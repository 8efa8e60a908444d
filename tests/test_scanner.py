"""Tests for string-literal aware scanning."""

import pytest

from flexjson.scanner import code_positions, has_comment_markers, transform


def _copy(text: str, i: int) -> tuple[str, int]:
    return text[i], i + 1


class TestTransform:
    """Tests for transform()."""

    def test_identity_handler_returns_same_text(self):
        """Copying every code character reproduces the input."""
        for text in ['{"a": 1}', '["x\\"y", "C:\\\\"]', "", '"unterminated']:
            assert transform(text, _copy) == text

    def test_handler_only_sees_code_characters(self):
        """String contents are never passed to the handler."""
        seen = []

        def record(text, i):
            seen.append(text[i])
            return text[i], i + 1

        transform('{"k": "v//"}', record)
        assert "".join(seen) == "{: }"

    def test_handler_output_replaces_code_characters(self):
        """Code characters are rewritten, strings are copied."""
        result = transform('a "a" a', lambda t, i: (t[i].upper(), i + 1))
        assert result == 'A "a" A'

    def test_handler_can_consume_several_characters(self):
        """A handler may skip ahead past more than one character."""

        def drop_xx(text, i):
            if text.startswith("xx", i):
                return "", i + 2
            return text[i], i + 1

        assert transform('axxb "xx"', drop_xx) == 'ab "xx"'

    def test_escaped_quote_does_not_end_string(self):
        """An escaped quote keeps the scanner inside the string."""
        text = '"a\\"b" x'
        result = transform(text, lambda t, i: ("_", i + 1))
        assert result == '"a\\"b"__'

    def test_handler_must_advance(self):
        """A handler that does not advance raises ValueError."""
        with pytest.raises(ValueError, match="must advance"):
            transform("abc", lambda t, i: ("", i))


class TestCodePositions:
    """Tests for code_positions()."""

    def test_quotes_and_contents_are_skipped(self):
        assert list(code_positions('1 "//" 2')) == [0, 1, 6, 7]

    def test_escaped_quote_inside_string(self):
        """Only the characters after the real closing quote are code."""
        assert list(code_positions('"a\\"b" x')) == [6, 7]

    def test_escaped_backslash_before_closing_quote(self):
        """A trailing \\\\ does not escape the closing quote."""
        text = '"C:\\\\" x'
        assert list(code_positions(text)) == [6, 7]

    def test_unterminated_string_yields_nothing_after_quote(self):
        assert list(code_positions('x "abc')) == [0, 1]


class TestHasCommentMarkers:
    """Tests for has_comment_markers()."""

    def test_url_in_string_is_not_a_comment(self):
        assert has_comment_markers('{"url": "https://x.com"}') is False

    def test_block_marker_in_string_is_not_a_comment(self):
        assert has_comment_markers('{"p": "/* x */"}') is False

    def test_line_comment_outside_string(self):
        assert has_comment_markers('{"a": 1} // note') is True

    def test_block_comment_outside_string(self):
        assert has_comment_markers('{"a": /* c */ 1}') is True

    def test_comment_after_escaped_backslash(self):
        """A string ending in \\\\ closes before the comment."""
        assert has_comment_markers('{"p": "C:\\\\"} // c') is True

    def test_single_slash_is_not_a_comment(self):
        assert has_comment_markers("1 / 2") is False

    def test_comment_inside_unterminated_string(self):
        assert has_comment_markers('"abc // not code') is False
