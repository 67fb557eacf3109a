"""Tests for doccomment.core.normalize."""

import pytest

from doccomment.core.normalize import clean_line, clean_lines, normalize_newlines


class TestNormalizeNewlines:
    """Tests for line-ending normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("a\r\nb", "a\nb"),
            ("a\rb", "a\nb"),
            ("a\nb", "a\nb"),
            ("a\r\n\rb\n", "a\n\nb\n"),
            ("", ""),
        ],
    )
    def test_line_endings_become_newline(self, raw, expected):
        assert normalize_newlines(raw) == expected

    @pytest.mark.parametrize("raw", ["x\r\ny\rz", "\r\r\n\n", "plain text"])
    def test_idempotent(self, raw):
        once = normalize_newlines(raw)
        assert normalize_newlines(once) == once
        assert "\r" not in once


class TestCleanLine:
    """Tests for per-line decoration stripping."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("   * Some text", "Some text"),
            ("** doubled stars", "doubled stars"),
            ("*< member doc", "member doc"),
            ("//  slashes", "slashes"),
            ("  //// many slashes", "many slashes"),
            ("\t@param\tx\tvalue", "@param x value"),
            ("a \x0b\tb", "ab"),
            ("   ", ""),
            ("", ""),
        ],
    )
    def test_strips_decoration(self, raw, expected):
        assert clean_line(raw) == expected

    def test_single_slash_is_content(self):
        """Only a leading // pair triggers slash stripping."""
        assert clean_line("/ not a marker") == "/ not a marker"

    def test_less_than_before_star_is_kept(self):
        """Stars are stripped before '<', not the other way around."""
        assert clean_line("<* odd") == "* odd"

    def test_inner_stars_untouched(self):
        assert clean_line(" * a * b") == "a * b"


class TestCleanLines:
    """Tests for splitting a body into cleaned lines."""

    def test_splits_on_newline(self):
        assert clean_lines("* one\n * two\n ") == ["one", "two", ""]

    def test_empty_body_is_one_empty_line(self):
        assert clean_lines("") == [""]
