"""Tests for doccomment.cli.utils."""

import io

import pytest

from doccomment.cli.utils import read_source
from doccomment.core.errors import ErrorCategory, SourceError, SourceNotFoundError


class TestReadSource:
    """Tests for reading source text."""

    def test_reads_file(self, source_file):
        assert read_source(str(source_file)).startswith("/**")

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("// piped"))
        assert read_source("-") == "// piped"

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "nope.sp")
        with pytest.raises(SourceNotFoundError) as exc_info:
            read_source(path)
        assert exc_info.value.context.source_path == path
        assert exc_info.value.category == ErrorCategory.SOURCE

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(SourceNotFoundError):
            read_source(str(tmp_path))

    def test_unknown_encoding(self, source_file):
        with pytest.raises(SourceError) as exc_info:
            read_source(str(source_file), encoding="no-such-codec")
        assert isinstance(exc_info.value.cause, LookupError)
        assert exc_info.value.context.metadata["encoding"] == "no-such-codec"
