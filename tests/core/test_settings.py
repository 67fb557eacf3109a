"""Tests for doccomment.core.settings."""

import pytest

from doccomment.core.errors import ConfigError
from doccomment.core.settings import DocCommentSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any local .env file."""
    for key in ("LOG_LEVEL", "JSON_LOGS", "ENCODING", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"DOCCOMMENT_{key}", raising=False)
    monkeypatch.chdir(tmp_path)


class TestDocCommentSettings:
    """Tests for the settings model."""

    def test_defaults(self):
        settings = DocCommentSettings()
        assert settings.log_level == "WARNING"
        assert settings.json_logs is None
        assert settings.encoding == "utf-8"
        assert settings.output_format == "table"

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("DOCCOMMENT_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("DOCCOMMENT_JSON_LOGS", "true")
        settings = DocCommentSettings()
        assert settings.output_format == "json"
        assert settings.json_logs is True

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("DOCCOMMENT_LOG_LEVEL", "debug")
        assert DocCommentSettings().log_level == "DEBUG"

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("DOCCOMMENT_ENCODING=latin-1\n")
        assert DocCommentSettings().encoding == "latin-1"

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("DOCCOMMENT_SOMETHING_ELSE", "x")
        assert DocCommentSettings().encoding == "utf-8"


class TestGetSettings:
    """Tests for cached settings loading."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("DOCCOMMENT_OUTPUT_FORMAT", "json")
        assert get_settings().output_format == first.output_format
        assert get_settings(_force_reload=True).output_format == "json"

    @pytest.mark.parametrize(
        "key, value",
        [("LOG_LEVEL", "LOUD"), ("OUTPUT_FORMAT", "xml"), ("ENCODING", "")],
    )
    def test_invalid_values_raise_config_error(self, monkeypatch, key, value):
        monkeypatch.setenv(f"DOCCOMMENT_{key}", value)
        with pytest.raises(ConfigError) as exc_info:
            get_settings()
        assert exc_info.value.cause is not None
