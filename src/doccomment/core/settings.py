"""Settings for the doccomment command-line tool.

The parsing library takes no configuration. The CLI reads its logging and
output preferences from the environment (``DOCCOMMENT_`` prefix) and an
optional ``.env`` file.

Features:
    - **DocCommentSettings:** log_level, json_logs, encoding, output_format
    - **env_prefix:** ``DOCCOMMENT_LOG_LEVEL=DEBUG`` and friends
    - **.env file support:** Automatic loading via pydantic-settings
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> import os
    >>> os.environ["DOCCOMMENT_OUTPUT_FORMAT"] = "json"
    >>> get_settings(_force_reload=True).output_format
    'json'
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from doccomment.core.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DocCommentSettings(BaseSettings):
    """Settings for the doccomment CLI.

    Fields
    ──────
    log_level      : Structlog log level
    json_logs      : JSON log output; None auto-detects (JSON when not a tty)
    encoding       : Encoding used to read source files
    output_format  : Default rendering of parsed records (table or json)
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCCOMMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None

    # ── Input / output ───────────────────────────────────────────
    encoding: str = Field(default="utf-8", min_length=1)
    output_format: Literal["table", "json"] = "table"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


_settings_cache: dict[str, DocCommentSettings] = {}


def get_settings(*, _force_reload: bool = False) -> DocCommentSettings:
    """Load, validate, and cache the settings.

    Raises:
        ConfigError: If environment values fail validation
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = DocCommentSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid doccomment settings: {e}", cause=e)

    _settings_cache["default"] = settings
    return settings


__all__ = ["DocCommentSettings", "LOG_LEVELS", "get_settings"]
