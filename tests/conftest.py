"""
Shared pytest fixtures and configuration for doccomment tests.

This module provides:
- Sample documentation comments (block, line-style, multi-block)
- Settings cache and structlog cleanup for test isolation
"""

import logging
import sys
from pathlib import Path

import pytest
import structlog

# Ensure doccomment package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from doccomment.core import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings so env changes are seen by each test."""
    settings_module._settings_cache.clear()
    yield
    settings_module._settings_cache.clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog and root logger defaults after tests that configure logging."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def sourcepawn_comment():
    """A SourcePawn-style native documentation comment."""
    return """/**
 * Gets a function id from a function name.
 *
 * @param plugin        Handle of the plugin that contains the function.
 *                      Pass INVALID_HANDLE to search in the calling plugin.
 * @param name          Name of the function.
 * @return              Function id or INVALID_FUNCTION if not found.
 * @error               Invalid or corrupt plugin handle.
 */"""


@pytest.fixture
def line_comment():
    """Consecutive // lines followed by code."""
    return (
        "// Returns the client's team.\n"
        "//\n"
        "// @param client    Client index.\n"
        "// @return          Team index.\n"
        "    native int GetClientTeam(int client);\n"
    )


@pytest.fixture
def multi_block_source():
    """Two documented declarations in one source blob."""
    return (
        "/** First function. */\n"
        "native void First();\n"
        "\n"
        "/**\n"
        " * Second function.\n"
        " * @return Nothing useful.\n"
        " */\n"
        "native int Second();\n"
    )


@pytest.fixture
def source_file(tmp_path, sourcepawn_comment):
    """Source file on disk holding the SourcePawn comment."""
    path = tmp_path / "functions.inc"
    path.write_text(sourcepawn_comment + "\nnative Function GetFunctionByName(Handle plugin, const char[] name);\n")
    return path
