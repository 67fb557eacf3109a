"""
Core parsing pipeline for documentation comments.

Modules, leaf first:

- ``normalize``: newline normalization and per-line decoration stripping
- ``scanner``: ``/*`` / ``//`` delimiter scanning and body extraction
- ``segmenter``: ``@tag`` segmentation
- ``assembler``: committing segments into a Record
- ``models``: Record and Entry
- ``parser``: the ``parse`` entry point
"""

from doccomment.core.errors import (
    ConfigError,
    DocCommentError,
    ErrorCategory,
    ErrorContext,
    RecordFormatError,
    SourceError,
    SourceNotFoundError,
)
from doccomment.core.models import Entry, Record
from doccomment.core.parser import CommentParser, parse

__all__ = [
    "CommentParser",
    "ConfigError",
    "DocCommentError",
    "Entry",
    "ErrorCategory",
    "ErrorContext",
    "Record",
    "RecordFormatError",
    "SourceError",
    "SourceNotFoundError",
    "parse",
]
