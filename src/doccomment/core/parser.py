"""
Comment parser: the pipeline entry point.

Turns raw, comment-bearing text into a :class:`~doccomment.core.models.Record`.

Manifesto:
    Documentation tools scan code they do not control. The parser is
    best-effort and tolerant: unterminated comments, malformed ``@tag``
    lines and empty bodies degrade to partial or empty records rather than
    aborting a larger documentation pass.

Architecture:
    ::

        raw text
           │
           ▼
        normalize_newlines()
           │
           ▼
        scan_comments() ──► CommentBody (one per /* */ or // run)
           │
           ├──► clean_lines(body)
           ├──► segment_lines(lines) ──► Segment(tag, lines)
           └──► commit_segment(record, tag, lines)
           │
           ▼
        Record(brief, entries)   (all comment blocks merged)

Features:
    - Block comments (``/* */``, ``/** */``) and ``//`` / ``///`` runs
    - ``@param name text`` folded into ``param:name`` tags
    - Untagged and ``@brief`` text aggregated into ``Record.brief``
    - Several comments in one input merged into one record, in order

Examples:
    >>> record = parse('''/**
    ...  * Gets a function id from a function name.
    ...  *
    ...  * @param name          Name of the function.
    ...  * @return              Function id or INVALID_FUNCTION if not found.
    ...  */''')
    >>> record.brief
    'Gets a function id from a function name.'
    >>> [entry.tag for entry in record.entries]
    ['', 'param:name', 'return']

Guardrails:
    - Never raises for text input
    - No file I/O; callers read sources themselves
    - No state shared between calls

Tags:
    parser, doc-comments, core

Doc-Types:
    - API Reference (section: "Parser", priority: 9)
"""

from __future__ import annotations

from typing import Any

from doccomment.core.assembler import commit_segment
from doccomment.core.logging import get_logger
from doccomment.core.models import Record
from doccomment.core.normalize import clean_lines, normalize_newlines
from doccomment.core.scanner import CommentBody, scan_comments
from doccomment.core.segmenter import segment_lines

logger = get_logger(__name__)


def coerce_text(data: Any) -> str:
    """Convert parser input to ``str``.

    ``bytes`` and ``bytearray`` are decoded as UTF-8, replacing invalid
    sequences; anything else goes through ``str()``.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return str(data)


class CommentParser:
    """Parse documentation comments into records.

    Stateless: a single instance can be shared between threads, every call
    builds its own Record.
    """

    def parse(self, data: Any) -> Record:
        """Parse every comment in ``data`` into one merged Record.

        Args:
            data: Comment-bearing text, delimiters included

        Returns:
            Record with the merged brief and all entries in source order
        """
        text = normalize_newlines(coerce_text(data))
        record = Record()

        blocks = 0
        for body in scan_comments(text):
            self._consume_body(record, body)
            blocks += 1

        logger.debug("parse_completed", blocks=blocks, entries=len(record.entries))
        return record

    def _consume_body(self, record: Record, body: CommentBody) -> None:
        for segment in segment_lines(clean_lines(body.text)):
            commit_segment(record, segment.tag, segment.lines)


_default_parser = CommentParser()


def parse(data: Any) -> Record:
    """Parse comment-bearing text into a Record. See :class:`CommentParser`."""
    return _default_parser.parse(data)


__all__ = ["CommentParser", "coerce_text", "parse"]
