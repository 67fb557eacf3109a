"""
Delimiter scanner and comment body extractors.

The scanner walks normalized text once, left to right, looking for ``/*`` and
``//``. Each hit is handed to the extractor for that delimiter style, which
returns the raw body and the position where scanning resumes. Positions are
plain integer indices passed by value; no iterator state is shared between
the scanner and the extractors.

Architecture:
    ::

        scan_comments(text)
              │
              ├── "/*" ──► extract_block_body(text, start) ──► (body, resume)
              │
              └── "//" ──► extract_line_body(text, start)  ──► (body, resume)
                                                                   │
              ◄──────────── scanning continues at resume ◄─────────┘

Guardrails:
    - A block comment without ``*/`` runs to end of input
    - Whitespace-only lines do not end a ``//`` run
    - The scanner never rewinds; each character is visited once
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from doccomment.core.logging import get_logger
from doccomment.core.normalize import NEWLINE

logger = get_logger(__name__)

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"
LINE_OPEN = "//"


class CommentStyle(str, Enum):
    """Delimiter style of a discovered comment."""

    BLOCK = "block"  # /* ... */
    LINE = "line"    # // ... runs


@dataclass(frozen=True)
class CommentBody:
    """A raw comment body located in the scanned text.

    Attributes:
        style: Delimiter style that opened the comment
        text: Raw body between the delimiters (decoration still present)
        start: Index of the first body character
        end: Index one past the last body character
        resume: Index where the scanner continues after this comment
    """

    style: CommentStyle
    text: str
    start: int
    end: int
    resume: int


def extract_block_body(text: str, start: int) -> tuple[str, int]:
    """Extract a ``/* ... */`` body.

    Args:
        text: Normalized input text
        start: Index just after the opening ``/*``

    Returns:
        Tuple of (body, resume position). The body excludes ``*/``; an
        unterminated comment yields everything up to end of input.
    """
    close = text.find(BLOCK_CLOSE, start)
    if close == -1:
        return text[start:], len(text)
    return text[start:close], close + len(BLOCK_CLOSE)


def extract_line_body(text: str, start: int) -> tuple[str, int]:
    """Extract a run of consecutive ``//`` lines.

    Args:
        text: Normalized input text
        start: Index just after the first ``//``

    Returns:
        Tuple of (body, resume position). The body stops at the line break
        before the first line whose first non-whitespace character does not
        start a ``//`` pair; scanning resumes at that character.
    """
    length = len(text)
    pos = start

    while True:
        line_end = text.find(NEWLINE, pos)
        if line_end == -1:
            return text[start:], length

        # First non-whitespace character of the next line
        probe = line_end + 1
        while probe < length and text[probe] != NEWLINE and text[probe].isspace():
            probe += 1

        if probe >= length:
            return text[start:], length

        if text[probe] == NEWLINE:
            # Whitespace-only line, the run continues
            pos = probe
        elif text.startswith(LINE_OPEN, probe):
            pos = probe + len(LINE_OPEN)
        else:
            return text[start:line_end], probe


def scan_comments(text: str) -> Iterator[CommentBody]:
    """Yield every comment body in ``text`` in source order.

    ``text`` is expected to be newline-normalized already.
    """
    length = len(text)
    pos = 0

    while pos < length - 1:
        if text[pos] != "/":
            pos += 1
            continue

        lookahead = text[pos + 1]
        if lookahead == "*":
            style, extract = CommentStyle.BLOCK, extract_block_body
        elif lookahead == "/":
            style, extract = CommentStyle.LINE, extract_line_body
        else:
            pos += 1
            continue

        start = pos + 2
        body, resume = extract(text, start)
        end = start + len(body)
        logger.debug("comment_found", style=style.value, start=start, end=end)

        yield CommentBody(style=style, text=body, start=start, end=end, resume=resume)
        pos = resume


__all__ = [
    "CommentStyle",
    "CommentBody",
    "extract_block_body",
    "extract_line_body",
    "scan_comments",
]
