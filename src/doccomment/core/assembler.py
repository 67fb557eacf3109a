"""
Block assembler: commit a finished segment into a Record.
"""

from __future__ import annotations

from doccomment.core.logging import get_logger
from doccomment.core.models import Entry, Record
from doccomment.core.normalize import NEWLINE

logger = get_logger(__name__)

# Tags whose text also feeds Record.brief
BRIEF_TAGS = frozenset({"", "brief"})


def commit_segment(record: Record, tag: str, lines: list[str]) -> Entry | None:
    """Trim a segment's lines and append it to ``record``.

    One trailing empty line is dropped, then one leading empty line. If no
    lines remain the segment is dropped.

    Args:
        record: Record being built (mutated in place)
        tag: Segment tag name
        lines: Cleaned content lines of the segment

    Returns:
        The appended Entry, or None if the segment was dropped
    """
    lines = list(lines)

    if lines and lines[-1] == "":
        lines.pop()
    if lines and lines[0] == "":
        lines.pop(0)

    if not lines:
        logger.debug("segment_dropped", tag=tag)
        return None

    text = NEWLINE.join(lines)

    if tag in BRIEF_TAGS:
        if record.brief:
            record.brief += NEWLINE
        record.brief += text

    entry = Entry(tag=tag, text=text)
    record.entries.append(entry)
    return entry


__all__ = ["BRIEF_TAGS", "commit_segment"]
