"""
Tag segmenter: split cleaned comment lines into tagged segments.

A segment is a run of lines governed by one tag name. The first segment of a
body is untagged (the brief); each ``@tag`` line closes the running segment
and opens a new one.

Examples:
    >>> lines = ["Gets a value.", "@param key   Lookup key.", "@return The value."]
    >>> [(s.tag, s.lines) for s in segment_lines(lines)]
    [('', ['Gets a value.']), ('param:key', ['Lookup key.']), ('return', ['The value.'])]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from doccomment.core.logging import get_logger

logger = get_logger(__name__)

TAG_MARKER = "@"
PARAM_TAG = "param"
UNKNOWN_PARAM = "unknown"


@dataclass
class Segment:
    """Lines collected under a single tag name."""

    tag: str = ""
    lines: list[str] = field(default_factory=list)


def split_tag_line(line: str) -> tuple[str, str] | None:
    """Split an ``@tag rest`` line into (tag name, first content line).

    Returns None for a malformed tag line: no space at all, or a space
    directly after ``@`` (zero-length tag name).

    ``@param`` gets its parameter name folded into the tag. When the
    remainder has no space the tag becomes ``param:unknown`` and the whole
    remainder is kept as content.
    """
    tag_end = line.find(" ")
    if tag_end == -1 or tag_end == 1:
        return None

    tag = line[1:tag_end]
    rest = line[tag_end + 1:].strip()

    if tag == PARAM_TAG:
        name_end = rest.find(" ")
        if name_end == -1:
            tag = f"{PARAM_TAG}:{UNKNOWN_PARAM}"
        else:
            tag = f"{PARAM_TAG}:{rest[:name_end]}"
            rest = rest[name_end + 1:].strip()

    return tag, rest


def segment_lines(lines: Iterable[str]) -> Iterator[Segment]:
    """Group cleaned lines into segments.

    Args:
        lines: Cleaned body lines, in order

    Yields:
        Segment objects in source order. The final segment is always
        yielded, even when it holds no lines.
    """
    current = Segment()
    committed = 0

    for line in lines:
        if line.startswith(TAG_MARKER):
            split = split_tag_line(line)
            if split is None:
                logger.debug("tag_line_discarded", line=line)
                continue

            if committed:
                yield current

            tag, line = split
            current = Segment(tag=tag)

        current.lines.append(line)
        committed += 1

    yield current


__all__ = [
    "Segment",
    "split_tag_line",
    "segment_lines",
]
