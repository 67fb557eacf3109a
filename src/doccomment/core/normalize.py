"""
Text normalization for comment parsing.

Two stages live here:

- ``normalize_newlines`` rewrites every line-ending variant to ``"\\n"``
  before the delimiter scanner walks the text.
- ``clean_line`` / ``clean_lines`` strip per-line decoration from a raw
  comment body (leading ``*`` continuation markers, ``<`` trailing-member
  markers, ``//`` prefixes, tab artifacts) so the tag segmenter only sees
  content.

Examples:
    >>> normalize_newlines("a\\r\\nb\\rc")
    'a\\nb\\nc'
    >>> clean_line("   * @return  value")
    '@return  value'
    >>> clean_lines(" first\\n * second\\n ")
    ['first', 'second', '']
"""

from __future__ import annotations

NEWLINE = "\n"

# Space, vertical tab, tab: left behind by some editors' column alignment.
TAB_ARTIFACT = " \x0b\t"


def normalize_newlines(text: str) -> str:
    """Replace ``\\r\\n`` and lone ``\\r`` with ``\\n``."""
    return text.replace("\r\n", NEWLINE).replace("\r", NEWLINE)


def clean_line(line: str) -> str:
    """Strip comment decoration from a single body line.

    Args:
        line: One raw line of a comment body (no line break)

    Returns:
        The line content, trimmed on both ends
    """
    line = line.lstrip()
    line = line.lstrip("*")
    line = line.lstrip("<")
    line = line.replace(TAB_ARTIFACT, "")
    line = line.replace("\t", " ")

    if line.startswith("//"):
        line = line.lstrip("/")

    return line.strip()


def clean_lines(body: str) -> list[str]:
    """Split a raw comment body into cleaned lines."""
    return [clean_line(line) for line in body.split(NEWLINE)]


__all__ = [
    "NEWLINE",
    "normalize_newlines",
    "clean_line",
    "clean_lines",
]
