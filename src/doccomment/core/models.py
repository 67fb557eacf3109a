"""
Record data model for parsed documentation comments.

Manifesto:
    A parsed comment is plain data. ``Record`` carries the human-readable
    summary (``brief``) and the ordered tag entries; it knows how to turn
    itself into dicts and JSON so a documentation generator can store or
    ship it without touching the parser again.

Architecture:
    ::

        ┌────────────────────────────────────────────┐
        │                  Record                     │
        ├────────────────────────────────────────────┤
        │  brief: str          (aggregate of "" and  │
        │                       "brief" entries)     │
        │  entries: list[Entry]                      │
        │     ├── Entry(tag="",          text=...)   │
        │     ├── Entry(tag="param:x",   text=...)   │
        │     └── Entry(tag="return",    text=...)   │
        └────────────────────────────────────────────┘

Examples:
    >>> record = Record.parse("/** Adds. \\n * @return Sum. */")
    >>> record.brief
    'Adds.'
    >>> record.to_dict()["entries"][1]
    {'tag': 'return', 'text': 'Sum.'}

Tags:
    models, record, serialization, doccomment

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from doccomment.core.errors import RecordFormatError


@dataclass
class Entry:
    """One committed (tag, text) pair.

    Attributes:
        tag: ``""`` for untagged text, a bare word such as ``"return"``,
            or ``"param:<name>"`` / ``"param:unknown"``
        text: Normalized body, internal line breaks preserved
    """

    tag: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"tag": self.tag, "text": self.text}


@dataclass
class Record:
    """Result of parsing a documentation comment.

    Attributes:
        brief: Summary text gathered from untagged and ``@brief`` segments
        entries: Every committed segment, in source order
    """

    brief: str = ""
    entries: list[Entry] = field(default_factory=list)

    @classmethod
    def parse(cls, data: Any) -> Record:
        """Parse comment-bearing text into a Record.

        See ``doccomment.core.parser.parse``.
        """
        from doccomment.core.parser import parse

        return parse(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a JSON-compatible dictionary."""
        return {
            "brief": self.brief,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Any) -> Record:
        """Rebuild a record from ``to_dict`` output.

        Args:
            data: Mapping with ``brief`` (str) and ``entries`` (list of
                mappings with ``tag`` and ``text``)

        Returns:
            Record instance

        Raises:
            RecordFormatError: If the payload does not have the expected shape
        """
        if not isinstance(data, dict):
            raise RecordFormatError(
                f"Record payload must be a mapping, got {type(data).__name__}"
            )

        brief = data.get("brief", "")
        if not isinstance(brief, str):
            raise RecordFormatError("Record 'brief' must be a string")

        raw_entries = data.get("entries", [])
        if not isinstance(raw_entries, list):
            raise RecordFormatError("Record 'entries' must be a list")

        entries = []
        for index, item in enumerate(raw_entries):
            if not isinstance(item, dict):
                raise RecordFormatError(
                    f"Entry #{index} must be a mapping"
                ).with_context(index=index)
            try:
                tag, text = item["tag"], item["text"]
            except KeyError as e:
                raise RecordFormatError(
                    f"Entry #{index} is missing key {e.args[0]!r}", cause=e
                ).with_context(index=index)
            if not isinstance(tag, str) or not isinstance(text, str):
                raise RecordFormatError(
                    f"Entry #{index} 'tag' and 'text' must be strings"
                ).with_context(tag=str(tag), index=index)
            entries.append(Entry(tag=tag, text=text))

        return cls(brief=brief, entries=entries)

    @classmethod
    def from_json(cls, text: str) -> Record:
        """Rebuild a record from ``to_json`` output."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordFormatError(f"Invalid record JSON: {e.msg}", cause=e)
        return cls.from_dict(data)


__all__ = ["Entry", "Record"]
