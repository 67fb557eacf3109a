"""
doccomment - structured data from documentation comments.

Parses ``/** ... */`` blocks and ``//`` runs into a brief summary plus an
ordered list of ``@tag`` entries, for embedding in documentation generators
and linters.

Example:
    >>> from doccomment import parse
    >>> record = parse("/** Brief text.\\n * @return value. */")
    >>> record.brief
    'Brief text.'
    >>> [(e.tag, e.text) for e in record.entries]
    [('', 'Brief text.'), ('return', 'value.')]
"""

from doccomment.core import (
    CommentParser,
    ConfigError,
    DocCommentError,
    Entry,
    Record,
    RecordFormatError,
    SourceError,
    SourceNotFoundError,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "CommentParser",
    "ConfigError",
    "DocCommentError",
    "Entry",
    "Record",
    "RecordFormatError",
    "SourceError",
    "SourceNotFoundError",
    "parse",
    "__version__",
]
