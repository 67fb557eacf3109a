"""
Structured error types for doccomment.

Parsing itself never fails: malformed comments degrade to partial or empty
records. Errors only surface at the edges of the library, where doccomment
talks to the outside world:

- **Source reading:** the CLI cannot read a file it was asked to parse
- **Record decoding:** a serialized record does not have the expected shape
- **Configuration:** environment settings fail validation

Every error carries a category, a structured context and an optional cause,
so callers can log ``error.to_dict()`` without losing the original exception.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                  DocCommentError                      │
        │          (category, context, cause)                   │
        ├──────────────────────────────────────────────────────┤
        │  SourceError          RecordFormatError   ConfigError │
        │  (SOURCE)             (PARSE)             (CONFIG)    │
        │      │                                                │
        │  SourceNotFoundError                                  │
        └──────────────────────────────────────────────────────┘

Examples:
    >>> error = SourceNotFoundError("No such file").with_context(source_path="a.sp")
    >>> error.to_dict()["context"]
    {'source_path': 'a.sp'}

    Chaining errors for root cause:

    >>> try:
    ...     raise OSError("permission denied")
    ... except OSError as e:
    ...     error = SourceError("Cannot read a.sp", cause=e)
    >>> error.cause
    OSError('permission denied')

Guardrails:
    ❌ DON'T: Raise from inside the parsing pipeline
    ✅ DO: Degrade gracefully and log at debug level

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, doccomment

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories for classification and reporting."""

    SOURCE = "SOURCE"       # Unreadable or missing input files
    PARSE = "PARSE"         # Malformed serialized records
    CONFIG = "CONFIG"       # Invalid settings
    INTERNAL = "INTERNAL"   # Bugs, unexpected state


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        source_path: File being read when the error occurred
        tag: Entry tag involved, if any
        metadata: Additional key-value pairs
    """

    source_path: str | None = None
    tag: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["source_path", "tag"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class DocCommentError(Exception):
    """Base exception for all doccomment errors.

    Subclasses set ``default_category`` to classify themselves.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DocCommentError:
        """
        Add context to this error (fluent API).

        Usage:
            raise SourceError("Failed").with_context(source_path="plugin.sp")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class SourceError(DocCommentError):
    """Input text could not be obtained from its source."""

    default_category = ErrorCategory.SOURCE


class SourceNotFoundError(SourceError):
    """Input file does not exist."""


class RecordFormatError(DocCommentError):
    """Serialized record payload is malformed."""

    default_category = ErrorCategory.PARSE


class ConfigError(DocCommentError):
    """Settings failed validation."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DocCommentError",
    "SourceError",
    "SourceNotFoundError",
    "RecordFormatError",
    "ConfigError",
]
