"""Custom exceptions for reading and validating content."""

from __future__ import annotations

from collections.abc import Iterable

from inkwell.exceptions import InkwellError


class ContentError(InkwellError):
    """Base class for content collection errors."""


class ContentSourceError(ContentError):
    """Raised when the content source cannot be read at all."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read content source at '{path}': {reason}")


class ValidationError(ContentError):
    """Raised when a record's front-matter is missing or has invalid fields."""

    def __init__(self, source_id: str, fields: Iterable[str], detail: str | None = None) -> None:
        self.source_id = source_id
        self.fields = tuple(fields)
        self.detail = detail
        message = f"Invalid document '{source_id}': bad or missing field(s) {', '.join(self.fields)}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class NotFoundError(ContentError):
    """Raised when no document in the collection has the requested slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"No document with slug '{slug}'.")
