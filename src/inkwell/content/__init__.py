"""Document store, validation and collection queries."""

from inkwell.content.collection import DocumentCollection
from inkwell.content.exceptions import (
    ContentError,
    ContentSourceError,
    NotFoundError,
    ValidationError,
)
from inkwell.content.store import DocumentStore, FilesystemDocumentStore, MemoryDocumentStore
from inkwell.content.validation import ArticleMetadata, ValidationReport, validate, validate_records

__all__ = [
    "ArticleMetadata",
    "ContentError",
    "ContentSourceError",
    "DocumentCollection",
    "DocumentStore",
    "FilesystemDocumentStore",
    "MemoryDocumentStore",
    "NotFoundError",
    "ValidationError",
    "ValidationReport",
    "validate",
    "validate_records",
]
