"""Custom exceptions for route derivation."""

from __future__ import annotations

from collections.abc import Iterable

from inkwell.exceptions import InkwellError


class RoutingError(InkwellError):
    """Base class for routing errors."""


class DuplicateRouteError(RoutingError):
    """Raised when two or more documents resolve to the same slug."""

    def __init__(self, slug: str, source_ids: Iterable[str]) -> None:
        self.slug = slug
        self.source_ids = tuple(source_ids)
        super().__init__(f"Slug '{slug}' is claimed by more than one document: {', '.join(self.source_ids)}")
