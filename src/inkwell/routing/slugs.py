"""Slug indexing shared by the collection and the route deriver."""

from __future__ import annotations

from collections.abc import Iterable

from inkwell.data_primitives import Document
from inkwell.routing.exceptions import DuplicateRouteError


def index_by_slug(documents: Iterable[Document]) -> dict[str, Document]:
    """Map every slug to its document, refusing ambiguous slugs.

    Raises:
        DuplicateRouteError: for the first slug (in document order) claimed
            more than once, naming every source that claims it.

    """
    claims: dict[str, list[Document]] = {}
    for document in documents:
        claims.setdefault(document.slug, []).append(document)

    for slug, claimants in claims.items():
        if len(claimants) > 1:
            raise DuplicateRouteError(slug, [doc.source_id for doc in claimants])

    return {slug: claimants[0] for slug, claimants in claims.items()}
