"""Derive the route table from a set of validated documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from inkwell.data_primitives import Document, Route
from inkwell.routing.slugs import index_by_slug

logger = logging.getLogger(__name__)

DEFAULT_ROUTE_PREFIX = "blog"


def route_path(slug: str, route_prefix: str = DEFAULT_ROUTE_PREFIX) -> str:
    """Public path of a slug, e.g. ``/blog/hello``."""
    prefix = route_prefix.strip("/")
    return f"/{prefix}/{slug}" if prefix else f"/{slug}"


def derive_routes(
    documents: Iterable[Document],
    *,
    include_drafts: bool = False,
    route_prefix: str = DEFAULT_ROUTE_PREFIX,
) -> list[Route]:
    """Compute one route per publishable document.

    Slug uniqueness is checked over every document, drafts included, before
    any route is produced, so a clash never yields a partial table.

    Raises:
        DuplicateRouteError: if two documents resolve to the same slug.

    """
    ordered = sorted(documents, key=lambda doc: doc.sequence)
    index_by_slug(ordered)

    routes: list[Route] = []
    for document in ordered:
        if document.draft and not include_drafts:
            logger.info("Skipping draft %s", document.source_id)
            continue
        routes.append(
            Route(
                slug=document.slug,
                source_id=document.source_id,
                path=route_path(document.slug, route_prefix),
                sequence=document.sequence,
            )
        )
    return routes
