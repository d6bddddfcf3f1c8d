"""Render one route into a complete page."""

from __future__ import annotations

import logging

from inkwell.content.collection import DocumentCollection
from inkwell.data_primitives import RenderedPage, Route
from inkwell.rendering.converter import ContentConverter, MarkdownConverter
from inkwell.rendering.exceptions import ConversionError
from inkwell.rendering.shell import PageShell
from inkwell.utils.dates import DEFAULT_DATE_FORMAT, format_display_date

logger = logging.getLogger(__name__)


class PageRenderer:
    """Resolves a route's document, converts its body and wraps it in the shell.

    Rendering only reads the collection, so one renderer can serve many
    threads at once.
    """

    def __init__(
        self,
        collection: DocumentCollection,
        converter: ContentConverter | None = None,
        shell: PageShell | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self.collection = collection
        self.converter = converter or MarkdownConverter()
        self.shell = shell or PageShell()
        self.date_format = date_format

    def render(self, route: Route) -> RenderedPage:
        """Render ``route``.

        Raises:
            NotFoundError: if the route points at a slug missing from the
                collection, which means routes and documents are out of sync.
            ConversionError: if the body cannot be converted.

        """
        document = self.collection.by_id(route.slug)

        try:
            body = self.converter.convert(document.body)
        except Exception as e:  # the converter is an external capability
            raise ConversionError(route.slug, f"{type(e).__name__}: {e}") from e

        content = self.shell.article(
            title=document.title,
            author=document.author,
            date=format_display_date(document.date, self.date_format),
            body=body,
        )
        html = self.shell.compose(document.title, content)
        logger.debug("Rendered %s from %s", route.path, document.source_id)
        return RenderedPage(slug=route.slug, path=route.path, title=document.title, html=html)
