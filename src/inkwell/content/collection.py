"""Read-only queries over the validated document set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from inkwell.content.exceptions import NotFoundError
from inkwell.data_primitives import Document
from inkwell.routing.slugs import index_by_slug


class DocumentCollection:
    """The validated documents of one build, indexed by slug.

    ``all()`` can be iterated any number of times; the collection exposes no
    way to add, remove or replace documents.
    """

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents = tuple(sorted(documents, key=lambda doc: doc.sequence))
        self._by_slug = index_by_slug(self._documents)

    def all(self) -> tuple[Document, ...]:
        return self._documents

    def by_id(self, slug: str) -> Document:
        try:
            return self._by_slug[slug]
        except KeyError:
            raise NotFoundError(slug) from None

    def by_tag(self, tag: str) -> tuple[Document, ...]:
        return tuple(doc for doc in self._documents if tag in doc.tags)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug
