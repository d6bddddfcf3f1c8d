"""Immutable records flowing through the build pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from pathlib import PurePosixPath
from typing import Any


@dataclass(frozen=True, slots=True)
class RawRecord:
    """A front-matter block paired with its unparsed body.

    Attributes:
        source_id: Identity of the record in its store, e.g. ``posts/hello.md``.
        metadata: Flat key/value mapping read from the front-matter.
        body: Markdown source, handed untouched to the content converter.
        parse_error: Set when the front-matter block itself could not be read.
    """

    source_id: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    body: str = ""
    parse_error: str | None = None

    @property
    def base_name(self) -> str:
        """File name of the record without its extension."""
        return PurePosixPath(self.source_id).stem


@dataclass(frozen=True, slots=True)
class Document:
    """A validated article with fully resolved metadata."""

    slug: str
    title: str
    date: date
    author: str
    body: str
    source_id: str
    tags: frozenset[str] = frozenset()
    draft: bool = False
    thumbnail: str | None = None
    description: str | None = None
    sequence: int = 0


@dataclass(frozen=True, slots=True)
class Route:
    """Binding of a public path to the slug of the document it renders."""

    slug: str
    source_id: str
    path: str
    sequence: int = 0


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """Final HTML for one route."""

    slug: str
    path: str
    title: str
    html: str
