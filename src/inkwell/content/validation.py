"""Front-matter schema and the validator that turns raw records into documents.

Each record is validated on its own: a malformed article is excluded from the
build and reported, every other article proceeds normally.
"""

from __future__ import annotations

import datetime as dt
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic import ValidationError as PydanticValidationError

from inkwell.content.exceptions import ValidationError
from inkwell.data_primitives import Document, RawRecord
from inkwell.utils.dates import parse_calendar_date
from inkwell.utils.paths import is_url_safe_slug, slugify

logger = logging.getLogger(__name__)

FRONT_MATTER_FIELD = "front-matter"
SLUG_FIELD = "slug"

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ArticleMetadata(BaseModel):
    """Schema of an article's front-matter block."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    title: NonEmptyStr
    date: dt.date
    author: NonEmptyStr
    tags: frozenset[NonEmptyStr] = Field(default_factory=frozenset)
    draft: bool = False
    thumbnail: NonEmptyStr | None = None
    description: NonEmptyStr | None = None
    slug: NonEmptyStr | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> dt.date:
        return parse_calendar_date(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset(tag.strip() for tag in value.split(",") if tag.strip())
        return value

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str | None) -> str | None:
        if value is not None and not is_url_safe_slug(value):
            msg = "slug must be lowercase letters, digits and single hyphens"
            raise ValueError(msg)
        return value


def _error_fields(exc: PydanticValidationError) -> tuple[str, ...]:
    """Top-level field names named by a pydantic error, in first-seen order."""
    names: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or (FRONT_MATTER_FIELD,)
        name = str(loc[0])
        if name not in names:
            names.append(name)
    return tuple(names)


def resolve_slug(record: RawRecord, explicit: str | None) -> str:
    """Explicit slugs are used verbatim; otherwise derive one from the file name.

    Raises:
        ValidationError: on ``slug`` when the file name has no character
            that survives slugification (e.g. ``日本.md``).

    """
    if explicit:
        return explicit
    slug = slugify(record.base_name)
    if not slug:
        raise ValidationError(
            record.source_id,
            (SLUG_FIELD,),
            "file name has no URL-safe characters; set an explicit slug in the front-matter",
        )
    return slug


def validate(record: RawRecord, sequence: int = 0) -> Document:
    """Validate one raw record into a :class:`Document`.

    Raises:
        ValidationError: naming the record and every offending field.

    """
    if record.parse_error is not None:
        raise ValidationError(record.source_id, (FRONT_MATTER_FIELD,), record.parse_error)

    try:
        meta = ArticleMetadata.model_validate(dict(record.metadata))
    except PydanticValidationError as e:
        raise ValidationError(record.source_id, _error_fields(e)) from e

    return Document(
        slug=resolve_slug(record, meta.slug),
        title=meta.title,
        date=meta.date,
        author=meta.author,
        body=record.body,
        source_id=record.source_id,
        tags=meta.tags,
        draft=meta.draft,
        thumbnail=meta.thumbnail,
        description=meta.description,
        sequence=sequence,
    )


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating a whole batch of records."""

    documents: tuple[Document, ...] = ()
    rejected: tuple[ValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.rejected


def _validate_or_error(item: tuple[int, RawRecord]) -> Document | ValidationError:
    sequence, record = item
    try:
        return validate(record, sequence)
    except ValidationError as e:
        return e


def validate_records(records: list[RawRecord], workers: int = 1) -> ValidationReport:
    """Validate every record, excluding and logging the invalid ones.

    Output order follows input order regardless of ``workers``.
    """
    items = list(enumerate(records))
    if workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(_validate_or_error, items))
    else:
        outcomes = [_validate_or_error(item) for item in items]

    documents: list[Document] = []
    rejected: list[ValidationError] = []
    for outcome in outcomes:
        if isinstance(outcome, ValidationError):
            logger.warning(
                "Excluding %s: bad or missing field(s) %s",
                outcome.source_id,
                ", ".join(outcome.fields),
            )
            rejected.append(outcome)
        else:
            documents.append(outcome)

    logger.info("Validated %d document(s), rejected %d", len(documents), len(rejected))
    return ValidationReport(documents=tuple(documents), rejected=tuple(rejected))
