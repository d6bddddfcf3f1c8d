"""Document stores: where raw records come from."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

import frontmatter
import yaml

from inkwell.content.exceptions import ContentSourceError
from inkwell.data_primitives import RawRecord

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.md"


@runtime_checkable
class DocumentStore(Protocol):
    """Read-only source of raw records."""

    def list_all(self) -> list[RawRecord]:
        """Return every record in the source, in a stable order."""
        ...


class FilesystemDocumentStore:
    """Markdown files with YAML front-matter under a content directory.

    Records are returned in sorted path order. Any I/O failure is fatal: the
    route table must be computed from a consistent universe of documents.
    A front-matter block that does not parse is reported on the record
    instead so that one broken article cannot stop the others.
    """

    def __init__(self, content_dir: Path, pattern: str = DEFAULT_PATTERN, encoding: str = "utf-8") -> None:
        self.content_dir = content_dir
        self.pattern = pattern
        self.encoding = encoding

    def list_all(self) -> list[RawRecord]:
        if not self.content_dir.is_dir():
            raise ContentSourceError(str(self.content_dir), "not a directory")

        try:
            paths = sorted(p for p in self.content_dir.glob(self.pattern) if p.is_file())
        except OSError as e:
            raise ContentSourceError(str(self.content_dir), str(e)) from e

        records = [self._read(path) for path in paths]
        logger.info("Discovered %d document(s) in %s", len(records), self.content_dir)
        return records

    def _read(self, path: Path) -> RawRecord:
        source_id = path.relative_to(self.content_dir).as_posix()
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ContentSourceError(str(path), str(e)) from e

        try:
            post = frontmatter.loads(text)
        except yaml.YAMLError as e:
            logger.debug("Front-matter of %s is not valid YAML: %s", source_id, e)
            return RawRecord(source_id=source_id, body=text, parse_error=f"invalid YAML: {e}")

        return RawRecord(source_id=source_id, metadata=dict(post.metadata), body=post.content)


class MemoryDocumentStore:
    """Records held in memory, for programmatic builds."""

    def __init__(self, records: Iterable[RawRecord] = ()) -> None:
        self._records: Sequence[RawRecord] = tuple(records)

    def list_all(self) -> list[RawRecord]:
        return list(self._records)
