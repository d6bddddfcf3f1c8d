from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

from inkwell.config import BuildSettings, InkwellConfig
from inkwell.data_primitives import RawRecord


def make_record(source_id: str = "hello.md", body: str = "Some *text*.", **metadata) -> RawRecord:
    """Raw record with a complete front-matter unless fields are overridden."""
    fields = {"title": "Hello", "date": "2025-06-04", "author": "Jane"}
    fields.update(metadata)
    return RawRecord(
        source_id=source_id,
        metadata={k: v for k, v in fields.items() if v is not None},
        body=body,
    )


@pytest.fixture
def record_factory() -> Callable[..., RawRecord]:
    return make_record


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    (tmp_path / "content" / "blog").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_article(site_root: Path) -> Callable[..., Path]:
    """Write a Markdown article with front-matter into the site's content dir."""

    def _write(name: str, front_matter: str, body: str = "Body text.") -> Path:
        path = site_root / "content" / "blog" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{dedent(front_matter).strip()}\n---\n\n{body}\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def serial_config() -> InkwellConfig:
    return InkwellConfig(build=BuildSettings(workers=1))
