"""Write rendered pages below the output directory.

The writer owns only the ``{output_dir}/{route_prefix}`` subtree; anything
else under ``output_dir`` (a landing page, other tools' artifacts) is left
alone. Pages are first written into a staging directory beside that subtree
and swapped in once every page is on disk, so a failure never leaves a
half-written blog behind.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from inkwell.data_primitives import RenderedPage
from inkwell.output.exceptions import SiteWriteError
from inkwell.utils.paths import PathTraversalError, safe_path_join

logger = logging.getLogger(__name__)

PAGE_FILENAME = "index.html"


def _write_pages(root: Path, pages: Sequence[RenderedPage]) -> list[Path]:
    written: list[Path] = []
    for page in pages:
        target = safe_path_join(root, page.slug, PAGE_FILENAME)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(page.html, encoding="utf-8")
        written.append(target)
    return written


def _swap(staging: Path, target: Path) -> None:
    """Move ``staging`` to ``target``, restoring the previous pages on failure."""
    previous: Path | None = None
    if target.exists():
        previous = target.with_name(f"{staging.name}.old")
        target.rename(previous)
    try:
        staging.rename(target)
    except OSError:
        if previous is not None:
            previous.rename(target)
        raise
    if previous is not None:
        shutil.rmtree(previous, ignore_errors=True)


def write_site(pages: Sequence[RenderedPage], output_dir: Path, route_prefix: str) -> list[Path]:
    """Replace ``{output_dir}/{route_prefix}`` with exactly the given pages.

    Returns:
        Final paths of the written pages, in input order.

    Raises:
        SiteWriteError: if staging or swapping fails; the previous pages are
            then left in place.

    """
    prefix = route_prefix.strip("/")
    if not prefix:
        raise SiteWriteError(str(output_dir), ValueError("route prefix must not be empty"))

    try:
        blog_dir = safe_path_join(output_dir, *prefix.split("/"))
        blog_dir.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{blog_dir.name}-", dir=blog_dir.parent))
    except (OSError, PathTraversalError) as e:
        raise SiteWriteError(str(output_dir), e) from e

    try:
        staged = _write_pages(staging, pages)
        _swap(staging, blog_dir)
    except (OSError, PathTraversalError) as e:
        shutil.rmtree(staging, ignore_errors=True)
        raise SiteWriteError(str(blog_dir), e) from e

    final = [blog_dir / path.relative_to(staging) for path in staged]
    logger.info("Wrote %d page(s) to %s", len(final), blog_dir)
    return final
