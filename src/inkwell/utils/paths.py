"""Slug and path safety helpers."""

from __future__ import annotations

import re
from pathlib import Path

from pymdownx.slugs import slugify as _md_slugify

from inkwell.exceptions import InkwellError


class PathTraversalError(InkwellError):
    """Raised when a path would escape its intended directory."""


# Pre-configured slugifier shared with the Markdown ``toc`` extension so that
# page slugs and heading anchors follow the same rules.
slugify_lower = _md_slugify(case="lower", normalize="NFKD")

URL_SAFE_SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str, max_len: int = 60) -> str:
    """Convert text to an ASCII, lowercase, hyphen-separated slug.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café à Paris")
        'cafe-a-paris'
        >>> slugify("../../etc/passwd")
        'etcpasswd'
        >>> slugify("日本")
        ''

    """
    if text is None:
        return ""

    slug = slugify_lower(text, sep="-")
    # NFKD alone does not guarantee ASCII.
    slug = slug.encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"-{2,}", "-", slug)
    return slug[:max_len].strip("-")


def is_url_safe_slug(value: str) -> bool:
    """Return True when ``value`` can be used verbatim as a URL segment."""
    return bool(URL_SAFE_SLUG.match(value))


def safe_path_join(base_dir: Path, *parts: str) -> Path:
    """Join ``parts`` onto ``base_dir`` and return the resolved path.

    Raises:
        PathTraversalError: if the result is not below ``base_dir``, which
            covers absolute parts, ``..`` segments and escaping symlinks.

    """
    base = base_dir.resolve()
    target = base.joinpath(*parts).resolve()
    if target == base or not target.is_relative_to(base):
        joined = "/".join(parts)
        msg = f"Refusing to write {joined!r} outside {base}"
        raise PathTraversalError(msg)
    return target
