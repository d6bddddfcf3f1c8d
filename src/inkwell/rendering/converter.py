"""Markdown to HTML conversion for article bodies."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

import markdown

from inkwell.utils.paths import slugify_lower

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "pymdownx.extra",
    "toc",
    "sane_lists",
    "pymdownx.tilde",
)


class ContentConverter(Protocol):
    """Turns an opaque body payload into display markup."""

    def convert(self, body: str) -> str: ...


class MarkdownConverter:
    """Python-Markdown with pymdown-extensions.

    ``markdown.Markdown`` keeps per-document state, so a fresh instance is
    built for every call and the converter can be shared across threads.
    """

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        extension_configs: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self.extensions = list(extensions)
        configs: dict[str, dict[str, Any]] = {}
        if "toc" in self.extensions:
            configs["toc"] = {"slugify": slugify_lower}
        for name, options in (extension_configs or {}).items():
            configs.setdefault(name, {}).update(options)
        self.extension_configs = configs

    def convert(self, body: str) -> str:
        if not isinstance(body, str):
            msg = f"expected text body, got {type(body).__name__}"
            raise TypeError(msg)
        md = markdown.Markdown(extensions=self.extensions, extension_configs=self.extension_configs)
        return md.convert(body)
