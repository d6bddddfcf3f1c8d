"""Pydantic models for ``.inkwell/config.yml``."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inkwell.config.exceptions import UnsafeOutputDirError
from inkwell.rendering.converter import DEFAULT_EXTENSIONS
from inkwell.utils.dates import DEFAULT_DATE_FORMAT


class BuildMode(str, Enum):
    """Production builds drop drafts; preview builds publish them."""

    PRODUCTION = "production"
    PREVIEW = "preview"


class NavLinkConfig(BaseModel):
    label: str
    href: str


class SiteSettings(BaseModel):
    """Values shown by the page shell on every page."""

    name: str = Field(default="Inkwell", description="Site name shown in the header and page titles")
    base_url: str = Field(default="", description="Prefix for absolute links, without trailing slash")
    nav: list[NavLinkConfig] = Field(
        default_factory=lambda: [NavLinkConfig(label="Home", href="/"), NavLinkConfig(label="Blog", href="/blog/")]
    )
    footer_text: str = ""


class PathsSettings(BaseModel):
    """Directories, relative to the site root unless absolute."""

    content_dir: str = Field(default="content/blog", description="Markdown articles")
    output_dir: str = Field(default="dist", description="Where rendered pages are written")
    templates_dir: str | None = Field(default=None, description="Optional overrides for the bundled templates")


class BuildSettings(BaseModel):
    mode: BuildMode = BuildMode.PRODUCTION
    workers: int = Field(default=4, ge=1, le=64, description="Threads used for validation and rendering")
    route_prefix: str = Field(default="blog", description="First path segment of every article URL")
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, description="strftime format for the byline date")
    markdown_extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))

    @field_validator("route_prefix")
    @classmethod
    def _check_route_prefix(cls, value: str) -> str:
        prefix = value.strip("/")
        if not prefix or any(segment in {"", ".", ".."} for segment in prefix.split("/")):
            msg = "route_prefix must name a directory below the output directory, e.g. 'blog'"
            raise ValueError(msg)
        return prefix


class InkwellConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    site: SiteSettings = Field(default_factory=SiteSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)
    build: BuildSettings = Field(default_factory=BuildSettings)

    def resolve_path(self, site_root: Path, value: str) -> Path:
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return (site_root / path).resolve()

    def content_dir(self, site_root: Path) -> Path:
        return self.resolve_path(site_root, self.paths.content_dir)

    def output_dir(self, site_root: Path) -> Path:
        return self.resolve_path(site_root, self.paths.output_dir)

    def check_output_dir(self, site_root: Path) -> Path:
        """Return the output directory, refusing one that holds the site or its content.

        Raises:
            UnsafeOutputDirError: if ``output_dir`` is ``site_root``, the
                content directory, or one of their ancestors.

        """
        output_dir = self.output_dir(site_root).resolve()
        for protected in (site_root.resolve(), self.content_dir(site_root).resolve()):
            if protected.is_relative_to(output_dir):
                raise UnsafeOutputDirError(output_dir, protected)
        return output_dir

    def templates_dir(self, site_root: Path) -> Path | None:
        if self.paths.templates_dir is None:
            return None
        return self.resolve_path(site_root, self.paths.templates_dir)
