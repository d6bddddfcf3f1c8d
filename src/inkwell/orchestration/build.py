"""Run one complete build: read, validate, route, render, write.

Reading, validating and routing are strictly sequential. Rendering fans out
over a thread pool since each route depends only on the read-only
collection, then fans back in to route order. Either every route renders and
the whole site is written, or the build fails and nothing is written.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from inkwell.config import BuildMode, InkwellConfig
from inkwell.content.collection import DocumentCollection
from inkwell.content.exceptions import ValidationError
from inkwell.content.store import DocumentStore, FilesystemDocumentStore
from inkwell.content.validation import validate_records
from inkwell.data_primitives import RenderedPage, Route
from inkwell.orchestration.exceptions import BuildFailedError
from inkwell.output.writer import write_site
from inkwell.rendering.converter import ContentConverter, MarkdownConverter
from inkwell.rendering.exceptions import RenderingError
from inkwell.rendering.renderer import PageRenderer
from inkwell.rendering.shell import NavLink, PageShell, ShellContext, create_template_env
from inkwell.routing.routes import derive_routes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildPlan:
    """Everything known before rendering starts."""

    collection: DocumentCollection
    routes: tuple[Route, ...]
    rejected: tuple[ValidationError, ...]


@dataclass(frozen=True)
class BuildReport:
    pages: tuple[RenderedPage, ...]
    routes: tuple[Route, ...]
    rejected: tuple[ValidationError, ...]
    output_dir: Path | None = None


def shell_from_config(config: InkwellConfig, site_root: Path) -> PageShell:
    site = config.site
    context = ShellContext(
        site_name=site.name,
        base_url=site.base_url.rstrip("/"),
        nav=tuple(NavLink(label=link.label, href=link.href) for link in site.nav),
        footer_text=site.footer_text,
    )
    return PageShell(context, create_template_env(config.templates_dir(site_root)))


def plan_build(config: InkwellConfig, store: DocumentStore) -> BuildPlan:
    """Read and validate every record and derive the route table.

    Raises:
        ContentSourceError: if the store cannot be read.
        DuplicateRouteError: if two documents share a slug.

    """
    records = store.list_all()
    report = validate_records(records, workers=config.build.workers)
    collection = DocumentCollection(report.documents)
    routes = derive_routes(
        collection.all(),
        include_drafts=config.build.mode is BuildMode.PREVIEW,
        route_prefix=config.build.route_prefix,
    )
    logger.info(
        "Planned %d route(s) from %d record(s) (%s build)",
        len(routes),
        len(records),
        config.build.mode.value,
    )
    return BuildPlan(collection=collection, routes=tuple(routes), rejected=report.rejected)


def render_routes(renderer: PageRenderer, routes: tuple[Route, ...], workers: int = 1) -> list[RenderedPage]:
    """Render every route, returning pages in route order.

    All routes are attempted even when some fail.

    Raises:
        BuildFailedError: listing every route that failed to render.

    """

    def _render(route: Route) -> RenderedPage | RenderingError:
        try:
            return renderer.render(route)
        except RenderingError as e:
            logger.error("Failed to render %s: %s", route.path, e)
            return e

    if workers > 1 and len(routes) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(_render, routes))
    else:
        outcomes = [_render(route) for route in routes]

    failures = [outcome for outcome in outcomes if isinstance(outcome, RenderingError)]
    if failures:
        raise BuildFailedError(failures)
    return [outcome for outcome in outcomes if isinstance(outcome, RenderedPage)]


def run_build(
    config: InkwellConfig,
    site_root: Path,
    *,
    store: DocumentStore | None = None,
    converter: ContentConverter | None = None,
    shell: PageShell | None = None,
    write: bool = True,
) -> BuildReport:
    """Build the site under ``site_root`` as described by ``config``."""
    site_root = site_root.expanduser().resolve()
    output_dir = config.check_output_dir(site_root) if write else None
    store = store or FilesystemDocumentStore(config.content_dir(site_root))
    plan = plan_build(config, store)

    renderer = PageRenderer(
        plan.collection,
        converter or MarkdownConverter(config.build.markdown_extensions),
        shell or shell_from_config(config, site_root),
        date_format=config.build.date_format,
    )
    pages = render_routes(renderer, plan.routes, workers=config.build.workers)

    if output_dir is not None:
        write_site(pages, output_dir, config.build.route_prefix)

    if plan.rejected:
        logger.warning("%d document(s) were excluded from the build", len(plan.rejected))
    return BuildReport(pages=tuple(pages), routes=plan.routes, rejected=plan.rejected, output_dir=output_dir)
