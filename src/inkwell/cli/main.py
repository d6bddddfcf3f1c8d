"""Main Typer application for Inkwell."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from inkwell.cli.errorhandler import handle_cli_errors
from inkwell.config import BuildMode, InkwellConfig, config_path, load_config, save_config
from inkwell.content.exceptions import ValidationError
from inkwell.content.store import FilesystemDocumentStore
from inkwell.logging_setup import configure_logging
from inkwell.orchestration.build import plan_build, run_build

console = Console()

app = typer.Typer(
    name="inkwell",
    help="Build a static blog from Markdown articles with YAML front-matter",
    add_completion=False,
)

SiteRootArg = Annotated[
    Path,
    typer.Argument(help="Site root containing .inkwell/config.yml", file_okay=False),
]
DraftsOpt = Annotated[bool, typer.Option("--drafts", help="Preview build: publish drafts too")]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Show full tracebacks")]


@app.callback()
def _initialize_cli(
    log_level: Annotated[str | None, typer.Option("--log-level", help="Override INKWELL_LOG_LEVEL")] = None,
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level)


def _load(site_root: Path, *, drafts: bool = False, workers: int | None = None) -> InkwellConfig:
    config = load_config(site_root)
    build_update: dict[str, object] = {}
    if drafts:
        build_update["mode"] = BuildMode.PREVIEW
    if workers is not None:
        build_update["workers"] = workers
    if build_update:
        config = config.model_copy(update={"build": config.build.model_copy(update=build_update)})
    return config


def _print_rejected(rejected: tuple[ValidationError, ...]) -> None:
    for error in rejected:
        console.print(f"[yellow]Excluded[/yellow] {escape(error.source_id)}: {escape(', '.join(error.fields))}")


@app.command()
def build(
    site_root: SiteRootArg = Path("."),
    drafts: DraftsOpt = False,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output directory")] = None,
    workers: Annotated[int | None, typer.Option("--workers", "-w", min=1, max=64, help="Render threads")] = None,
    debug: DebugOpt = False,
) -> None:
    """Render every publishable article to static HTML."""
    with handle_cli_errors(debug=debug):
        site_root = site_root.expanduser().resolve()
        config = _load(site_root, drafts=drafts, workers=workers)
        if output is not None:
            config = config.model_copy(
                update={"paths": config.paths.model_copy(update={"output_dir": str(output.expanduser().resolve())})}
            )
        report = run_build(config, site_root)

    _print_rejected(report.rejected)
    console.print(f"[green]Built {len(report.pages)} page(s)[/green] into {report.output_dir}")


@app.command()
def check(site_root: SiteRootArg = Path("."), drafts: DraftsOpt = False, debug: DebugOpt = False) -> None:
    """Validate every article without rendering; exit 1 if any is excluded."""
    with handle_cli_errors(debug=debug):
        site_root = site_root.expanduser().resolve()
        config = _load(site_root, drafts=drafts)
        plan = plan_build(config, FilesystemDocumentStore(config.content_dir(site_root)))

    table = Table(title=f"Documents ({len(plan.collection)})")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Author", style="green")
    table.add_column("Date")
    table.add_column("Draft", justify="center")
    for document in plan.collection.all():
        table.add_row(
            document.slug,
            document.title,
            document.author,
            document.date.isoformat(),
            "yes" if document.draft else "",
        )
    console.print(table)

    _print_rejected(plan.rejected)
    if plan.rejected:
        raise typer.Exit(1)


@app.command()
def routes(site_root: SiteRootArg = Path("."), drafts: DraftsOpt = False, debug: DebugOpt = False) -> None:
    """Print the route table."""
    with handle_cli_errors(debug=debug):
        site_root = site_root.expanduser().resolve()
        config = _load(site_root, drafts=drafts)
        plan = plan_build(config, FilesystemDocumentStore(config.content_dir(site_root)))

    table = Table(title=f"Routes ({len(plan.routes)})")
    table.add_column("Path", style="cyan")
    table.add_column("Source")
    for route in plan.routes:
        table.add_row(route.path, route.source_id)
    console.print(table)


@app.command()
def init(
    site_root: SiteRootArg = Path("."),
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config")] = False,
) -> None:
    """Write a default .inkwell/config.yml."""
    site_root = site_root.expanduser().resolve()
    existing = config_path(site_root)
    if existing.exists() and not force:
        console.print(f"[yellow]{existing} already exists[/yellow]; use --force to overwrite.")
        raise typer.Exit(1)
    path = save_config(InkwellConfig(), site_root)
    console.print(f"Created {path}")
