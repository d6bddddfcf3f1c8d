"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from inkwell.config.exceptions import ConfigError, ConfigValidationError
from inkwell.content.exceptions import ContentSourceError, NotFoundError
from inkwell.exceptions import InkwellError
from inkwell.orchestration.exceptions import BuildFailedError
from inkwell.output.exceptions import OutputError
from inkwell.routing.exceptions import DuplicateRouteError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Turn Inkwell errors into friendly messages and exit code 1.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ConfigValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        for err in e.errors:
            loc = ".".join(str(part) for part in err.get("loc", ()))
            console.print(f"  - {escape(loc)}: {escape(str(err.get('msg', '')))}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ContentSourceError as e:
        if debug:
            raise
        console.print(f"[bold red]Cannot read content:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except DuplicateRouteError as e:
        if debug:
            raise
        console.print(f"[bold red]Duplicate slug '{escape(e.slug)}':[/bold red]")
        for source_id in e.source_ids:
            console.print(f"  - {escape(source_id)}")
        console.print("Give one of these documents an explicit [bold]slug[/bold] in its front-matter.")
        raise typer.Exit(1) from e
    except BuildFailedError as e:
        if debug:
            raise
        console.print(f"[bold red]Build failed;[/bold red] no pages were written. {len(e.failures)} route(s) failed:")
        for failure in e.failures:
            console.print(f"  - {escape(str(failure))}")
        raise typer.Exit(1) from e
    except NotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Internal error:[/bold red] route without a document. {escape(str(e))}")
        raise typer.Exit(1) from e
    except OutputError as e:
        if debug:
            raise
        console.print(f"[bold red]Could not write the site:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except InkwellError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
