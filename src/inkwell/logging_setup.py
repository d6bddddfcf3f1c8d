"""Centralized logging configuration for Inkwell."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

LOG_LEVEL_ENV: Final[str] = "INKWELL_LOG_LEVEL"

console = Console()


class InkwellLogHandler(RichHandler):
    """The single Rich handler owned by Inkwell on the root logger."""

    def __init__(self) -> None:
        super().__init__(console=console, rich_tracebacks=True, show_path=False, markup=False)
        self.setFormatter(logging.Formatter("%(message)s"))


def configure_logging(level: str | None = None) -> None:
    """Route log records through Rich at ``level`` or ``$INKWELL_LOG_LEVEL``.

    Safe to call repeatedly: other Rich handlers are replaced by one
    ``InkwellLogHandler`` and non-Rich handlers (pytest's, for instance) stay.
    """
    root = logging.getLogger()
    if not any(isinstance(h, InkwellLogHandler) for h in root.handlers):
        for stale in [h for h in root.handlers if isinstance(h, RichHandler)]:
            root.removeHandler(stale)
        root.addHandler(InkwellLogHandler())

    name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    root.setLevel(logging.getLevelNamesMapping().get(name, logging.INFO))
    logging.captureWarnings(True)
