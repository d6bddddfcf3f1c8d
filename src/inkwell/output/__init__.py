"""Publishing rendered pages to disk."""

from inkwell.output.exceptions import OutputError, SiteWriteError
from inkwell.output.writer import write_site

__all__ = ["OutputError", "SiteWriteError", "write_site"]
