"""Custom exceptions for writing the site to disk."""

from inkwell.exceptions import InkwellError


class OutputError(InkwellError):
    """Base class for output errors."""


class SiteWriteError(OutputError):
    """Raised when the rendered site cannot be written."""

    def __init__(self, path: str, original_exception: Exception) -> None:
        self.path = path
        self.original_exception = original_exception
        super().__init__(f"Failed to write site to: {path}. Original error: {original_exception}")
