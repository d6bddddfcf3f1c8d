"""Custom exceptions for page rendering."""

from inkwell.exceptions import InkwellError


class RenderingError(InkwellError):
    """Base class for rendering errors."""


class ConversionError(RenderingError):
    """Raised when an article body cannot be converted to markup."""

    def __init__(self, slug: str, reason: str) -> None:
        self.slug = slug
        self.reason = reason
        super().__init__(f"Failed to convert body of '{slug}': {reason}")


class ShellRenderError(RenderingError):
    """Raised when the page shell template fails to render."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Failed to render template '{template}': {reason}")
