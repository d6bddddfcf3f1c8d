"""Body conversion, page shell and page rendering."""

from inkwell.rendering.converter import ContentConverter, MarkdownConverter
from inkwell.rendering.exceptions import ConversionError, RenderingError, ShellRenderError
from inkwell.rendering.renderer import PageRenderer
from inkwell.rendering.shell import NavLink, PageShell, ShellContext

__all__ = [
    "ContentConverter",
    "ConversionError",
    "MarkdownConverter",
    "NavLink",
    "PageRenderer",
    "PageShell",
    "RenderingError",
    "ShellContext",
    "ShellRenderError",
]
