"""The shared page shell: header, content region and footer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from markupsafe import Markup

from inkwell.rendering.exceptions import ShellRenderError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
SHELL_TEMPLATE = "shell.html.jinja"
ARTICLE_TEMPLATE = "article.html.jinja"


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class ShellContext:
    """Site-wide values every page shell needs."""

    site_name: str = "Inkwell"
    base_url: str = ""
    nav: Sequence[NavLink] = field(default_factory=tuple)
    footer_text: str = ""


def create_template_env(templates_dir: Path | None = None) -> Environment:
    """Initializes the Jinja2 environment."""
    search_path = [str(TEMPLATES_DIR)]
    if templates_dir is not None:
        # Site templates override the bundled ones.
        search_path.insert(0, str(templates_dir))
    return Environment(
        loader=FileSystemLoader(search_path),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class PageShell:
    """Wraps content markup in the site's header and footer."""

    def __init__(self, context: ShellContext | None = None, env: Environment | None = None) -> None:
        self.context = context or ShellContext()
        self._env = env or create_template_env()

    def _render(self, template_name: str, **values: object) -> str:
        try:
            template = self._env.get_template(template_name)
            return template.render(site=self.context, **values)
        except TemplateError as e:
            raise ShellRenderError(template_name, str(e)) from e

    def compose(self, title: str, content: str) -> str:
        """Full HTML document for ``title`` around ``content`` (trusted markup)."""
        return self._render(SHELL_TEMPLATE, title=title, content=Markup(content))

    def article(self, *, title: str, author: str, date: str, body: str) -> str:
        """Content region of an article: byline, date, then the body markup."""
        return self._render(ARTICLE_TEMPLATE, title=title, author=author, date=date, body=Markup(body))
