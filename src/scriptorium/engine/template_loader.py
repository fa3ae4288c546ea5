"""Jinja2 template loader for generated pages."""

from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template

from scriptorium.core.utils import slugify


class TemplateLoader:
    """Loads and renders the packaged Jinja2 page templates."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize TemplateLoader.

        Args:
            template_dir: Path to template directory. Defaults to the templates
                shipped in scriptorium.engine

        """
        if template_dir is None:
            template_dir = Path(str(files("scriptorium.engine").joinpath("templates")))

        self.template_dir = template_dir

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=False,  # Output is Markdown
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["slugify"] = slugify

    def load_template(self, template_name: str) -> Template:
        """Load a template by name.

        Raises:
            TemplateNotFound: If template does not exist

        """
        return self.env.get_template(template_name)

    def render_template(self, template_name: str, **context: Any) -> str:
        """Load and render a template with context."""
        template = self.load_template(template_name)
        return template.render(**context)
