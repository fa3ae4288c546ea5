"""Markdown output sink for the categories index page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from scriptorium.engine.template_helpers import register_category_helpers
from scriptorium.engine.template_loader import TemplateLoader

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scriptorium.core.ports import PostLike

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "categories.md.jinja2"


class CategoriesPageSink:
    """Publishes a Markdown page listing every category and its posts.

    Posts within a category are linked by slug, so the page can sit next to
    the per-post files written by the site generator.
    """

    def __init__(
        self,
        output_path: Path,
        title: str = "Categories",
        template_dir: Path | None = None,
    ) -> None:
        """Initialize the categories page sink.

        Args:
            output_path: File the page is written to
            title: Page heading
            template_dir: Template directory, defaults to the packaged templates

        """
        self.output_path = Path(output_path)
        self.title = title
        self.template_dir = template_dir

    def render(self, articles: Sequence[PostLike]) -> str:
        """Render the page for ``articles`` without writing it."""
        # A fresh environment per render keeps the globals bound to these articles.
        env = TemplateLoader(self.template_dir).env
        register_category_helpers(env, lambda: articles)
        template = env.get_template(TEMPLATE_NAME)
        return template.render(title=self.title)

    def publish(self, articles: Sequence[PostLike]) -> None:
        """Write the page, replacing any existing file.

        Creates parent directories if they don't exist.
        """
        content = self.render(articles)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(content, encoding="utf-8")
        logger.info("Wrote categories page to %s", self.output_path)
