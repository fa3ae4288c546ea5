"""Expose the category helpers to Jinja2 templates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scriptorium.core.categories import UNCATEGORIZED
from scriptorium.core.index import CategoryIndex
from scriptorium.core.utils import slugify

if TYPE_CHECKING:
    from jinja2 import Environment

    from scriptorium.core.ports import ArticleProvider


def register_category_helpers(env: Environment, articles: ArticleProvider) -> CategoryIndex:
    """Install the category helpers as globals of ``env``.

    Templates can then call ``find_all_categories()`` and
    ``all_categories_with_posts()`` directly; both read from ``articles`` on
    every call. ``sorted_articles()`` returns the provider's posts as a list
    and ``UNCATEGORIZED`` names the catch-all group.

    Returns:
        The CategoryIndex backing the globals.

    """
    index = CategoryIndex(articles)
    env.globals["find_all_categories"] = index.find_all_categories
    env.globals["all_categories_with_posts"] = index.all_categories_with_posts
    env.globals["sorted_articles"] = index.articles
    env.globals["UNCATEGORIZED"] = UNCATEGORIZED
    env.filters["slugify"] = slugify
    return index
