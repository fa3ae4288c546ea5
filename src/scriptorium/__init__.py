"""Scriptorium - category helpers for blog content pipelines."""

from scriptorium.core.categories import (
    UNCATEGORIZED,
    all_categories_with_posts,
    find_all_categories,
    has_categories,
)
from scriptorium.core.index import CategoryIndex
from scriptorium.core.types import Post

__all__ = [
    "UNCATEGORIZED",
    "CategoryIndex",
    "Post",
    "all_categories_with_posts",
    "find_all_categories",
    "has_categories",
]
