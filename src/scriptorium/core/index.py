from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from scriptorium.core.articles import sorted_articles
from scriptorium.core.categories import all_categories_with_posts, find_all_categories

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scriptorium.core.ports import ArticleProvider, PostLike
    from scriptorium.core.types import Post


class CategoryIndex:
    """Category helpers bound to an explicit article provider.

    The provider is called on every lookup so results always reflect the
    current posts; nothing is cached.
    """

    def __init__(self, articles: ArticleProvider) -> None:
        self._articles = articles

    @classmethod
    def from_posts(cls, posts: Iterable[Post], *, include_drafts: bool = False) -> CategoryIndex:
        """Build an index over ``posts`` using the default article selection."""
        snapshot = list(posts)
        return cls(partial(sorted_articles, snapshot, include_drafts=include_drafts))

    def articles(self) -> list[PostLike]:
        return list(self._articles())

    def find_all_categories(self) -> list[str]:
        return find_all_categories(self._articles())

    def all_categories_with_posts(self) -> dict[str, list[PostLike]]:
        return all_categories_with_posts(self._articles())
