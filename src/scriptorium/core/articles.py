"""Default article selection for the category helpers."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from scriptorium.core.types import PostKind, PostStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scriptorium.core.types import Post

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=UTC)


def sorted_articles(posts: Iterable[Post], *, include_drafts: bool = False) -> list[Post]:
    """Select the article posts and order them newest first.

    Pages are skipped. Drafts and archived posts are skipped unless
    ``include_drafts`` is set. Undated posts come last; ties keep input order.
    """
    articles = [
        post
        for post in posts
        if post.kind == PostKind.ARTICLE and (include_drafts or post.status == PostStatus.PUBLISHED)
    ]
    articles.sort(key=lambda post: post.created_at or _OLDEST, reverse=True)
    logger.debug("Selected %d articles", len(articles))
    return articles
