"""Category aggregation over blog posts.

Two pure functions back the category pages of a site:

- :func:`find_all_categories` returns every label in use, sorted.
- :func:`all_categories_with_posts` buckets posts by label, with posts that
  declare no label collected under :data:`UNCATEGORIZED`.

Both take the posts explicitly, usually the output of
:func:`scriptorium.core.articles.sorted_articles`, and never mutate them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from scriptorium.core.exceptions import InvalidCategoriesError, MissingTitleError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from scriptorium.core.ports import PostLike

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"

P = TypeVar("P", bound="PostLike")


def _categories_of(post: Any) -> Sequence[str] | None:
    """Return the post's labels, validating their shape."""
    value = getattr(post, "categories", None)
    if value is None:
        return None
    if not isinstance(value, list | tuple):
        raise InvalidCategoriesError(value, getattr(post, "title", None))
    for label in value:
        if not isinstance(label, str):
            raise InvalidCategoriesError(value, getattr(post, "title", None))
    return value


def _title_of(post: Any) -> str:
    title = getattr(post, "title", None)
    if not isinstance(title, str):
        raise MissingTitleError(post)
    return title


def has_categories(post: PostLike) -> bool:
    """Whether the post declares at least one category.

    An absent field and an empty list both count as no categories.
    """
    return bool(_categories_of(post))


def find_all_categories(posts: Iterable[PostLike]) -> list[str]:
    """Return the distinct category labels used by ``posts``, sorted ascending.

    Labels are compared as plain strings: no case folding, no trimming.

    Raises:
        InvalidCategoriesError: If a post's categories are not a list of strings.

    """
    seen: dict[str, None] = {}
    for post in posts:
        for label in _categories_of(post) or ():
            seen.setdefault(label, None)

    categories = sorted(seen)
    logger.debug("Found %d distinct categories", len(categories))
    return categories


def all_categories_with_posts(posts: Iterable[P]) -> dict[str, list[P]]:
    """Group ``posts`` by category label.

    A post is appended once to each label it lists, so a label repeated within
    one post adds that post twice. Posts without categories go to
    ``"Uncategorized"``, at most once each. Every group is sorted by title, the
    groups are ordered by label and empty groups are dropped.

    Raises:
        InvalidCategoriesError: If a post's categories are not a list of strings.
        MissingTitleError: If a grouped post has no string title.

    """
    groups: dict[str, list[P]] = {UNCATEGORIZED: []}
    for post in posts:
        labels = _categories_of(post)
        if labels:
            for label in labels:
                groups.setdefault(label, []).append(post)
        elif post not in groups[UNCATEGORIZED]:
            groups[UNCATEGORIZED].append(post)

    for members in groups.values():
        members.sort(key=_title_of)

    result = {label: groups[label] for label in sorted(groups) if groups[label]}
    logger.debug(
        "Grouped posts into %d categories (%d uncategorized)",
        len(result),
        len(result.get(UNCATEGORIZED, [])),
    )
    return result
