from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class PostLike(Protocol):
    """Anything the category helpers can read: a title and optional labels."""

    @property
    def title(self) -> str: ...

    @property
    def categories(self) -> Sequence[str] | None: ...


# Supplies the posts to aggregate, already filtered and ordered by the caller.
ArticleProvider = Callable[[], Iterable[PostLike]]
