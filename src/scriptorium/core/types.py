"""Core data types for Scriptorium."""

from datetime import UTC, date, datetime, time
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from scriptorium.core.utils import slugify


class PostKind(str, Enum):
    ARTICLE = "article"
    PAGE = "page"


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Post(BaseModel):
    """A content entry with a title and optional category labels.

    ``categories`` is ``None`` when the post declares no categories. Labels are
    stored as a tuple so posts stay hashable. An empty sequence is accepted and
    means the same thing to the category helpers.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    categories: tuple[str, ...] | None = None
    kind: PostKind = PostKind.ARTICLE
    status: PostStatus = PostStatus.PUBLISHED
    created_at: datetime | None = None
    slug: str | None = None
    content: str | None = None
    source_path: Path | None = None

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    @field_validator("created_at", mode="before")
    @classmethod
    def _coerce_created_at(cls, value: Any) -> Any:
        # YAML front matter yields plain dates for `date: 2024-01-31`
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, time.min)
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="before")
    @classmethod
    def _generate_slug_from_title(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("slug"):
            title = data.get("title")
            if isinstance(title, str) and title.strip():
                data = {**data, "slug": slugify(title.strip())}
        return data
