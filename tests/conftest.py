from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest
from faker import Faker

from scriptorium.core.types import Post, PostKind, PostStatus


@pytest.fixture
def fake() -> Faker:
    faker = Faker()
    faker.seed_instance(1234)
    return faker


@pytest.fixture
def make_post():
    """Factory for posts with sensible defaults."""

    def _make(title: str, categories: list[str] | None = None, **kwargs) -> Post:
        return Post(title=title, categories=categories, **kwargs)

    return _make


@pytest.fixture
def blog_posts() -> list[Post]:
    return [
        Post(
            title="Writing tests first",
            categories=["python", "testing"],
            created_at=datetime(2024, 3, 1, tzinfo=UTC),
        ),
        Post(
            title="About this blog",
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
        ),
        Post(
            title="Async generators",
            categories=["python"],
            created_at=datetime(2024, 2, 1, tzinfo=UTC),
        ),
        Post(
            title="Unfinished thoughts",
            categories=["drafts"],
            status=PostStatus.DRAFT,
            created_at=datetime(2024, 4, 1, tzinfo=UTC),
        ),
        Post(title="Contact", kind=PostKind.PAGE),
    ]


def _write_post(directory: Path, name: str, front_matter: str, body: str = "Body text.") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(f"---\n{front_matter.strip()}\n---\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def write_post():
    return _write_post


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A site with a handful of Markdown posts under posts/."""
    posts_dir = tmp_path / "posts"
    _write_post(posts_dir, "b.md", "title: Beta\ncategories: [python]\ndate: 2024-02-01")
    _write_post(posts_dir, "a.md", "title: Alpha\ncategories: [python, Tools]\ndate: 2024-01-01")
    _write_post(posts_dir, "z.md", "title: Zeta\ndate: 2024-03-01")
    _write_post(posts_dir, "d.md", "title: Draft\ncategories: [secret]\nstatus: draft")
    return tmp_path
