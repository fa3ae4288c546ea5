"""Load posts from Markdown files with YAML front matter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml
from pydantic import ValidationError

from scriptorium.core.exceptions import PostLoadError
from scriptorium.core.types import Post

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Front matter keys copied onto the Post as-is.
_POST_FIELDS = ("title", "categories", "kind", "status", "slug")


def _post_data(metadata: dict[str, Any], body: str, path: Path) -> dict[str, Any]:
    data = {key: metadata[key] for key in _POST_FIELDS if key in metadata}
    data.setdefault("title", path.stem)

    created_at = metadata.get("created_at", metadata.get("date"))
    if created_at is not None:
        data["created_at"] = created_at

    data["content"] = body
    data["source_path"] = path
    return data


def load_post(path: Path, *, encoding: str = "utf-8") -> Post:
    """Read a single Markdown post.

    Args:
        path: File system path to the Markdown document.
        encoding: File encoding used to read the file.

    Returns:
        The parsed Post. A file without a ``title`` uses its file stem.

    Raises:
        PostLoadError: If the file cannot be read, its front matter is not valid
            YAML mapping, or the metadata does not describe a valid post.

    """
    try:
        parsed = frontmatter.loads(path.read_text(encoding=encoding))
    except OSError as exc:
        raise PostLoadError(path, str(exc)) from exc
    except (yaml.YAMLError, ValueError) as exc:
        raise PostLoadError(path, f"invalid front matter: {exc}") from exc

    metadata = parsed.metadata or {}
    if not isinstance(metadata, dict):
        msg = f"front matter must be a mapping, got {type(metadata).__name__}"
        raise PostLoadError(path, msg)

    try:
        return Post.model_validate(_post_data(metadata, parsed.content, path))
    except ValidationError as exc:
        raise PostLoadError(path, str(exc)) from exc


def load_posts(directory: Path, *, encoding: str = "utf-8") -> list[Post]:
    """Load every ``*.md`` file under ``directory``, ordered by path.

    A missing directory yields no posts.
    """
    if not directory.is_dir():
        logger.warning("Posts directory %s does not exist", directory)
        return []

    posts = [load_post(path, encoding=encoding) for path in sorted(directory.rglob("*.md"))]
    logger.info("Loaded %d posts from %s", len(posts), directory)
    return posts
