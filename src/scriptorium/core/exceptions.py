"""Core exceptions for Scriptorium."""

from pathlib import Path
from typing import Any


class ScriptoriumError(Exception):
    """Base exception for all Scriptorium errors."""


class PreconditionError(ScriptoriumError, ValueError):
    """Raised when a post does not have the shape the category helpers require."""


class InvalidCategoriesError(PreconditionError):
    """Raised when a post's categories are not a sequence of strings."""

    def __init__(self, value: Any, title: str | None = None) -> None:
        self.value = value
        self.title = title
        where = f" on post {title!r}" if title else ""
        msg = f"categories{where} must be a list of strings, got {value!r}"
        super().__init__(msg)


class MissingTitleError(PreconditionError):
    """Raised when a post has no usable title to sort by."""

    def __init__(self, post: Any) -> None:
        self.post = post
        msg = f"Post has no string title to sort by: {post!r}"
        super().__init__(msg)


class PostLoadError(ScriptoriumError):
    """Raised when a post file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load post {path}: {reason}")


class ConfigError(ScriptoriumError):
    """Raised when the configuration file or environment overrides are invalid."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")
