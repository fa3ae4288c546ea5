"""Utility functions shared by the core and the adapters."""

import re
from unicodedata import normalize


def slugify(text: str, max_len: int = 60) -> str:
    """Convert text to a safe URL-friendly slug.

    Args:
        text: Input text to slugify
        max_len: Maximum length of output slug (default 60)

    Returns:
        Safe slug string suitable for filenames and URLs

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("Café")
        'cafe'
        >>> slugify("A" * 100, max_len=20)
        'aaaaaaaaaaaaaaaaaaaa'

    """
    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()

    slug = re.sub(r"[^a-z0-9]+", "-", normalized)
    slug = slug.strip("-")
    slug = re.sub(r"-+", "-", slug)

    if not slug:
        return "untitled"

    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug
