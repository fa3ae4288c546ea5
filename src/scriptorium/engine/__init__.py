"""Template integration for the category helpers."""
