"""Output sinks for generated category pages."""

from scriptorium.infra.sinks.categories_page import CategoriesPageSink

__all__ = ["CategoriesPageSink"]
