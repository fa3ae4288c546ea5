"""Adapters between the category core and files, templates and pages."""
