"""Fetch recipes from TheMealDB and render them as terminal reports."""

__version__ = "0.1.0"
