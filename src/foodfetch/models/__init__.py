"""Data models for foodfetch."""

from .display import DisplayRecipe, InfoLevel
from .recipe import CatalogRecord, OfflineCorpusEntry
from .search import MatchKind, SearchOutcome

__all__ = [
    "CatalogRecord",
    "DisplayRecipe",
    "InfoLevel",
    "MatchKind",
    "OfflineCorpusEntry",
    "SearchOutcome",
]
