"""Service layer: catalog access, search resolution and report building."""

from .corpus import OfflineCorpus, load_corpus
from .mealdb import MealDBService
from .reports import render_report, render_reports
from .search import SearchResolver

__all__ = [
    "MealDBService",
    "OfflineCorpus",
    "SearchResolver",
    "load_corpus",
    "render_report",
    "render_reports",
]
