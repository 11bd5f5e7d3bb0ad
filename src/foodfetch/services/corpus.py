"""Bundled offline list of meals used for approximate matching."""

import json
import logging
import string
from collections.abc import Iterable
from functools import lru_cache
from importlib import resources
from pathlib import Path

from attrs import field, frozen

from ..errors import TransportError
from ..models.recipe import CatalogRecord, OfflineCorpusEntry
from .mealdb import MealDBService, parse_ingredients

logger = logging.getLogger(__name__)

MAX_CORPUS_INGREDIENTS = 2


@frozen
class OfflineCorpus:
    """Immutable, ordered set of corpus entries with lower-cased names cached."""

    entries: tuple[OfflineCorpusEntry, ...] = field(default=(), converter=tuple)
    names: tuple[str, ...] = field(init=False)

    @names.default
    def _lower_names(self) -> tuple[str, ...]:
        return tuple(entry.name.lower() for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def default_corpus_path() -> Path:
    return Path(str(resources.files("foodfetch") / "data" / "meal_cache.json"))


def parse_corpus_entry(item: dict) -> OfflineCorpusEntry:
    """Parse one TheMealDB-shaped meal into a reduced corpus entry."""

    def text(key: str) -> str:
        return (item.get(key) or "").strip()

    return OfflineCorpusEntry(
        name=text("strMeal"),
        thumbnail_url=text("strMealThumb"),
        ingredients=parse_ingredients(item)[:MAX_CORPUS_INGREDIENTS],
        category=text("strCategory"),
        area=text("strArea"),
        source_url=text("strSource"),
        youtube_url=text("strYoutube"),
        instructions=text("strInstructions"),
    )


def parse_corpus(data: dict) -> OfflineCorpus:
    meals = data.get("meals") or []
    return OfflineCorpus(
        parse_corpus_entry(item) for item in meals if isinstance(item, dict)
    )


@lru_cache
def load_corpus(path: Path | None = None) -> OfflineCorpus:
    """Load the offline corpus once per path; later calls share the result."""
    path = path or default_corpus_path()
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Offline corpus %s unavailable: %s", path, exc)
        return OfflineCorpus()
    if not isinstance(data, dict):
        logger.warning("Offline corpus %s has an unexpected layout", path)
        return OfflineCorpus()
    corpus = parse_corpus(data)
    logger.debug("Loaded %d offline corpus entries from %s", len(corpus), path)
    return corpus


def entry_from_record(record: CatalogRecord) -> OfflineCorpusEntry:
    return OfflineCorpusEntry(
        name=record.name,
        thumbnail_url=record.thumbnail_url,
        ingredients=record.ingredients[:MAX_CORPUS_INGREDIENTS],
        category=record.category,
        area=record.area,
        source_url=record.source_url,
        youtube_url=record.youtube_url,
    )


async def build_corpus(service: MealDBService) -> OfflineCorpus:
    """Rebuild the corpus by listing the catalog letter by letter."""
    seen: set[str] = set()
    entries = []
    for letter in string.ascii_lowercase:
        try:
            records = await service.list_by_first_letter(letter)
        except TransportError as exc:
            logger.warning("Skipping letter %r: %s", letter, exc)
            continue
        for record in records:
            if not record.name or record.name in seen:
                continue
            seen.add(record.name)
            entries.append(entry_from_record(record))
    return OfflineCorpus(entries)


def corpus_to_json(entries: Iterable[OfflineCorpusEntry]) -> dict:
    meals = []
    for entry in entries:
        meal = {
            "strMeal": entry.name,
            "strMealThumb": entry.thumbnail_url,
            "strCategory": entry.category,
            "strArea": entry.area,
        }
        for n, (ingredient, measure) in enumerate(entry.ingredients, start=1):
            meal[f"strIngredient{n}"] = ingredient
            meal[f"strMeasure{n}"] = measure
        if entry.source_url:
            meal["strSource"] = entry.source_url
        if entry.youtube_url:
            meal["strYoutube"] = entry.youtube_url
        meals.append(meal)
    return {"meals": meals}


def write_corpus(corpus: OfflineCorpus, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(corpus_to_json(corpus), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
