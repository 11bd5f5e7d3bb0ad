"""Turn a loose keyword into concrete TheMealDB records."""

import logging
from typing import Protocol

from attrs import define

from ..errors import NotFound, TransportError
from ..models.recipe import CatalogRecord, OfflineCorpusEntry
from ..models.search import MatchKind, SearchOutcome
from .corpus import OfflineCorpus

logger = logging.getLogger(__name__)


class Catalog(Protocol):
    async def search(self, query: str) -> list[CatalogRecord]: ...

    async def random(self) -> list[CatalogRecord]: ...


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings (insertions, deletions, substitutions)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every whitespace separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def closest_entry(corpus: OfflineCorpus, query: str) -> OfflineCorpusEntry | None:
    """Pick the corpus entry nearest to ``query``, or None if nothing is close.

    A candidate is only accepted when its distance is at most half the length
    of the longer of the two strings. Ties go to the earliest entry.
    """
    query = query.lower()
    best: OfflineCorpusEntry | None = None
    best_distance = 0
    for entry, name in zip(corpus.entries, corpus.names):
        if not name:
            continue
        distance = levenshtein(name, query)
        if best is None or distance < best_distance:
            best, best_distance = entry, distance
    if best is None:
        return None

    threshold = max(len(best.name), len(query)) // 2
    if best_distance > threshold:
        logger.info(
            "Closest corpus name %r is %d edits from %r (threshold %d)",
            best.name,
            best_distance,
            query,
            threshold,
        )
        return None
    return best


@define
class SearchResolver:
    """Cascading search: exact, title-cased, then nearest offline name."""

    catalog: Catalog
    corpus: OfflineCorpus

    async def _try_search(self, query: str) -> tuple[list[CatalogRecord], TransportError | None]:
        try:
            return await self.catalog.search(query), None
        except TransportError as exc:
            logger.info("Search for %r failed: %s", query, exc)
            return [], exc

    async def resolve(self, query: str | None) -> SearchOutcome:
        """Resolve ``query`` to one or more records.

        ``None`` asks the catalog for a random meal. Raises ``NotFound`` when
        every stage comes back empty.
        """
        if query is None:
            records = await self.catalog.random()
            if not records:
                raise NotFound("random meal")
            return SearchOutcome(records, MatchKind.RANDOM)

        original = query.strip()
        lowercase = original.lower()
        last_error: TransportError | None = None

        for attempt in (lowercase, capitalize_words(lowercase)):
            records, error = await self._try_search(attempt)
            last_error = error or last_error
            if records:
                return SearchOutcome(records, MatchKind.EXACT, query=original)
            logger.debug("No catalog match for %r", attempt)

        entry = closest_entry(self.corpus, lowercase)
        if entry is None:
            raise NotFound(original) from last_error

        logger.info('No exact match for "%s", using "%s"', original, entry.name)
        record = await self._full_record(entry)
        return SearchOutcome(
            [record],
            MatchKind.SUBSTITUTED,
            query=original,
            substituted_name=entry.name,
        )

    async def _full_record(self, entry: OfflineCorpusEntry) -> CatalogRecord:
        """Prefer the catalog's complete record for a corpus name."""
        records, _ = await self._try_search(entry.name)
        for record in records:
            if record.name.lower() == entry.name.lower():
                return record
        return entry.to_record()
