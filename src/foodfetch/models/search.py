"""Search result models."""

import enum

from attrs import field, frozen

from .recipe import CatalogRecord


class MatchKind(enum.Enum):
    """How a search result was obtained."""

    EXACT = "exact"
    SUBSTITUTED = "substituted"
    RANDOM = "random"


@frozen
class SearchOutcome:
    """Records produced by a search, tagged with how they were found."""

    records: tuple[CatalogRecord, ...] = field(converter=tuple)
    kind: MatchKind
    query: str | None = None
    substituted_name: str | None = None

    @property
    def advisory(self) -> str | None:
        """Message telling the user which recipe replaced the query."""
        if self.kind is not MatchKind.SUBSTITUTED:
            return None
        return (
            f'No exact match found for "{self.query}". '
            f'Did you mean "{self.substituted_name}"?'
        )
