"""TheMealDB data models."""

from attrs import field, frozen


@frozen
class CatalogRecord:
    """Represents one meal as returned by TheMealDB."""

    id: str
    name: str
    category: str = ""
    area: str = ""
    ingredients: tuple[tuple[str, str], ...] = field(default=(), converter=tuple)
    instructions: str = ""
    source_url: str = ""
    youtube_url: str = ""
    thumbnail_url: str = ""


@frozen
class OfflineCorpusEntry:
    """Represents a reduced meal from the bundled offline corpus."""

    name: str
    thumbnail_url: str = ""
    ingredients: tuple[tuple[str, str], ...] = field(default=(), converter=tuple)
    category: str = ""
    area: str = ""
    source_url: str = ""
    youtube_url: str = ""
    instructions: str = ""

    def to_record(self) -> CatalogRecord:
        """Build a catalog record out of the corpus data."""
        return CatalogRecord(
            id="",
            name=self.name,
            category=self.category,
            area=self.area,
            ingredients=self.ingredients,
            instructions=self.instructions,
            source_url=self.source_url,
            youtube_url=self.youtube_url,
            thumbnail_url=self.thumbnail_url,
        )
