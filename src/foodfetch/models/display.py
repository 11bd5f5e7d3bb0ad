"""Render-ready recipe models."""

import enum
from collections.abc import Iterable

from attrs import evolve, field, frozen

from .recipe import CatalogRecord


class InfoLevel(enum.Flag):
    """Sections the caller wants in a report.

    ``ALL`` is the only flag that turns on the image column; ``LINKS`` and
    ``INSTRUCTIONS`` on their own never trigger an image download.
    """

    ALL = enum.auto()
    LINKS = enum.auto()
    INSTRUCTIONS = enum.auto()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "InfoLevel":
        """Combine flag names such as ``["links", "instructions"]``."""
        level = cls(0)
        for name in names:
            level |= cls[name.upper()]
        return level

    @property
    def shows_image(self) -> bool:
        return InfoLevel.ALL in self

    @property
    def shows_links(self) -> bool:
        return bool(self & (InfoLevel.ALL | InfoLevel.LINKS))

    @property
    def shows_instructions(self) -> bool:
        return bool(self & (InfoLevel.ALL | InfoLevel.INSTRUCTIONS))


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 0


@frozen
class DisplayRecipe:
    """A catalog record projected into the fields a report shows."""

    id: int
    title: str
    category: str = ""
    area: str = ""
    ingredients: tuple[tuple[str, str], ...] = field(default=(), converter=tuple)
    instructions: str = ""
    tutorial_url: str = ""
    youtube_url: str = ""
    image_url: str = ""
    image_lines: tuple[str, ...] = field(default=(), converter=tuple)
    info: InfoLevel = InfoLevel.ALL

    @classmethod
    def from_record(cls, record: CatalogRecord, info: InfoLevel) -> "DisplayRecipe":
        """Extract the displayable fields, dropping half-empty ingredients."""
        ingredients = [
            (ingredient, quantity)
            for ingredient, quantity in record.ingredients
            if ingredient and quantity
        ]
        return cls(
            id=_parse_id(record.id),
            title=record.name,
            category=record.category,
            area=record.area,
            ingredients=ingredients,
            instructions=record.instructions,
            tutorial_url=record.source_url,
            youtube_url=record.youtube_url,
            image_url=record.thumbnail_url,
            info=info,
        )

    @property
    def longest_text(self) -> str:
        """Longest single-line field that can end up beside the image."""
        fields = [
            self.title,
            self.category,
            self.area,
            self.tutorial_url,
            self.youtube_url,
            self.image_url,
        ]
        return max(fields, key=len)

    def with_image(self, lines: Iterable[str]) -> "DisplayRecipe":
        return evolve(self, image_lines=tuple(lines))
