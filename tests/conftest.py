"""Shared test fixtures."""

import io
import struct

import pytest
from PIL import Image

from foodfetch.errors import TransportError
from foodfetch.models.recipe import CatalogRecord, OfflineCorpusEntry
from foodfetch.services.corpus import OfflineCorpus


class FakeCatalog:
    """In-memory stand-in for MealDBService that records every call."""

    def __init__(self, meals=None, failing=(), images=None, random_meals=None):
        self.meals = meals or {}
        self.failing = set(failing)
        self.images = images or {}
        self.random_meals = random_meals or []
        self.searches: list[str] = []
        self.image_requests: list[str] = []

    async def search(self, query: str) -> list[CatalogRecord]:
        self.searches.append(query)
        if query in self.failing:
            raise TransportError(f"boom: {query}")
        return list(self.meals.get(query, []))

    async def random(self) -> list[CatalogRecord]:
        return list(self.random_meals)

    async def fetch_image(self, url: str) -> bytes:
        self.image_requests.append(url)
        if url not in self.images:
            raise TransportError(f"404 for {url}")
        return self.images[url]


def png_bytes(size=(50, 40), color=(200, 30, 30)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, "PNG")
    return buffer.getvalue()


def oversized_bmp_bytes(width=30000, height=30000) -> bytes:
    """A tiny BMP whose header claims far more pixels than Pillow allows."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), (0, 0, 0)).save(buffer, "BMP")
    data = bytearray(buffer.getvalue())
    struct.pack_into("<ii", data, 18, width, height)
    return bytes(data)


@pytest.fixture
def carbonara() -> CatalogRecord:
    return CatalogRecord(
        id="52982",
        name="Spaghetti Carbonara",
        category="Pasta",
        area="Italian",
        ingredients=[("Spaghetti", "320g"), ("Egg Yolks", "6"), ("Salt", "")],
        instructions="Boil the pasta.\nMix with the eggs.",
        source_url="https://example.com/carbonara",
        youtube_url="https://www.youtube.com/watch?v=abc",
        thumbnail_url="https://example.com/carbonara.jpg",
    )


@pytest.fixture
def corpus() -> OfflineCorpus:
    return OfflineCorpus(
        [
            OfflineCorpusEntry(name="Beef Wellington", category="Beef"),
            OfflineCorpusEntry(
                name="Spaghetti Carbonara",
                category="Pasta",
                area="Italian",
                ingredients=[("Spaghetti", "320g")],
            ),
            OfflineCorpusEntry(name="Pancakes", category="Dessert"),
        ]
    )
