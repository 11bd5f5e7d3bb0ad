"""TheMealDB API service."""

import logging
import re

import httpx
from attrs import define

from ..config import DEFAULT_API_URL
from ..errors import TransportError
from ..models.recipe import CatalogRecord

logger = logging.getLogger(__name__)

INGREDIENT_KEY = re.compile(r"^strIngredient(\d+)$")


def _text(value: str | None) -> str:
    return (value or "").strip()


def parse_ingredients(item: dict) -> list[tuple[str, str]]:
    """Collect the numbered ingredient/measure columns of a meal, in order."""
    numbers = sorted(
        int(match.group(1))
        for key in item
        if (match := INGREDIENT_KEY.match(key))
    )
    pairs = []
    for n in numbers:
        ingredient = _text(item.get(f"strIngredient{n}"))
        measure = _text(item.get(f"strMeasure{n}"))
        if ingredient or measure:
            pairs.append((ingredient, measure))
    return pairs


def parse_meal(item: dict) -> CatalogRecord:
    """Parse a meal object from an API response."""
    return CatalogRecord(
        id=_text(item.get("idMeal")),
        name=_text(item.get("strMeal")),
        category=_text(item.get("strCategory")),
        area=_text(item.get("strArea")),
        ingredients=parse_ingredients(item),
        instructions=_text(item.get("strInstructions")),
        source_url=_text(item.get("strSource")),
        youtube_url=_text(item.get("strYoutube")),
        thumbnail_url=_text(item.get("strMealThumb")),
    )


@define
class MealDBService:
    """Client for TheMealDB API."""

    base_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    _client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get_meals(self, path: str, params: dict | None = None) -> list[CatalogRecord]:
        client = await self._get_client()
        try:
            resp = await client.get(path, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {path} failed: {exc}") from exc
        except ValueError as exc:
            raise TransportError(f"Invalid JSON from {path}") from exc

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected payload from {path}")
        meals = data.get("meals") or []
        return [parse_meal(item) for item in meals if isinstance(item, dict)]

    async def search(self, query: str) -> list[CatalogRecord]:
        """Search meals by name. Returns an empty list when nothing matches."""
        meals = await self._get_meals("/search.php", params={"s": query})
        logger.debug("search %r returned %d meal(s)", query, len(meals))
        return meals

    async def random(self) -> list[CatalogRecord]:
        """Fetch a single random meal."""
        return await self._get_meals("/random.php")

    async def list_by_first_letter(self, letter: str) -> list[CatalogRecord]:
        """List every meal whose name starts with ``letter``."""
        return await self._get_meals("/search.php", params={"f": letter})

    async def fetch_image(self, url: str) -> bytes:
        """Download raw image bytes from an absolute URL."""
        client = await self._get_client()
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Could not download {url}: {exc}") from exc
        return resp.content
