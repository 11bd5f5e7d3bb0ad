"""Turn resolved records into printable reports, one task per record."""

import asyncio
import logging
import shutil
from collections.abc import Sequence
from typing import Protocol

from ..errors import RenderError, TransportError
from ..models.display import DisplayRecipe, InfoLevel
from ..models.recipe import CatalogRecord
from ..rendering.ascii import image_width_for, render_image
from ..rendering.report import compose

logger = logging.getLogger(__name__)

DEFAULT_MAX_IMAGE_WIDTH = 128


class ImageSource(Protocol):
    async def fetch_image(self, url: str) -> bytes: ...


def terminal_width() -> int:
    return shutil.get_terminal_size().columns


async def build_display_recipe(
    record: CatalogRecord,
    info: InfoLevel,
    images: ImageSource,
    max_image_width: int = DEFAULT_MAX_IMAGE_WIDTH,
    columns: int | None = None,
) -> DisplayRecipe:
    """Extract display fields and, when asked for, render the thumbnail.

    Image problems never escape: the recipe just comes back without one.
    """
    recipe = DisplayRecipe.from_record(record, info)
    if not info.shows_image or not recipe.image_url:
        return recipe

    width = image_width_for(
        recipe.longest_text,
        columns if columns is not None else terminal_width(),
        max_image_width,
    )
    if width <= 0:
        logger.warning("Terminal too narrow to draw %s", recipe.title)
        return recipe

    try:
        data = await images.fetch_image(recipe.image_url)
        lines = await asyncio.to_thread(render_image, data, width)
    except (TransportError, RenderError) as exc:
        logger.warning("No image for %s: %s", recipe.title, exc)
        return recipe
    return recipe.with_image(lines)


async def render_report(
    record: CatalogRecord,
    info: InfoLevel,
    images: ImageSource,
    max_image_width: int = DEFAULT_MAX_IMAGE_WIDTH,
    columns: int | None = None,
    color: bool = True,
) -> str:
    recipe = await build_display_recipe(record, info, images, max_image_width, columns)
    return compose(recipe, color=color)


async def render_reports(
    records: Sequence[CatalogRecord],
    info: InfoLevel,
    images: ImageSource,
    max_image_width: int = DEFAULT_MAX_IMAGE_WIDTH,
    columns: int | None = None,
    color: bool = True,
) -> list[str]:
    """Render every record concurrently; results keep the input order."""
    if columns is None:
        columns = terminal_width()
    return list(
        await asyncio.gather(
            *(
                render_report(record, info, images, max_image_width, columns, color)
                for record in records
            )
        )
    )
