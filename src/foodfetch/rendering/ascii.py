"""Convert a thumbnail into lines of colored ASCII art."""

import io
import logging

from PIL import Image, ImageEnhance, ImageFilter, UnidentifiedImageError

from ..errors import ImageDecodeError
from .glyphs import map_glyph

logger = logging.getLogger(__name__)

BLUR_RADIUS = 10
CONTRAST_FACTOR = 1.21
# Terminal cells are roughly 25 units wide for 11 tall.
ASPECT_NUMERATOR = 11
ASPECT_DENOMINATOR = 25
TEXT_MARGIN = " " * 9


def image_width_for(longest_text: str, terminal_width: int, max_width: int) -> int:
    """Width left for the image once the widest text line has room."""
    available = terminal_width - len(TEXT_MARGIN + longest_text)
    return max(0, min(available, max_width))


def render_image(data: bytes, width: int) -> list[str]:
    """Render image bytes as ``width`` columns of colored glyphs.

    Raises ``ImageDecodeError`` for bytes Pillow cannot read. A width too
    small to hold a single row gives an empty block.
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        raise ImageDecodeError(f"Cannot decode image: {exc}") from exc

    height = width * ASPECT_NUMERATOR // ASPECT_DENOMINATOR
    if width <= 0 or height <= 0:
        logger.debug("Image width %d too small to render", width)
        return []

    image = image.convert("RGB").filter(ImageFilter.BoxBlur(BLUR_RADIUS))
    image = ImageEnhance.Contrast(image).enhance(CONTRAST_FACTOR)
    small = image.resize((width, height), Image.Resampling.NEAREST)
    luma = small.convert("L")

    colors = small.load()
    lumas = luma.load()
    lines = []
    for y in range(height):
        lines.append(
            "".join(map_glyph(lumas[x, y], colors[x, y]).render() for x in range(width))
        )
    return lines
