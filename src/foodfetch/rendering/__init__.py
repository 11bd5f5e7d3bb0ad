"""Terminal rendering: ASCII-art thumbnails and recipe reports."""

from .ascii import image_width_for, render_image
from .glyphs import ColoredGlyph, map_glyph
from .report import compose

__all__ = ["ColoredGlyph", "compose", "image_width_for", "map_glyph", "render_image"]
