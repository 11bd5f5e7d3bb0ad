"""Tests for glyph mapping and ASCII-art rendering."""

import re

import pytest
from conftest import oversized_bmp_bytes, png_bytes

from foodfetch.errors import ImageDecodeError, RenderError
from foodfetch.rendering.ascii import image_width_for, render_image
from foodfetch.rendering.glyphs import GLYPHS, ColoredGlyph, map_glyph

ANSI = re.compile(r"\033\[[0-9;]*m")


class TestGlyphMapper:
    """Tests for map_glyph."""

    @pytest.mark.parametrize(
        "luma,expected",
        [(0, "$"), (42, "$"), (43, "@"), (127, "%"), (128, "&"), (213, "#"), (214, "*"), (255, "*")],
    )
    def test_equal_width_buckets(self, luma, expected):
        assert map_glyph(luma, (0, 0, 0)).char == expected

    def test_every_glyph_reachable(self):
        chars = {map_glyph(luma, (0, 0, 0)).char for luma in range(256)}
        assert chars == set(GLYPHS)

    def test_monotonic(self):
        indices = [GLYPHS.index(map_glyph(luma, (0, 0, 0)).char) for luma in range(256)]
        assert indices == sorted(indices)

    def test_keeps_color(self):
        glyph = map_glyph(10, (1, 2, 3))
        assert glyph == ColoredGlyph("$", (1, 2, 3))
        assert glyph.render() == "\033[38;2;1;2;3m$\033[0m"


class TestImageWidth:
    """Tests for image_width_for."""

    def test_leaves_room_for_text(self):
        assert image_width_for("x" * 11, 100, 128) == 80

    def test_capped(self):
        assert image_width_for("short", 400, 128) == 128

    def test_never_negative(self):
        assert image_width_for("x" * 200, 80, 128) == 0


class TestRenderImage:
    """Tests for render_image."""

    def test_dimensions(self):
        lines = render_image(png_bytes(), 50)
        assert len(lines) == 50 * 11 // 25
        assert all(len(ANSI.sub("", line)) == 50 for line in lines)

    def test_uses_pixel_color(self):
        lines = render_image(png_bytes(color=(200, 30, 30)), 10)
        assert "\033[38;2;" in lines[0]
        codes = set(re.findall(r"38;2;(\d+);(\d+);(\d+)", "".join(lines)))
        assert len(codes) == 1
        r, g, b = map(int, codes.pop())
        assert r > g and r > b

    def test_dark_and_light_images(self):
        dark = ANSI.sub("", render_image(png_bytes(color=(0, 0, 0)), 10)[0])
        light = ANSI.sub("", render_image(png_bytes(color=(255, 255, 255)), 10)[0])
        assert set(dark) == {GLYPHS[0]}
        assert set(light) == {GLYPHS[-1]}

    def test_tiny_width_gives_empty_block(self):
        assert render_image(png_bytes(), 2) == []
        assert render_image(png_bytes(), 0) == []

    def test_undecodable_bytes(self):
        with pytest.raises(ImageDecodeError):
            render_image(b"definitely not an image", 40)

    def test_decode_error_is_render_error(self):
        with pytest.raises(RenderError):
            render_image(b"", 40)

    def test_oversized_header_is_decode_error(self):
        with pytest.raises(ImageDecodeError):
            render_image(oversized_bmp_bytes(), 40)
