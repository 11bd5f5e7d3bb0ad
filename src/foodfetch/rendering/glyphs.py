"""Brightness to glyph mapping."""

from attrs import frozen

# Ordered from darkest to brightest pixel.
GLYPHS = ("$", "@", "%", "&", "#", "*")

RESET = "\033[0m"


def truecolor(text: str, rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m{text}{RESET}"


@frozen
class ColoredGlyph:
    """A density glyph tinted with the color of the pixel it stands for."""

    char: str
    rgb: tuple[int, int, int]

    def render(self) -> str:
        return truecolor(self.char, self.rgb)


def map_glyph(luma: int, rgb: tuple[int, int, int]) -> ColoredGlyph:
    """Pick the glyph whose equal-width luma bucket contains ``luma``."""
    index = min(luma * len(GLYPHS) // 256, len(GLYPHS) - 1)
    return ColoredGlyph(GLYPHS[index], rgb)
