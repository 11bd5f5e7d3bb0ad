"""Lay a recipe's text out beside its ASCII-art thumbnail."""

import re
import textwrap

from ..models.display import DisplayRecipe
from .glyphs import RESET

RED = "\033[31m"
INSTRUCTIONS_WIDTH = 80
INSTRUCTIONS_INDENT = "\t "

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def _label(text: str, color: bool) -> str:
    return f"{RED}{text}{RESET}" if color else text


def visible_width(line: str) -> int:
    return len(ANSI_ESCAPE.sub("", line))


def start_lines(recipe: DisplayRecipe, color: bool = True) -> list[str]:
    """Title, category, area and ingredients."""
    lines = [
        f"\t{_label('Title', color)} : {recipe.title} ({recipe.id})",
        f"\t{_label('----', color)}",
    ]
    if recipe.category:
        lines.append(f"\t{_label('Category', color)} : {recipe.category}")
    if recipe.area:
        lines.append(f"\t{_label('Area', color)} : {recipe.area}")
    lines.append(f"\t{_label('Ingredients : ', color)}")
    for ingredient, quantity in recipe.ingredients:
        lines.append(f"\t\t - {ingredient} ({quantity})")
    return lines


def end_lines(recipe: DisplayRecipe, color: bool = True) -> list[str]:
    """Labelled links, or nothing when links were not asked for."""
    if not recipe.info.shows_links:
        return []
    lines = []
    for label, url in (
        ("Tutorial", recipe.tutorial_url),
        ("Youtube", recipe.youtube_url),
        ("Image url", recipe.image_url),
    ):
        if url:
            lines.append(f"\t{_label(label, color)} :")
            lines.append(f"\t {url}")
    return lines


def instruction_lines(recipe: DisplayRecipe, color: bool = True) -> list[str]:
    if not recipe.info.shows_instructions or not recipe.instructions.strip():
        return []
    lines = ["", f"\t{_label('Instructions : ', color)}"]
    for paragraph in recipe.instructions.splitlines():
        if not paragraph.strip():
            continue
        lines.extend(
            INSTRUCTIONS_INDENT + chunk
            for chunk in textwrap.wrap(paragraph, INSTRUCTIONS_WIDTH)
        )
    return lines


def overlay(image: list[str], start: list[str], end: list[str]) -> list[str]:
    """Write ``start`` below the first image line and ``end`` at its bottom.

    The block grows with blank rows when the text is taller than the image,
    so any combination of lengths yields a valid layout.
    """
    lines = list(image)
    blank = " " * max((visible_width(line) for line in lines), default=0)

    def ensure(height: int) -> None:
        if len(lines) < height:
            lines.extend([blank] * (height - len(lines)))

    ensure(len(start) + 1)
    for index, line in enumerate(start, start=1):
        lines[index] += line

    end_start = max(len(lines) - len(end), len(start) + 1)
    ensure(end_start + len(end))
    for index, line in enumerate(end, start=end_start):
        lines[index] += line
    return lines


def compose(recipe: DisplayRecipe, *, color: bool = True) -> str:
    """Build the full multi-line report for one recipe."""
    start = start_lines(recipe, color)
    end = end_lines(recipe, color)
    if recipe.info.shows_image and recipe.image_lines:
        body = overlay(list(recipe.image_lines), start, end)
    else:
        body = start + end
    body.extend(instruction_lines(recipe, color))
    return "\n".join(body)
