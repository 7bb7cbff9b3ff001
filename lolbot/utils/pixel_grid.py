"""
Square-emoji "pixel grid" rendering for rune pages and skill orders.

Emoji squares are two columns wide in Discord's monospace font, so padding is
computed on display width rather than on len().
"""

import unicodedata
from typing import List, Sequence

from lolbot.constants import GlyphConstants, ScrapeConstants
from lolbot.data_models.build import BoolGrid, SkillOrderGrid
from lolbot.utils.exceptions import UnknownRuneTreeError


def display_width(text: str) -> int:
    """Terminal-style width: wide/fullwidth code points count 2, combining marks 0."""
    width = 0
    for char in text:
        if unicodedata.combining(char) or unicodedata.category(char) in ("Mn", "Me", "Cf"):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def pad_display(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def tree_glyph(tree_name: str) -> str:
    try:
        return GlyphConstants.RUNE_TREES[tree_name.strip()]
    except KeyError:
        raise UnknownRuneTreeError(tree_name.strip())


def perks_to_colored_grid(grid: BoolGrid, tree_name: str) -> List[List[str]]:
    """Map each cell to the tree's glyph if active, else the transparent glyph."""
    glyph = tree_glyph(tree_name)
    return [
        [glyph if active else GlyphConstants.TRANSPARENT for active in row]
        for row in grid
    ]


def grid_to_lines(grid: Sequence[Sequence[str]]) -> List[str]:
    return ["".join(row) for row in grid]


def columnize_trees(left: Sequence[str], right: Sequence[str], width: int = ScrapeConstants.RUNE_COLUMN_WIDTH) -> List[str]:
    """Lay two columns side by side, padding the left one to `width` display columns."""
    lines = []
    for i in range(max(len(left), len(right))):
        left_cell = left[i] if i < len(left) else ""
        right_cell = right[i] if i < len(right) else ""
        lines.append(pad_display(left_cell, width) + right_cell)
    return lines


def render_skill_order(skills: SkillOrderGrid) -> List[str]:
    """One line per level: level number, then one glyph per ability."""
    header = "   " + "".join(pad_display(label, 2) for label in skills.abilities)
    lines = [header.rstrip()]
    for index, row in enumerate(skills.by_level()):
        level = index + 1
        leveled_glyph = (
            GlyphConstants.SKILL_ULTIMATE if level in ScrapeConstants.ULTIMATE_LEVELS
            else GlyphConstants.SKILL_LEVELED
        )
        cells = "".join(leveled_glyph if leveled else GlyphConstants.TRANSPARENT for leveled in row)
        lines.append(f"{level:>2} {cells}")
    return lines
