"""
Parsers for the u.gg champion build page.

Phase 1 functions work on a static BeautifulSoup snapshot: win rate, lane,
rune trees and stat shards. Phase 2 needs the live tab, because item names
only appear in tooltips after hovering each item icon; the skill order grid
is read from a fresh snapshot once the page has settled.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from lolbot.data_models.build import (
    BoolGrid, ItemBuildSlots, ItemGroup, RuneBuild, RuneSelection,
    SkillOrderGrid, StatShardSelection
)
from lolbot.services.browser import PageSession
from lolbot.services.page_schema import BUILD_PAGE, BuildPageSchema
from lolbot.utils.exceptions import ElementNotFoundError

logger = logging.getLogger(__name__)


def select_required(document: Tag, selector: str) -> Tag:
    element = document.select_one(selector)
    if element is None:
        raise ElementNotFoundError(selector)
    return element


def element_text(element: Tag) -> str:
    return element.get_text(" ", strip=True)


def _has_class_fragment(element: Tag, fragment: str) -> bool:
    return any(fragment in css_class for css_class in element.get("class", []))


def extract_win_rate(document: BeautifulSoup, schema: BuildPageSchema = BUILD_PAGE) -> float:
    """Win rate as a percentage; unparseable text reads as 0.0."""
    text = element_text(select_required(document, schema.win_rate)).rstrip("%").strip()
    try:
        return float(text)
    except ValueError:
        logger.warning(f"Unparseable win rate '{text}'")
        return 0.0


def extract_lane(document: BeautifulSoup, lane: Optional[str] = None, schema: BuildPageSchema = BUILD_PAGE) -> str:
    if lane:
        return lane.upper()
    return element_text(select_required(document, schema.active_role)).upper()


def extract_active_grid(document: BeautifulSoup, rows_selector: str, active_class: str) -> BoolGrid:
    """One row per matched element, one flag per child element."""
    rows = document.select(rows_selector)
    if not rows:
        raise ElementNotFoundError(rows_selector)
    return tuple(
        tuple(_has_class_fragment(option, active_class) for option in row.find_all(recursive=False))
        for row in rows
    )


def extract_rune_selection(
    document: BeautifulSoup,
    title_selector: str,
    rows_selector: str,
    active_class: str,
) -> RuneSelection:
    title = element_text(select_required(document, title_selector))
    return RuneSelection(title=title, grid=extract_active_grid(document, rows_selector, active_class))


def extract_stat_shards(document: BeautifulSoup, schema: BuildPageSchema = BUILD_PAGE) -> StatShardSelection:
    return StatShardSelection(grid=extract_active_grid(document, schema.shard_rows, schema.active_shard_class))


def extract_rune_build(document: BeautifulSoup, schema: BuildPageSchema = BUILD_PAGE) -> RuneBuild:
    primary = extract_rune_selection(
        document, schema.primary_title, schema.primary_rows, schema.active_perk_class
    )
    secondary = extract_rune_selection(
        document, schema.secondary_title, schema.secondary_rows, schema.active_perk_class
    )
    return RuneBuild(primary=primary, secondary=secondary, shards=extract_stat_shards(document, schema))


def extract_skill_order(document: BeautifulSoup, schema: BuildPageSchema = BUILD_PAGE) -> SkillOrderGrid:
    rows = document.select(schema.skill_rows)
    if not rows:
        raise ElementNotFoundError(schema.skill_rows)

    labels = []
    grid = []
    for row in rows:
        labels.append(element_text(select_required(row, schema.skill_label)))
        cells = row.select(schema.skill_cells)
        if not cells:
            raise ElementNotFoundError(schema.skill_cells)
        grid.append(tuple(_has_class_fragment(cell, schema.skill_up_class) for cell in cells))
    return SkillOrderGrid(abilities=tuple(labels), rows=tuple(grid))


async def extract_item_slots(session: PageSession, schema: BuildPageSchema = BUILD_PAGE) -> ItemBuildSlots:
    """Hover every item icon in each group and collect the tooltip names."""
    groups = []
    for group in schema.item_groups:
        await session.wait_for_selector(group.container)
        icon_selector = f"{group.container} {schema.item_icon}"
        icon_count = await session.count(icon_selector)
        names = []
        for index in range(icon_count):
            names.append(await session.hover_and_read(icon_selector, index, schema.item_tooltip))
        logger.debug(f"{group.label}: {names}")
        groups.append(ItemGroup(label=group.label, items=tuple(names), separator=group.separator))
    return ItemBuildSlots(groups=tuple(groups))
