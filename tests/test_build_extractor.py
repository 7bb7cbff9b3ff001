"""Tests for build page parsing over saved HTML."""

import pytest
from bs4 import BeautifulSoup

from lolbot.services.build_extractor import (
    extract_active_grid, extract_item_slots, extract_lane, extract_rune_build,
    extract_skill_order, extract_win_rate
)
from lolbot.services.page_schema import BUILD_PAGE
from lolbot.utils.exceptions import ElementNotFoundError

from conftest import FakePageSession


def perk_row(count, active_index, active_class="perk-active"):
    cells = []
    for index in range(count):
        css = f"perk {active_class}" if index == active_index else "perk perk-inactive"
        cells.append(f'<div class="{css}"><img alt=""/></div>')
    return f'<div class="perk-row"><div class="perks">{"".join(cells)}</div></div>'


def shard_row(active_index):
    cells = []
    for index in range(3):
        css = "shard shard-active" if index == active_index else "shard shard-inactive"
        cells.append(f'<div class="{css}"></div>')
    return f'<div class="perk-row"><div class="perks">{"".join(cells)}</div></div>'


BUILD_HTML = f"""
<div class="champion-recommended-build">
  <div class="win-rate"><div class="value">51.37%</div></div>
  <a class="role-filter active">Top</a>
  <div class="rune-tree primary-tree">
    <div class="perk-style-title"><div class="pointer">Precision</div></div>
    {perk_row(4, 0)}
    {perk_row(3, 1)}
    {perk_row(3, 2)}
    {perk_row(3, 0)}
  </div>
  <div class="secondary-tree">
    <div class="perk-style-title"><div class="pointer">Resolve</div></div>
    <div class="rune-tree">
      {perk_row(3, -1)}
      {perk_row(3, 0)}
      {perk_row(3, 2)}
    </div>
  </div>
  <div class="stat-shards-container">
    {shard_row(0)}
    {shard_row(1)}
    {shard_row(2)}
  </div>
</div>
"""


def skill_row(label, levels):
    cells = "".join(
        f'<div class="skill-cell{" skill-up" if level in levels else ""}"></div>'
        for level in range(1, 19)
    )
    return (
        f'<div class="skill-order-row"><div class="skill-label">{label}</div>'
        f'<div class="skill-order">{cells}</div></div>'
    )


SKILL_HTML = f"""
<div class="skill-path-container">
  {skill_row("Q", {1, 4, 5, 7, 9})}
  {skill_row("W", {2, 8, 10, 12, 13})}
  {skill_row("E", {3, 14, 15, 17, 18})}
  {skill_row("R", {6, 11, 16})}
</div>
"""


@pytest.fixture
def build_document():
    return BeautifulSoup(BUILD_HTML, "html.parser")


def test_win_rate_strips_percent(build_document):
    assert extract_win_rate(build_document) == 51.37


def test_unparseable_win_rate_reads_zero():
    document = BeautifulSoup('<div class="win-rate"><div class="value">N/A</div></div>', "html.parser")
    assert extract_win_rate(document) == 0.0


def test_lane_prefers_argument(build_document):
    assert extract_lane(build_document, "mid") == "MID"
    assert extract_lane(build_document) == "TOP"


def test_rune_build_shapes_and_titles(build_document):
    runes = extract_rune_build(build_document)

    assert runes.primary.title == "Precision"
    assert runes.secondary.title == "Resolve"
    assert [len(row) for row in runes.primary.grid] == [4, 3, 3, 3]
    assert [len(row) for row in runes.secondary.grid] == [3, 3, 3]
    assert [len(row) for row in runes.shards.grid] == [3, 3, 3]


def test_rune_build_active_cells(build_document):
    runes = extract_rune_build(build_document)

    assert runes.primary.grid[0] == (True, False, False, False)
    assert runes.primary.grid[2] == (False, False, True)
    assert runes.secondary.grid[0] == (False, False, False)
    assert sum(cell for row in runes.secondary.grid for cell in row) == 2
    assert runes.shards.grid == ((True, False, False), (False, True, False), (False, False, True))


def test_missing_rows_is_an_error(build_document):
    with pytest.raises(ElementNotFoundError):
        extract_active_grid(build_document, "div.not-there div.perks", "perk-active")


def test_skill_order_rows_per_ability():
    skills = extract_skill_order(BeautifulSoup(SKILL_HTML, "html.parser"))

    assert skills.abilities == ("Q", "W", "E", "R")
    assert skills.level_count == 18
    assert skills.rows[3][5] is True
    assert sum(skills.rows[0]) == 5
    assert all(sum(level) == 1 for level in skills.by_level())


@pytest.mark.asyncio
async def test_item_slots_hover_every_icon():
    icon = BUILD_PAGE.item_icon
    items = {
        f"div.starting-items {icon}": ["Doran's Blade", "Health Potion"],
        f"div.core-items {icon}": ["Eclipse", "Sterak's Gage", "Death's Dance"],
        f"div.item-options-1 {icon}": ["Maw of Malmortius", "Guardian Angel"],
        f"div.item-options-2 {icon}": ["Spirit Visage"],
        f"div.item-options-3 {icon}": [],
    }
    session = FakePageSession(items=items)

    slots = await extract_item_slots(session)

    assert [group.label for group in slots.groups] == [
        "Starting Items", "Core Items", "4th Item Options", "5th Item Options", "6th Item Options"
    ]
    assert slots.groups[0].render() == "Doran's Blade → Health Potion"
    assert slots.groups[2].render() == "Maw of Malmortius / Guardian Angel"
    assert slots.groups[4].render() == "-"
    assert sum(1 for call in session.calls if call[0] == "hover") == 8


@pytest.mark.asyncio
async def test_item_group_missing_is_fatal():
    session = FakePageSession(missing={"div.core-items"})

    with pytest.raises(ElementNotFoundError):
        await extract_item_slots(session)
