"""
Every u.gg URL shape and CSS selector the bot depends on.

The site has no public contract; when its markup changes, this is the only
module that should need updating.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from lolbot.config import Config


@dataclass(frozen=True)
class ItemGroupSchema:
    label: str
    container: str
    separator: str


@dataclass(frozen=True)
class BuildPageSchema:
    root: str = "div.champion-recommended-build"
    no_data: str = "div.no-data-available, div.matchup-no-data"
    active_role: str = "a.role-filter.active"
    win_rate: str = "div.win-rate div.value"

    primary_title: str = "div.rune-tree.primary-tree div.perk-style-title div.pointer"
    primary_rows: str = "div.rune-tree.primary-tree div.perk-row div.perks"
    secondary_title: str = "div.secondary-tree div.perk-style-title div.pointer"
    secondary_rows: str = "div.secondary-tree div.rune-tree div.perk-row div.perks"
    shard_rows: str = "div.stat-shards-container div.perk-row div.perks"
    active_perk_class: str = "perk-active"
    active_shard_class: str = "shard-active"

    item_icon: str = "div.item-img"
    item_tooltip: str = "div.tooltip-portal div.item-tooltip div.name"
    item_groups: Tuple[ItemGroupSchema, ...] = (
        ItemGroupSchema("Starting Items", "div.starting-items", " → "),
        ItemGroupSchema("Core Items", "div.core-items", " → "),
        ItemGroupSchema("4th Item Options", "div.item-options-1", " / "),
        ItemGroupSchema("5th Item Options", "div.item-options-2", " / "),
        ItemGroupSchema("6th Item Options", "div.item-options-3", " / "),
    )

    skill_root: str = "div.skill-path-container"
    skill_rows: str = "div.skill-order-row"
    skill_label: str = "div.skill-label"
    skill_cells: str = "div.skill-order div.skill-cell"
    skill_up_class: str = "skill-up"


@dataclass(frozen=True)
class CountersPageSchema:
    root: str = "div#content"
    no_data: str = "div.no-data-available"
    active_role: str = ".media-query_MOBILE_SMALL__DESKTOP_SMALL .filter-select .role-value div"
    best_picks: str = ".w-full.grid > div:nth-child(1) a"
    worst_picks: str = ".w-full.grid > div:nth-child(2) a"
    lane_picks: str = ".w-full.grid > div:nth-child(3) a"
    name: str = ".text-white.font-bold.truncate"
    win_rate: str = ".font-bold.whitespace-nowrap.text-right"


@dataclass(frozen=True)
class TierListPageSchema:
    root: str = "#content .tier-list .rt-tbody"
    rows: str = ".rt-tr-group .rt-tr"
    name: str = ".rt-td:nth-child(3) strong"
    win_rate: str = ".rt-td:nth-child(5) b"


BUILD_PAGE = BuildPageSchema()
COUNTERS_PAGE = CountersPageSchema()
TIER_LIST_PAGE = TierListPageSchema()


def _slug(value: str) -> str:
    # "Dr. Mundo" -> "drmundo", "Kai'Sa" -> "kaisa"
    return re.sub(r"[^a-z0-9-]", "", value.lower())


def build_url(champion: str, lane: Optional[str] = None, opponent: Optional[str] = None, base: str = None) -> str:
    url = f"{base or Config.UGG_BASE_URL}/lol/champions/{_slug(champion)}/build"
    if lane:
        url += f"/{_slug(lane)}"
    if opponent:
        url += f"?opp={_slug(opponent)}"
    return url


def counters_url(champion: str, lane: Optional[str] = None, base: str = None) -> str:
    url = f"{base or Config.UGG_BASE_URL}/lol/champions/{_slug(champion)}/counter"
    if lane:
        url += f"?role={_slug(lane)}"
    return url


def tierlist_url(lane: Optional[str] = None, base: str = None) -> str:
    prefix = ""
    if lane:
        # u.gg spells the top-lane list out in full
        prefix = "top-lane-" if lane.lower() == "top" else f"{_slug(lane)}-"
    return f"{base or Config.UGG_BASE_URL}/lol/{prefix}tier-list"
