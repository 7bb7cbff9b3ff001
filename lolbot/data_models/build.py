"""
Build data models for the /build command.

Grids are tuples of tuples of booleans: one inner tuple per UI row, one
boolean per option in that row, True where the page marks the option active.
"""

from dataclasses import dataclass
from typing import Tuple

BoolGrid = Tuple[Tuple[bool, ...], ...]


@dataclass(frozen=True)
class RuneSelection:
    """A rune tree title and the options marked active in each of its rows."""
    title: str
    grid: BoolGrid


@dataclass(frozen=True)
class StatShardSelection:
    """Stat shard rows; shards have no tree title of their own."""
    grid: BoolGrid


@dataclass(frozen=True)
class RuneBuild:
    primary: RuneSelection
    secondary: RuneSelection
    shards: StatShardSelection


@dataclass(frozen=True)
class ItemGroup:
    """One item-slot group (starting items, core items, 4th item options...)."""
    label: str
    items: Tuple[str, ...]
    separator: str = " / "

    def render(self) -> str:
        return self.separator.join(self.items) if self.items else "-"


@dataclass(frozen=True)
class ItemBuildSlots:
    groups: Tuple[ItemGroup, ...]


@dataclass(frozen=True)
class SkillOrderGrid:
    """One row per ability, one boolean per game level (index 0 = level 1)."""
    abilities: Tuple[str, ...]
    rows: BoolGrid

    @property
    def level_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def by_level(self) -> BoolGrid:
        """Transpose to one row per level; short ability rows read as not leveled."""
        return tuple(
            tuple(row[level] if level < len(row) else False for row in self.rows)
            for level in range(self.level_count)
        )
