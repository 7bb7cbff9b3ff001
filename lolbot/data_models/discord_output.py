"""
Result envelope shared by every command.

A DiscordOutput is built once per command (twice for the two-phase build) and
handed to the embed renderer; it is never mutated afterwards.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from lolbot.constants import UIConstants


class Palette(Enum):
    """Accent colors used by command responses."""
    BLUE = UIConstants.BLUE
    DARK_GOLD = UIConstants.DARK_GOLD
    DARK_RED = UIConstants.DARK_RED
    DARK_GREEN = UIConstants.DARK_GREEN
    RED = UIConstants.ERROR_COLOR


@dataclass(frozen=True)
class EmbedField:
    """One (heading, body, inline) embed field."""
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class DiscordOutput:
    """Title, description, color and ordered fields of a single response."""
    title: str
    description: str = ""
    color: Palette = Palette.DARK_GREEN
    fields: Tuple[EmbedField, ...] = field(default_factory=tuple)
    footer: Optional[str] = None
    content: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.color is Palette.RED

    def extend(self, *fields: EmbedField, footer: Optional[str] = None) -> 'DiscordOutput':
        """Return a new envelope with prior fields copied forward and `fields` appended."""
        return replace(self, fields=self.fields + tuple(fields), footer=footer)


def code_block(text: str) -> str:
    """Wrap text in a fenced block so Discord renders it monospace."""
    return f"```\n{text}\n```"
