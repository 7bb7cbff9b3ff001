"""
/build command: runes first, then items and skill order.

Hovering every item icon is an order of magnitude slower than reading the
rune page, so the command answers in two phases. Phase 1 (win rate, lane,
runes, shards) is handed to `publish` as soon as it is ready; phase 2 extends
that output with item groups and the skill order. An error in either phase
discards everything and yields a single error output.
"""

import logging
from typing import Awaitable, Callable, Optional

from bs4 import BeautifulSoup

from lolbot.constants import UIConstants
from lolbot.data_models.build import ItemBuildSlots, RuneBuild, SkillOrderGrid
from lolbot.data_models.discord_output import DiscordOutput, EmbedField, Palette, code_block
from lolbot.services.browser import PageSession, open_page_session
from lolbot.services.build_extractor import (
    extract_item_slots, extract_lane, extract_rune_build,
    extract_skill_order, extract_win_rate
)
from lolbot.services.page_schema import BUILD_PAGE, BuildPageSchema, build_url
from lolbot.utils.error_embeds import ErrorEmbeds
from lolbot.utils.exceptions import LeagueBotError
from lolbot.utils.pixel_grid import columnize_trees, grid_to_lines, perks_to_colored_grid, render_skill_order

logger = logging.getLogger(__name__)

Publisher = Callable[[DiscordOutput], Awaitable[None]]

LOADING_FOOTER = "⏳ Loading items and skill order..."


def capitalize_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def build_title(champion: str, opponent: Optional[str], lane: str) -> str:
    if opponent:
        return f"({lane}) {capitalize_name(champion)} vs. {capitalize_name(opponent)}"
    return f"({lane}) {capitalize_name(champion)}"


def describe_win_rate(win_rate: float):
    """Accent color and one-line verdict for a matchup win rate."""
    if win_rate > UIConstants.FAVORED_WIN_RATE:
        return Palette.BLUE, f"You better win ({win_rate}%)"
    if win_rate > UIConstants.EVEN_WIN_RATE:
        return Palette.DARK_GOLD, f"Hmm ({win_rate}%)"
    return Palette.DARK_RED, f"You gon lose ({win_rate}%)"


def render_rune_field(runes: RuneBuild) -> EmbedField:
    """Primary tree on the left; secondary tree and stat shards stacked on the right."""
    left = grid_to_lines(perks_to_colored_grid(runes.primary.grid, runes.primary.title))
    right = grid_to_lines(perks_to_colored_grid(runes.secondary.grid, runes.secondary.title))
    right += grid_to_lines(perks_to_colored_grid(runes.shards.grid, runes.secondary.title))
    return EmbedField(
        name=f"Runes: {runes.primary.title} / {runes.secondary.title}",
        value=code_block("\n".join(columnize_trees(left, right))),
        inline=False,
    )


def render_item_fields(items: ItemBuildSlots):
    return [EmbedField(name=group.label, value=group.render(), inline=False) for group in items.groups]


def render_skill_field(skills: SkillOrderGrid) -> EmbedField:
    return EmbedField(
        name="Skill Order",
        value=code_block("\n".join(render_skill_order(skills))),
        inline=False,
    )


class BuildService:
    """Scrapes a champion build page and renders it in two phases."""

    def __init__(self, session_factory=open_page_session, schema: BuildPageSchema = BUILD_PAGE):
        self.session_factory = session_factory
        self.schema = schema

    async def acquire(
        self,
        session: PageSession,
        champion: str,
        opponent: Optional[str],
        lane: Optional[str],
    ) -> BeautifulSoup:
        """Load the build page and snapshot it; the "no data" check runs before anything assumes data."""
        await session.navigate(build_url(champion, lane, opponent))
        await session.wait_until_loaded()
        await session.wait_for_selector(f"{self.schema.root}, {self.schema.no_data}")
        await session.ensure_data_present(self.schema.no_data, champion, opponent)
        await session.wait_for_selector(self.schema.root)
        if not lane:
            await session.wait_for_selector(self.schema.active_role)
        return await session.snapshot_html(self.schema.root)

    def build_phase_one(
        self,
        document: BeautifulSoup,
        champion: str,
        opponent: Optional[str],
        lane: Optional[str],
    ) -> DiscordOutput:
        win_rate = extract_win_rate(document, self.schema)
        lane_label = extract_lane(document, lane, self.schema)
        runes = extract_rune_build(document, self.schema)
        color, description = describe_win_rate(win_rate)
        return DiscordOutput(
            title=build_title(champion, opponent, lane_label),
            description=description,
            color=color,
            fields=(render_rune_field(runes),),
            footer=LOADING_FOOTER,
        )

    @staticmethod
    def build_phase_two(phase_one: DiscordOutput, items: ItemBuildSlots, skills: SkillOrderGrid) -> DiscordOutput:
        return phase_one.extend(*render_item_fields(items), render_skill_field(skills), footer=None)

    async def handle_build_command(
        self,
        champion: str,
        opponent: Optional[str] = None,
        lane: Optional[str] = None,
        publish: Optional[Publisher] = None,
    ) -> DiscordOutput:
        logger.info(f"Build requested: {champion} vs {opponent} ({lane})")
        try:
            async with self.session_factory() as session:
                document = await self.acquire(session, champion, opponent, lane)
                phase_one = self.build_phase_one(document, champion, opponent, lane)
                if publish is not None:
                    await publish(phase_one)

                items = await extract_item_slots(session, self.schema)
                skill_document = await session.snapshot_html(self.schema.skill_root)
                skills = extract_skill_order(skill_document, self.schema)
                return self.build_phase_two(phase_one, items, skills)
        except LeagueBotError as e:
            logger.warning(f"Build command failed for {champion}: {e}")
            return ErrorEmbeds.build_failed(capitalize_name(champion), e)
