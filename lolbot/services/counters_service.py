"""
/counter command: best, worst and same-lane picks against a champion.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from lolbot.constants import ScrapeConstants, UIConstants
from lolbot.data_models.discord_output import DiscordOutput, EmbedField, Palette, code_block
from lolbot.services.browser import PageSession, open_page_session
from lolbot.services.build_extractor import element_text, select_required
from lolbot.services.list_extractors import extract_ranked_rows
from lolbot.services.page_schema import COUNTERS_PAGE, CountersPageSchema, counters_url
from lolbot.utils.error_embeds import ErrorEmbeds
from lolbot.utils.exceptions import LeagueBotError

logger = logging.getLogger(__name__)


class CountersService:
    """Scrapes the u.gg counters page for a champion."""

    def __init__(self, session_factory=open_page_session, schema: CountersPageSchema = COUNTERS_PAGE):
        self.session_factory = session_factory
        self.schema = schema

    async def acquire(self, session: PageSession, champion: str, lane: Optional[str]) -> BeautifulSoup:
        await session.navigate(counters_url(champion, lane))
        await session.wait_until_loaded()
        await session.wait_for_selector(f"{self.schema.root}, {self.schema.no_data}")
        await session.ensure_data_present(self.schema.no_data, champion)
        return await session.snapshot_html(self.schema.root)

    def build_output(self, document: BeautifulSoup, champion: str, lane: Optional[str]) -> DiscordOutput:
        if lane:
            lane_label = lane.upper()
        else:
            lane_label = element_text(select_required(document, self.schema.active_role)).upper()

        categories = (
            (f"{UIConstants.BEST_PICKS_EMOJI} - Best Picks", self.schema.best_picks),
            (f"{UIConstants.WORST_PICKS_EMOJI} - Worst Picks", self.schema.worst_picks),
            (f"{UIConstants.LANE_PICKS_EMOJI} - Lane Picks", self.schema.lane_picks),
        )
        fields = []
        for heading, row_selector in categories:
            lines = extract_ranked_rows(
                document,
                row_selector,
                self.schema.name,
                self.schema.win_rate,
                limit=ScrapeConstants.NUM_CHAMP_COUNTERS,
                name_width=ScrapeConstants.COUNTER_NAME_WIDTH,
            )
            fields.append(EmbedField(heading, code_block("\n".join(lines) or "-"), inline=False))

        return DiscordOutput(
            title=f"Counter picks for {champion} ({lane_label})",
            color=Palette.DARK_GREEN,
            fields=tuple(fields),
        )

    async def handle_counters_command(self, champion: str, lane: Optional[str] = None) -> DiscordOutput:
        logger.info(f"Counters requested: {champion} ({lane})")
        try:
            async with self.session_factory() as session:
                document = await self.acquire(session, champion, lane)
                return self.build_output(document, champion, lane)
        except LeagueBotError as e:
            logger.warning(f"Counters command failed for {champion}: {e}")
            return ErrorEmbeds.counters_failed(champion, e)
