"""
/tierlist command: top champions by win rate, overall or for one lane.
"""

import logging
from typing import Optional

from lolbot.constants import ScrapeConstants
from lolbot.data_models.discord_output import DiscordOutput, EmbedField, Palette, code_block
from lolbot.services.browser import open_page_session
from lolbot.services.list_extractors import extract_ranked_rows
from lolbot.services.page_schema import TIER_LIST_PAGE, TierListPageSchema, tierlist_url
from lolbot.utils.error_embeds import ErrorEmbeds
from lolbot.utils.exceptions import LeagueBotError

logger = logging.getLogger(__name__)


class TierListService:
    """Scrapes the u.gg tier list table."""

    def __init__(self, session_factory=open_page_session, schema: TierListPageSchema = TIER_LIST_PAGE):
        self.session_factory = session_factory
        self.schema = schema

    async def handle_tierlist_command(
        self,
        lane: Optional[str] = None,
        count: int = ScrapeConstants.DEFAULT_TIERLIST_COUNT,
    ) -> DiscordOutput:
        count = max(ScrapeConstants.MIN_TIERLIST_COUNT, min(count, ScrapeConstants.MAX_TIERLIST_COUNT))
        lane_label = lane or "All"
        logger.info(f"Tier list requested: top {count} for {lane_label}")

        try:
            async with self.session_factory() as session:
                await session.navigate(tierlist_url(lane))
                await session.wait_until_loaded()
                await session.wait_for_selector(self.schema.root)
                document = await session.snapshot_html(self.schema.root)

            lines = extract_ranked_rows(
                document,
                self.schema.rows,
                self.schema.name,
                self.schema.win_rate,
                limit=count,
                name_width=ScrapeConstants.TIERLIST_NAME_WIDTH,
            )
        except LeagueBotError as e:
            logger.warning(f"Tier list command failed for {lane_label}: {e}")
            return ErrorEmbeds.tierlist_failed(lane_label, e)

        return DiscordOutput(
            title=f"Top {count} tier list for {lane_label}",
            color=Palette.DARK_GREEN,
            fields=(EmbedField("Champion - Win Rate", code_block("\n".join(lines) or "-"), inline=False),),
        )
