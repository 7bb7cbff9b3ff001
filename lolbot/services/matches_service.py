"""
/matches command: recent match summaries and win rate for a Riot ID.
"""

import logging
from typing import List

from lolbot.config import Config
from lolbot.constants import RiotConstants
from lolbot.data_models.discord_output import DiscordOutput, EmbedField, Palette
from lolbot.data_models.riot import MatchRecord, MatchSummary
from lolbot.services.match_summary import summarize_match
from lolbot.services.riot_client import RiotClient
from lolbot.utils.error_embeds import ErrorEmbeds
from lolbot.utils.exceptions import LeagueBotError, ParticipantNotFoundError

logger = logging.getLogger(__name__)


def format_win_rate(wins: int, total: int) -> str:
    """Percentage rounded to two decimals without a trailing '.0' (100, 50, 66.67)."""
    if total == 0:
        return "0"
    return f"{round(wins / total * 100, 2):g}"


def summarize_matches(records: List[MatchRecord], puuid: str) -> List[MatchSummary]:
    """Summarize each record, numbering survivors from 1 and dropping malformed matches."""
    summaries = []
    for record in records:
        try:
            summaries.append(summarize_match(record, puuid, len(summaries) + 1))
        except ParticipantNotFoundError as e:
            logger.warning(f"Skipping match: {e}")
    return summaries


class MatchesService:
    """Builds the /matches response from the Riot match-history API."""

    def __init__(self, riot_client: RiotClient):
        self.riot_client = riot_client

    async def handle_matches_command(
        self,
        player_name: str,
        tag: str,
        region: str = Config.DEFAULT_REGION,
        game_count: int = Config.DEFAULT_GAME_COUNT,
    ) -> DiscordOutput:
        game_count = max(RiotConstants.MIN_GAME_COUNT, min(game_count, RiotConstants.MAX_GAME_COUNT))
        logger.info(f"Fetching {game_count} matches for {player_name}#{tag} ({region})")

        try:
            puuid = await self.riot_client.resolve_player(player_name, tag, region)
            match_ids = await self.riot_client.list_recent_match_ids(
                puuid, region, game_count, player_name=player_name, tag=tag
            )
            records = await self.riot_client.fetch_match_details(match_ids, region)
        except LeagueBotError as e:
            logger.warning(f"Matches command failed for {player_name}#{tag}: {e}")
            return ErrorEmbeds.matches_failed(player_name, e)

        summaries = summarize_matches(records, puuid)
        return self.build_output(player_name, summaries)

    @staticmethod
    def build_output(player_name: str, summaries: List[MatchSummary]) -> DiscordOutput:
        wins = sum(1 for summary in summaries if summary.win)
        total = len(summaries)

        shown = summaries[:RiotConstants.MAX_MATCH_FIELDS]
        footer = None
        if total > len(shown):
            footer = f"Showing {len(shown)} of {total} matches"

        return DiscordOutput(
            title=f"{player_name}'s Matches",
            description=f"Winrate: {format_win_rate(wins, total)}% ({wins}/{total})",
            color=Palette.DARK_GREEN,
            fields=tuple(EmbedField(s.heading, s.body, inline=True) for s in shown),
            footer=footer,
        )
