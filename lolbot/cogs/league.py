"""
League Cog - slash commands backed by the Riot API and u.gg

Commands:
- /matches: recent match summaries and win rate for a Riot ID
- /build: runes, items and skill order for a champion (optionally vs. an enemy)
- /counter: best, worst and lane counter picks for a champion
- /tierlist: top champions by win rate for a lane
"""

from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from lolbot.config import Config
from lolbot.constants import RateLimitConstants, RiotConstants, ScrapeConstants
from lolbot.services.build_service import BuildService
from lolbot.services.counters_service import CountersService
from lolbot.services.matches_service import MatchesService
from lolbot.services.rate_limiter import rate_limit
from lolbot.services.tierlist_service import TierListService
from lolbot.utils.embeds import send_output
from lolbot.utils.error_embeds import ErrorEmbeds
from lolbot.utils.logger import setup_logger

logger = setup_logger(__name__)

LANE_CHOICES = [app_commands.Choice(name=lane, value=lane) for lane in ScrapeConstants.LANES]
REGION_CHOICES = [app_commands.Choice(name=region, value=region) for region in RiotConstants.REGIONS]


class LeagueCog(commands.Cog):
    """Match history, builds, counters and tier lists"""

    def __init__(self, bot):
        self.bot = bot
        self.matches_service = MatchesService(bot.riot_client)
        self.build_service = BuildService()
        self.counters_service = CountersService()
        self.tierlist_service = TierListService()

    @app_commands.command(name="matches", description="Get match info for player")
    @app_commands.describe(
        player_name="Player Name",
        tag="Player tag (the part after #)",
        region="Routing region",
        game_count="Number of games to check"
    )
    @app_commands.choices(region=REGION_CHOICES)
    @rate_limit("matches", limit=5, window=RateLimitConstants.WINDOW_SECONDS)
    async def matches(
        self,
        interaction: discord.Interaction,
        player_name: str,
        tag: str,
        region: Optional[app_commands.Choice[str]] = None,
        game_count: Optional[app_commands.Range[int, RiotConstants.MIN_GAME_COUNT, RiotConstants.MAX_GAME_COUNT]] = None
    ):
        """Show recent matches for a Riot ID."""
        await interaction.response.defer()

        try:
            output = await self.matches_service.handle_matches_command(
                player_name,
                tag,
                region.value if region else Config.DEFAULT_REGION,
                Config.DEFAULT_GAME_COUNT if game_count is None else game_count
            )
        except Exception as e:
            logger.error(f"Error in matches command: {e}", exc_info=True)
            output = ErrorEmbeds.matches_failed(player_name, e)

        await send_output(interaction, output)

    @app_commands.command(name="build", description="Get build data")
    @app_commands.describe(you="Your champ", enemy="Enemy champ", lane="Lane")
    @app_commands.choices(lane=LANE_CHOICES)
    @rate_limit("build", limit=2, window=RateLimitConstants.WINDOW_SECONDS)
    async def build(
        self,
        interaction: discord.Interaction,
        you: str,
        enemy: Optional[str] = None,
        lane: Optional[app_commands.Choice[str]] = None
    ):
        """Show runes immediately, then fill in items and skill order."""
        await interaction.response.defer()

        async def publish(phase_one):
            await send_output(interaction, phase_one)

        try:
            output = await self.build_service.handle_build_command(
                you,
                enemy,
                lane.value if lane else None,
                publish=publish
            )
        except Exception as e:
            logger.error(f"Error in build command: {e}", exc_info=True)
            output = ErrorEmbeds.build_failed(you, e)

        await send_output(interaction, output)

    @app_commands.command(name="counter", description="Get counter picks for a champion")
    @app_commands.describe(champion="Champion to counter", lane="Lane")
    @app_commands.choices(lane=LANE_CHOICES)
    @rate_limit("counter", limit=2, window=RateLimitConstants.WINDOW_SECONDS)
    async def counter(
        self,
        interaction: discord.Interaction,
        champion: str,
        lane: Optional[app_commands.Choice[str]] = None
    ):
        """Show best, worst and lane picks against a champion."""
        await interaction.response.defer()

        try:
            output = await self.counters_service.handle_counters_command(
                champion,
                lane.value if lane else None
            )
        except Exception as e:
            logger.error(f"Error in counter command: {e}", exc_info=True)
            output = ErrorEmbeds.counters_failed(champion, e)

        await send_output(interaction, output)

    @app_commands.command(name="tierlist", description="Get the current tier list")
    @app_commands.describe(lane="Lane", game_count="Number of champions to show")
    @app_commands.choices(lane=LANE_CHOICES)
    @rate_limit("tierlist", limit=2, window=RateLimitConstants.WINDOW_SECONDS)
    async def tierlist(
        self,
        interaction: discord.Interaction,
        lane: Optional[app_commands.Choice[str]] = None,
        game_count: Optional[app_commands.Range[int, ScrapeConstants.MIN_TIERLIST_COUNT, ScrapeConstants.MAX_TIERLIST_COUNT]] = None
    ):
        """Show the top champions by win rate."""
        await interaction.response.defer()

        lane_value = lane.value if lane else None
        try:
            output = await self.tierlist_service.handle_tierlist_command(
                lane_value,
                ScrapeConstants.DEFAULT_TIERLIST_COUNT if game_count is None else game_count
            )
        except Exception as e:
            logger.error(f"Error in tierlist command: {e}", exc_info=True)
            output = ErrorEmbeds.tierlist_failed(lane_value or "All", e)

        await send_output(interaction, output)


async def setup(bot):
    """Add the LeagueCog to the bot"""
    await bot.add_cog(LeagueCog(bot))
