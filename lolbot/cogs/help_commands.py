"""
Help Commands Cog

Provides /help with a short guide to every League command.
"""

import discord
from discord.ext import commands
from discord import app_commands

from lolbot.config import Config
from lolbot.constants import RiotConstants, ScrapeConstants, UIConstants
from lolbot.utils.logger import setup_logger

logger = setup_logger(__name__)

HELP_SECTIONS = [
    (
        "📜 /matches",
        "Recent games for a Riot ID with K/D/A against your lane opponent.\n"
        "```\n/matches player_name:Faker tag:KR1 region:asia game_count:10\n```"
        f"Region defaults to `{Config.DEFAULT_REGION}`, game count to {Config.DEFAULT_GAME_COUNT} "
        f"(max {RiotConstants.MAX_GAME_COUNT})."
    ),
    (
        "🛠️ /build",
        "Runes first, then items and skill order once they finish loading.\n"
        "```\n/build you:Aatrox enemy:Camille lane:top\n```"
    ),
    (
        "⚔️ /counter",
        f"Top {ScrapeConstants.NUM_CHAMP_COUNTERS} best, worst and lane picks against a champion.\n"
        "```\n/counter champion:Yasuo lane:mid\n```"
    ),
    (
        "🏆 /tierlist",
        f"Highest win rate champions, up to {ScrapeConstants.MAX_TIERLIST_COUNT}.\n"
        "```\n/tierlist lane:jungle game_count:15\n```"
    ),
]


class HelpCommandsCog(commands.Cog):
    """Command reference for the League bot"""

    def __init__(self, bot):
        self.bot = bot

    @app_commands.command(name="help", description="Show what the League bot can do")
    async def help(self, interaction: discord.Interaction):
        embed = discord.Embed(
            title="League Bot Commands",
            description="Build and matchup data comes from u.gg; match history from the Riot API.",
            color=discord.Color(UIConstants.BLUE)
        )
        for name, value in HELP_SECTIONS:
            embed.add_field(name=name, value=value, inline=False)
        embed.set_footer(text=f"Lanes: {', '.join(ScrapeConstants.LANES)}")

        await interaction.response.send_message(embed=embed, ephemeral=True)


async def setup(bot):
    """Add the HelpCommandsCog to the bot"""
    await bot.add_cog(HelpCommandsCog(bot))
