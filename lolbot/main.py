import asyncio
import logging
import traceback
from typing import Optional

import aiohttp
import discord
from discord.ext import commands, tasks
from discord import app_commands

from lolbot.config import Config
from lolbot.constants import RateLimitConstants
from lolbot.services.rate_limiter import SimpleRateLimiter
from lolbot.services.riot_client import RiotClient
from lolbot.utils.logger import setup_logger

class LeagueBot(commands.Bot):
    def __init__(self):
        # Slash commands only; no privileged intents needed
        intents = discord.Intents.default()

        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents,
            help_command=None
        )

        self.tree.on_error = self.on_app_command_error

        self.http_session: Optional[aiohttp.ClientSession] = None
        self.riot_client: Optional[RiotClient] = None
        self.rate_limiter = SimpleRateLimiter()
        self.logger = setup_logger(__name__)

    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up League Bot...")

        # One connection pool shared by every Riot request
        self.http_session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=Config.REQUEST_TIMEOUT)
        )
        self.riot_client = RiotClient(
            self.http_session,
            Config.RIOT_API_KEY,
            concurrency=Config.MATCH_FETCH_CONCURRENCY
        )

        await self.load_cogs()
        await self._sync_commands()
        self.prune_rate_limits.start()

        self.logger.info("League Bot setup complete!")

    async def load_cogs(self):
        """Load all cogs"""
        cogs_to_load = [
            'lolbot.cogs.league',
            'lolbot.cogs.help_commands'
        ]

        for cog in cogs_to_load:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}", exc_info=True)

    async def _sync_commands(self):
        """Sync slash commands with Discord"""
        if not self.tree.get_commands():
            self.logger.warning("No application commands found to sync. Check for cog loading errors.")
            return

        try:
            guild_ids = Config.get_guild_ids()

            if guild_ids:
                # Guild-specific sync (instant updates)
                self.logger.info(f"Attempting to sync commands to {len(guild_ids)} guild(s): {guild_ids}...")

                total_synced = 0
                for guild_id in guild_ids:
                    try:
                        guild = discord.Object(id=guild_id)
                        self.tree.copy_global_to(guild=guild)
                        synced = await self.tree.sync(guild=guild)
                        self.logger.info(f"Successfully synced {len(synced)} command(s) to guild {guild_id}")
                        total_synced += len(synced)
                    except discord.errors.Forbidden:
                        self.logger.error(f"Permission error syncing to guild {guild_id}. Ensure the bot has the 'application.commands' scope and is in the guild.", exc_info=True)
                    except discord.errors.HTTPException as e:
                        self.logger.error(f"HTTP error syncing to guild {guild_id}. Status: {e.status}, Response: {e.text}", exc_info=True)

                self.logger.info(f"Multi-guild sync complete: {total_synced} total command instances deployed")
            else:
                # Global sync (can take up to 1 hour)
                self.logger.info("Attempting to sync commands globally... (Note: This can take up to an hour to propagate)")
                synced = await self.tree.sync()
                self.logger.info(f"Successfully synced {len(synced)} command(s) globally")
                for cmd in synced:
                    self.logger.info(f"  - {cmd.name}: {cmd.description}")
        except Exception as e:
            self.logger.error(f"Failed to sync commands: {e}", exc_info=True)

    @tasks.loop(minutes=RateLimitConstants.CLEANUP_INTERVAL_MINUTES)
    async def prune_rate_limits(self):
        """Background task dropping rate-limit history for idle users"""
        try:
            removed = await self.rate_limiter.cleanup(RateLimitConstants.WINDOW_SECONDS)
            if removed > 0:
                self.logger.debug(f"Pruned rate-limit history for {removed} key(s)")
        except Exception as e:
            self.logger.error(f"Error in rate-limit cleanup task: {e}", exc_info=True)

    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} has connected to Discord!')
        self.logger.info(f'Bot is in {len(self.guilds)} guilds')

        await self.change_presence(
            activity=discord.Game(name="League of Legends | /help")
        )

    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Global error handler for slash commands"""
        command_name = interaction.command.name if interaction.command else 'Unknown'
        if isinstance(error, app_commands.CheckFailure):
            self.logger.info(f"Check failed for command '{command_name}' by user {interaction.user}")
        else:
            self.logger.error(f"Error in app command '{command_name}': {error}", exc_info=True)

        if isinstance(error, app_commands.CommandOnCooldown):
            title = f"❌ Command is on cooldown. Try again in {error.retry_after:.2f} seconds."
        elif isinstance(error, app_commands.BotMissingPermissions):
            title = "❌ I don't have the required permissions to execute this command."
        elif isinstance(error, app_commands.CheckFailure):
            title = "❌ You don't have permission to use this command."
        else:
            title = "❌ An unexpected error occurred while processing your command."

        error_embed = discord.Embed(title=title, color=discord.Color.red())
        try:
            if interaction.response.is_done():
                await interaction.followup.send(embed=error_embed, ephemeral=True)
            else:
                await interaction.response.send_message(embed=error_embed, ephemeral=True)
        except discord.HTTPException as e:
            self.logger.error(f"Failed to send error response: {e}")

    async def close(self):
        """Cleanup when bot is shutting down"""
        self.logger.info("Shutting down League Bot...")

        self.prune_rate_limits.cancel()

        if self.http_session and not self.http_session.closed:
            await self.http_session.close()

        await super().close()

async def main():
    """Main entry point"""
    Config.validate()

    bot = LeagueBot()

    try:
        await bot.start(Config.DISCORD_TOKEN)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        await bot.close()

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
