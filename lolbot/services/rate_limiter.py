"""
Rate limiting for slash commands.

Scraping commands launch a browser per invocation, so each user gets a small
sliding window per command.
"""

import time
import asyncio
from functools import wraps
from collections import defaultdict, deque
import logging

from lolbot.config import Config
from lolbot.utils.embeds import build_embed
from lolbot.utils.error_embeds import ErrorEmbeds

logger = logging.getLogger(__name__)

class SimpleRateLimiter:
    """In-memory sliding-window rate limiter keyed by user and command."""

    def __init__(self, clock=time.monotonic):
        self._requests = defaultdict(deque)
        self._lock = asyncio.Lock()
        self._clock = clock

    async def is_allowed(self, user_id: int, command: str, limit: int, window: int) -> bool:
        """Record and allow the call if the user is under `limit` calls in the last `window` seconds."""
        if limit <= 0 or window <= 0:
            return False

        key = f"{user_id}:{command}"
        now = self._clock()

        async with self._lock:
            history = self._requests[key]
            while history and history[0] <= now - window:
                history.popleft()

            if len(history) < limit:
                history.append(now)
                return True

            return False

    async def cleanup(self, window: int) -> int:
        """Drop keys with no calls inside `window`; returns how many were removed."""
        now = self._clock()
        async with self._lock:
            stale = [key for key, history in self._requests.items() if not history or history[-1] <= now - window]
            for key in stale:
                del self._requests[key]
        return len(stale)

def rate_limit(command: str, limit: int = 1, window: int = 60):
    """Decorator for rate limiting cog slash commands."""
    def decorator(func):
        @wraps(func)
        async def wrapper(self, interaction, *args, **kwargs):
            if Config.OWNER_DISCORD_ID and interaction.user.id == Config.OWNER_DISCORD_ID:
                return await func(self, interaction, *args, **kwargs)

            if not await self.bot.rate_limiter.is_allowed(interaction.user.id, command, limit, window):
                logger.info(f"Rate limited /{command} for user {interaction.user.id}")
                await interaction.response.send_message(
                    embed=build_embed(ErrorEmbeds.rate_limited(command)),
                    ephemeral=True
                )
                return

            return await func(self, interaction, *args, **kwargs)
        return wrapper
    return decorator
