"""
Services package for the League Discord bot.

Riot API access, u.gg page acquisition and the per-command services that turn
both into DiscordOutput envelopes.
"""

from .rate_limiter import SimpleRateLimiter
from .riot_client import RiotClient

__all__ = ['RiotClient', 'SimpleRateLimiter']
