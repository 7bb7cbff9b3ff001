import os
from dotenv import load_dotenv

from lolbot.constants import RiotConstants

load_dotenv()

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_ID = int(os.getenv('DISCORD_GUILD_ID', 0))
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated for multi-guild support
    OWNER_DISCORD_ID = int(os.getenv('OWNER_DISCORD_ID', 0))

    # Riot API settings
    RIOT_API_KEY = os.getenv('RIOT_API_KEY')
    DEFAULT_REGION = os.getenv('DEFAULT_REGION', 'americas')
    DEFAULT_GAME_COUNT = int(os.getenv('DEFAULT_GAME_COUNT', 20))
    MATCH_FETCH_CONCURRENCY = int(os.getenv('MATCH_FETCH_CONCURRENCY', 8))
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', 10))

    # Scraping settings
    UGG_BASE_URL = os.getenv('UGG_BASE_URL', 'https://u.gg').rstrip('/')
    BROWSER_HEADLESS = os.getenv('BROWSER_HEADLESS', 'True').lower() == 'true'
    PAGE_TIMEOUT_MS = int(os.getenv('PAGE_TIMEOUT_MS', 15000))

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if cls.DISCORD_GUILD_IDS:
            # Multi-guild support: comma-separated IDs
            try:
                return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
            except ValueError:
                raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
        elif cls.DISCORD_GUILD_ID:
            return [cls.DISCORD_GUILD_ID]
        else:
            # Global sync
            return []

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY is required")
        if cls.MATCH_FETCH_CONCURRENCY <= 0:
            raise ValueError("MATCH_FETCH_CONCURRENCY must be a positive integer")
        if cls.DEFAULT_REGION.lower() not in RiotConstants.REGIONS:
            raise ValueError(f"DEFAULT_REGION must be one of: {', '.join(RiotConstants.REGIONS)}")
