"""
Bot-wide constants for the League Discord Bot.

Retry timings, scraping limits, grid glyphs and embed colors used throughout
the codebase live here so they can be tuned in one place.
"""

class RetryConstants:
    """Constants for outbound HTTP retries."""

    # Additional attempts after the first request
    MAX_RETRIES = 3

    # Linear backoff: 0.5s, 1.0s, 1.5s
    INITIAL_DELAY = 0.5
    DELAY_STEP = 0.5

    # Statuses worth retrying; everything else non-2xx is returned as-is
    RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


class RiotConstants:
    """Constants for the Riot match-history commands."""

    API_KEY_HEADER = "X-Riot-Token"

    # Regional routing values; the region becomes part of the API hostname
    REGIONS = ("americas", "europe", "asia", "sea")

    MIN_GAME_COUNT = 0
    MAX_GAME_COUNT = 40

    # Discord caps embeds at 25 fields
    MAX_MATCH_FIELDS = 24


class ScrapeConstants:
    """Constants for the u.gg scraping commands."""

    NUM_CHAMP_COUNTERS = 10
    COUNTER_NAME_WIDTH = 10

    DEFAULT_TIERLIST_COUNT = 10
    MIN_TIERLIST_COUNT = 1
    MAX_TIERLIST_COUNT = 30
    TIERLIST_NAME_WIDTH = 20

    LANES = ("top", "mid", "jungle", "adc", "support")

    # Game levels at which the ultimate ability can be ranked up
    ULTIMATE_LEVELS = (6, 11, 16)
    MAX_LEVEL = 18

    # Display width of the left (primary tree) column in the rune grid
    RUNE_COLUMN_WIDTH = 10


class GlyphConstants:
    """Square emoji used to draw rune and skill grids."""

    TRANSPARENT = "⬛"

    RUNE_TREES = {
        "Precision": "🟨",
        "Domination": "🟥",
        "Sorcery": "🟪",
        "Resolve": "🟩",
        "Inspiration": "🟦",
    }

    SKILL_LEVELED = "🟧"
    SKILL_ULTIMATE = "🟥"


class RateLimitConstants:
    """Constants for per-user command rate limiting."""

    # Sliding window shared by every rate-limited command
    WINDOW_SECONDS = 60

    CLEANUP_INTERVAL_MINUTES = 10


class UIConstants:
    """Constants for Discord UI elements."""

    # Embed colors
    BLUE = 0x3498db
    DARK_GOLD = 0xc27c0e
    DARK_RED = 0x992d22
    DARK_GREEN = 0x1f8b4c
    ERROR_COLOR = 0xe74c3c

    # Win rate thresholds for the build descriptor
    FAVORED_WIN_RATE = 50.0
    EVEN_WIN_RATE = 48.0

    BEST_PICKS_EMOJI = "🟢"
    WORST_PICKS_EMOJI = "🔴"
    LANE_PICKS_EMOJI = "🟡"
