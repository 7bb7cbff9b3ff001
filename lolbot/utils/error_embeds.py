"""
Centralized error outputs for consistent error handling across commands.

Every failure a command surfaces is a red DiscordOutput whose title names the
request's subject and whose description carries the failure's display text.
"""

from lolbot.data_models.discord_output import DiscordOutput, Palette
from lolbot.utils.exceptions import LeagueBotError


class ErrorEmbeds:
    """Centralized error output factory."""

    @staticmethod
    def command_failed(title: str, error: Exception) -> DiscordOutput:
        """Create output for a command aborted by `error`."""
        if isinstance(error, LeagueBotError):
            description = error.user_message
        else:
            description = "An unexpected error occurred. Please try again later."
        return DiscordOutput(
            title=title,
            description=description,
            color=Palette.RED,
        )

    @staticmethod
    def matches_failed(player_name: str, error: Exception) -> DiscordOutput:
        return ErrorEmbeds.command_failed(f"Request for {player_name}'s matches FAILED", error)

    @staticmethod
    def build_failed(champion: str, error: Exception) -> DiscordOutput:
        return ErrorEmbeds.command_failed(f"Error fetching build for {champion}", error)

    @staticmethod
    def counters_failed(champion: str, error: Exception) -> DiscordOutput:
        return ErrorEmbeds.command_failed(f"Error fetching counters for {champion}", error)

    @staticmethod
    def tierlist_failed(lane: str, error: Exception) -> DiscordOutput:
        return ErrorEmbeds.command_failed(f"Error fetching tier list for {lane}", error)

    @staticmethod
    def rate_limited(command: str) -> DiscordOutput:
        """Create output for rate limiting errors."""
        return DiscordOutput(
            title="Rate Limited",
            description=f"⏰ Rate limit exceeded. Please wait before using `/{command}` again.",
            color=Palette.RED,
        )
