"""
Shared embed utilities for the League Discord bot.

Converts the DiscordOutput envelope into discord.py objects so services never
touch the Discord API directly.
"""

import discord

from lolbot.data_models.discord_output import DiscordOutput

# Discord embed limits
MAX_FIELDS = 25
MAX_FIELD_VALUE = 1024
MAX_DESCRIPTION = 4096


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 1] + "…"


def build_embed(output: DiscordOutput) -> discord.Embed:
    """
    Build the embed for a command response.

    Field values and the description are truncated to Discord's limits and
    extra fields beyond 25 are dropped.

    Args:
        output: Envelope produced by a service

    Returns:
        Formatted Discord embed ready for display
    """
    embed = discord.Embed(
        title=output.title,
        description=_truncate(output.description, MAX_DESCRIPTION) or None,
        color=discord.Color(output.color.value)
    )

    for embed_field in output.fields[:MAX_FIELDS]:
        embed.add_field(
            name=embed_field.name,
            value=_truncate(embed_field.value, MAX_FIELD_VALUE),
            inline=embed_field.inline
        )

    if output.footer:
        embed.set_footer(text=output.footer)

    return embed


async def send_output(interaction: discord.Interaction, output: DiscordOutput) -> None:
    """Replace the deferred interaction response with `output`."""
    await interaction.edit_original_response(
        content=output.content or None,
        embed=build_embed(output)
    )
