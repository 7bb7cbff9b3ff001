"""
Per-match summary for the /matches command.

Finds the queried player and their lane opponent in a match and renders a
short K/D/A comparison as an inline embed field.
"""

from lolbot.data_models.discord_output import code_block
from lolbot.data_models.riot import MatchRecord, MatchSummary, ParticipantStats
from lolbot.utils.exceptions import ParticipantNotFoundError


def find_player(record: MatchRecord, puuid: str) -> ParticipantStats:
    matches = [p for p in record.participants if p.puuid == puuid]
    if len(matches) != 1:
        raise ParticipantNotFoundError(record.match_id, f"expected one participant with puuid, found {len(matches)}")
    return matches[0]


def find_lane_opponent(record: MatchRecord, me: ParticipantStats) -> ParticipantStats:
    """
    Return the single participant on the other team sharing `me`'s lane label.

    Two candidates at the same position on the enemy team make the match
    ambiguous; it is rejected instead of guessing.
    """
    candidates = [
        p for p in record.participants
        if p.team_id != me.team_id and p.team_position == me.team_position
    ]
    if not candidates:
        raise ParticipantNotFoundError(record.match_id, f"no opponent in lane '{me.team_position}'")
    if len(candidates) > 1:
        raise ParticipantNotFoundError(
            record.match_id,
            f"{len(candidates)} opponents share lane '{me.team_position}'"
        )
    return candidates[0]


def summarize_match(record: MatchRecord, puuid: str, sequence: int) -> MatchSummary:
    """Render match number `sequence` from the queried player's point of view."""
    me = find_player(record, puuid)
    opponent = find_lane_opponent(record, me)

    result = "WON" if me.win else "LOST"
    heading = f"{sequence}: {me.team_position.upper()} ({result})"
    body = code_block(
        f"({me.kda})\n"
        f"{me.champion_name}\n"
        f"vs.\n"
        f"({opponent.kda})\n"
        f"{opponent.champion_name}\n"
        f"({opponent.display_name})"
    )
    return MatchSummary(heading=heading, body=body, win=me.win)
