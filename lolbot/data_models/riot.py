"""
Match-history data models parsed from Riot match-v5 documents.

Provides immutable data transfer objects; parsing raises KeyError, TypeError
or ValueError on documents without the expected shape.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ParticipantStats:
    """One player's stat line in a single match."""
    puuid: str
    summoner_id: str
    display_name: str
    team_id: int
    team_position: str
    champion_name: str
    kills: int
    deaths: int
    assists: int
    win: bool
    participant_id: int = 0

    @property
    def kda(self) -> str:
        return f"{self.kills}/{self.deaths}/{self.assists}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParticipantStats':
        # riotIdGameName replaced summonerName, which is now often blank
        display_name = data.get("riotIdGameName") or data.get("summonerName") or ""
        kills, deaths, assists = int(data["kills"]), int(data["deaths"]), int(data["assists"])
        if min(kills, deaths, assists) < 0:
            raise ValueError("K/D/A values must be non-negative")
        return cls(
            puuid=data["puuid"],
            summoner_id=data.get("summonerId", ""),
            display_name=display_name,
            team_id=int(data["teamId"]),
            team_position=data.get("teamPosition") or "",
            champion_name=data["championName"],
            kills=kills,
            deaths=deaths,
            assists=assists,
            win=bool(data["win"]),
            participant_id=int(data.get("participantId", 0)),
        )


@dataclass(frozen=True)
class MatchRecord:
    """One fetched match; participants keep API order."""
    match_id: str
    game_mode: str
    participants: Tuple[ParticipantStats, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MatchRecord':
        info = data["info"]
        participants = tuple(ParticipantStats.from_dict(p) for p in info["participants"])
        if not participants:
            raise ValueError("Match has no participants")
        match_id = (data.get("metadata") or {}).get("matchId", "")
        return cls(
            match_id=match_id,
            game_mode=info.get("gameMode", ""),
            participants=participants,
        )


@dataclass(frozen=True)
class MatchSummary:
    """Rendered embed field for one match plus whether the player won."""
    heading: str
    body: str
    win: bool
