"""
Custom exceptions for the League bot with user-friendly error messages.
"""

from typing import Optional


class LeagueBotError(Exception):
    """Base exception for command failures that are shown to the user."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class AccountNotFoundError(LeagueBotError):
    """Raised when the Riot account lookup does not return 200."""
    def __init__(self, status: int, player_name: str, tag: str, region: str):
        self.status = status
        self.player_name = player_name
        self.tag = tag
        self.region = region
        super().__init__(
            f"Account lookup failed with {status} for {player_name}#{tag} ({region})",
            f"Request to find account failed\n({status}) {player_name}#{tag}: ({region})"
        )

class MatchListUnavailableError(LeagueBotError):
    """Raised when the match-id listing does not return 200."""
    def __init__(self, status: int, player_name: str, tag: str, region: str):
        self.status = status
        self.player_name = player_name
        self.tag = tag
        self.region = region
        super().__init__(
            f"Match list failed with {status} for {player_name}#{tag} ({region})",
            f"Request to find matches failed\n({status}) {player_name}#{tag}: ({region})"
        )

class ParticipantNotFoundError(LeagueBotError):
    """Raised when a match lacks the queried player or a unique lane opponent."""
    def __init__(self, match_id: str, reason: str):
        self.match_id = match_id
        self.reason = reason
        super().__init__(f"Match {match_id}: {reason}")

class NoDataForQueryError(LeagueBotError):
    """Raised when the stats site reports no data for a champion or matchup."""
    def __init__(self, champion: str, opponent: Optional[str] = None):
        self.champion = champion
        self.opponent = opponent
        subject = f"{champion} vs. {opponent}" if opponent else champion
        super().__init__(
            f"No data available for {subject}",
            f"❌ u.gg has no data for {subject}."
        )

class ElementNotFoundError(LeagueBotError):
    """Raised when an expected page element never appears."""
    def __init__(self, selector: str, details: str = None):
        self.selector = selector
        super().__init__(
            f"Element '{selector}' not found" + (f": {details}" if details else ""),
            "❌ Could not read the page. The site layout may have changed."
        )

class PageLoadError(LeagueBotError):
    """Raised when the browser cannot load a page at all."""
    def __init__(self, url: str, details: str = None):
        self.url = url
        super().__init__(
            f"Failed to load {url}" + (f": {details}" if details else ""),
            "❌ u.gg could not be reached. Please try again later."
        )

class UnknownRuneTreeError(LeagueBotError):
    """Raised when a rune tree title is not one of the five known trees."""
    def __init__(self, tree_name: str):
        self.tree_name = tree_name
        super().__init__(
            f"Unknown rune tree '{tree_name}'",
            f"❌ Unknown rune tree '{tree_name}'."
        )

class InvalidRegionError(LeagueBotError):
    """Raised when a routing region is not one of the Riot API's regional hosts."""
    def __init__(self, region: str, valid_regions):
        self.region = region
        super().__init__(
            f"Unknown routing region '{region}'",
            f"❌ Unknown region '{region}'. Use one of: {', '.join(valid_regions)}."
        )
