"""
Riot match-history client.

Resolves a Riot ID to a puuid, lists recent match ids and fetches match
detail documents. Detail fetches run concurrently behind a semaphore; a match
that fails to download or parse is logged and dropped rather than failing
the whole command.
"""

import asyncio
import logging
from typing import List, Optional
from urllib.parse import quote

import aiohttp

from lolbot.constants import RiotConstants
from lolbot.data_models.riot import MatchRecord
from lolbot.services.http_retry import RetryPolicy, send_with_retry
from lolbot.utils.exceptions import AccountNotFoundError, InvalidRegionError, MatchListUnavailableError

logger = logging.getLogger(__name__)


class RiotClient:
    """Thin async client over the account-v1 and match-v5 endpoints."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        concurrency: int = 8,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.session = session
        self.api_key = api_key
        self.retry_policy = retry_policy or RetryPolicy()
        self._concurrency = concurrency

    @staticmethod
    def _base_url(region: str) -> str:
        """Regional API host; unknown regions raise InvalidRegionError."""
        routing = region.strip().lower()
        if routing not in RiotConstants.REGIONS:
            raise InvalidRegionError(region, RiotConstants.REGIONS)
        return f"https://{routing}.api.riotgames.com"

    async def _get(self, url: str) -> aiohttp.ClientResponse:
        return await send_with_retry(
            self.session,
            "GET",
            url,
            headers={RiotConstants.API_KEY_HEADER: self.api_key},
            policy=self.retry_policy,
        )

    async def resolve_player(self, player_name: str, tag: str, region: str) -> str:
        """Return the puuid for `player_name#tag`."""
        url = (
            f"{self._base_url(region)}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(player_name, safe='')}/{quote(tag, safe='')}"
        )
        response = await self._get(url)
        try:
            if response.status != 200:
                raise AccountNotFoundError(response.status, player_name, tag, region)
            data = await response.json()
        finally:
            response.release()
        return data["puuid"]

    async def list_recent_match_ids(
        self,
        puuid: str,
        region: str,
        count: int,
        *,
        player_name: str = "",
        tag: str = "",
    ) -> List[str]:
        """Return up to `count` most recent match ids, newest first."""
        url = f"{self._base_url(region)}/lol/match/v5/matches/by-puuid/{puuid}/ids?count={count}"
        response = await self._get(url)
        try:
            if response.status != 200:
                raise MatchListUnavailableError(response.status, player_name, tag, region)
            match_ids = await response.json()
        finally:
            response.release()
        return [str(match_id) for match_id in match_ids]

    async def _fetch_match(self, semaphore: asyncio.Semaphore, match_id: str, region: str) -> Optional[MatchRecord]:
        url = f"{self._base_url(region)}/lol/match/v5/matches/{match_id}"
        async with semaphore:
            try:
                response = await self._get(url)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning(f"Dropping match {match_id}: request failed ({e!r})")
                return None
            try:
                if response.status != 200:
                    logger.warning(f"Dropping match {match_id}: status {response.status}")
                    return None
                data = await response.json()
            except (aiohttp.ClientError, ValueError) as e:
                logger.warning(f"Dropping match {match_id}: invalid JSON ({e!r})")
                return None
            finally:
                response.release()

        try:
            return MatchRecord.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Dropping match {match_id}: unexpected document shape ({e!r})")
            return None

    async def fetch_match_details(self, match_ids: List[str], region: str) -> List[MatchRecord]:
        """Fetch every match concurrently; failed matches are left out."""
        semaphore = asyncio.Semaphore(self._concurrency)
        results = await asyncio.gather(
            *(self._fetch_match(semaphore, match_id, region) for match_id in match_ids)
        )
        records = [record for record in results if record is not None]
        logger.info(f"Fetched {len(records)}/{len(match_ids)} match documents from {region}")
        return records
