"""
Bounded retry with linear backoff for outbound HTTP requests.

Only transient failures are retried: network errors, timeouts, 429 and 5xx.
Any other status is handed straight back to the caller, who must still check
it. After the last retry the final response is returned, or the final network
error re-raised.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, FrozenSet, Mapping, Optional

import aiohttp

from lolbot.constants import RetryConstants

logger = logging.getLogger(__name__)


@dataclass
class RetryPolicy:
    """Retry count, backoff schedule and which statuses count as transient."""
    max_retries: int = RetryConstants.MAX_RETRIES
    initial_delay: float = RetryConstants.INITIAL_DELAY
    delay_step: float = RetryConstants.DELAY_STEP
    retryable_statuses: FrozenSet[int] = field(default_factory=lambda: RetryConstants.RETRYABLE_STATUSES)
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep

    def delay_for(self, retry_number: int) -> float:
        """Delay before the given retry (1-based): 0.5s, 1.0s, 1.5s by default."""
        return self.initial_delay + self.delay_step * (retry_number - 1)

    def is_retryable(self, status: int) -> bool:
        return status in self.retryable_statuses or status >= 500


def _retry_after_seconds(response) -> Optional[float]:
    value = (getattr(response, "headers", None) or {}).get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


async def send_with_retry(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    policy: Optional[RetryPolicy] = None,
) -> aiohttp.ClientResponse:
    """Send a request, retrying transient failures according to `policy`."""
    policy = policy or RetryPolicy()
    retries = 0

    while True:
        try:
            response = await session.request(method, url, headers=headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            if retries >= policy.max_retries:
                logger.error(f"Request to {url} failed after {retries} retries: {e!r}")
                raise
            retries += 1
            delay = policy.delay_for(retries)
            logger.warning(f"Request to {url} raised {e!r}, retry {retries}/{policy.max_retries} in {delay:.1f}s")
            await policy.sleep(delay)
            continue

        status = response.status
        if 200 <= status < 300:
            logger.debug(f"Request to {url} successful ({status})")
            return response

        if not policy.is_retryable(status):
            logger.warning(f"Request to {url} returned {status}, not retrying")
            return response

        if retries >= policy.max_retries:
            logger.error(f"Request to {url} failed with {status} after {retries} retries")
            return response

        retries += 1
        delay = policy.delay_for(retries)
        if status == 429:
            retry_after = _retry_after_seconds(response)
            if retry_after is not None and retry_after > delay:
                delay = retry_after
        logger.warning(f"Request to {url} returned {status}, retry {retries}/{policy.max_retries} in {delay:.1f}s")
        response.release()
        await policy.sleep(delay)
