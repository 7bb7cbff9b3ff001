"""Shared fakes for HTTP and browser tests."""

import asyncio
from contextlib import asynccontextmanager

import pytest
from bs4 import BeautifulSoup

from lolbot.services.browser import PageSession
from lolbot.services.http_retry import RetryPolicy
from lolbot.utils.exceptions import ElementNotFoundError


class FakeResponse:
    """Stands in for aiohttp.ClientResponse."""

    def __init__(self, status=200, payload=None, headers=None):
        self.status = status
        self._payload = payload
        self.headers = headers or {}
        self.released = False

    async def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def release(self):
        self.released = True


class FakeSession:
    """
    Stands in for aiohttp.ClientSession.

    `routes` maps a URL to a list of outcomes consumed one per request; an
    outcome is a FakeResponse or an exception to raise. The last outcome
    repeats once the list is exhausted.
    """

    def __init__(self, routes):
        self.routes = {url: list(outcomes) for url, outcomes in routes.items()}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def request(self, method, url, headers=None):
        self.calls.append((method, url, dict(headers or {})))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
        finally:
            self.in_flight -= 1

        outcomes = self.routes.get(url)
        if not outcomes:
            return FakeResponse(status=404, payload={"status": {"status_code": 404}})
        outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def count(self, url):
        return sum(1 for _, called_url, _ in self.calls if called_url == url)


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


class FakePageSession(PageSession):
    """
    PageSession over canned HTML instead of a live tab.

    `snapshots` maps a root selector to HTML, `present` lists selectors that
    exist on the page, `missing` lists selectors whose wait times out, and
    `items` maps an icon selector to the tooltip names of its icons.
    """

    def __init__(self, snapshots=None, present=(), missing=(), items=None):
        super().__init__(page=None, timeout_ms=1000)
        self.snapshots = snapshots or {}
        self.present = set(present)
        self.missing = set(missing)
        self.items = items or {}
        self.calls = []

    async def navigate(self, url):
        self.calls.append(("navigate", url))

    async def wait_until_loaded(self):
        self.calls.append(("wait_until_loaded",))

    async def wait_for_selector(self, selector, timeout_ms=None):
        self.calls.append(("wait_for_selector", selector))
        if selector in self.missing:
            raise ElementNotFoundError(selector, "timed out waiting for element")

    async def has_element(self, selector):
        return selector in self.present

    async def count(self, selector):
        return len(self.items.get(selector, ()))

    async def snapshot_html(self, root_selector):
        self.calls.append(("snapshot_html", root_selector))
        if root_selector not in self.snapshots:
            raise ElementNotFoundError(root_selector)
        return BeautifulSoup(self.snapshots[root_selector], "html.parser")

    async def hover_and_read(self, target_selector, index, tooltip_selector):
        self.calls.append(("hover", target_selector, index))
        return self.items[target_selector][index]


def page_factory(page):
    """Session factory yielding `page`, matching open_page_session's shape."""
    @asynccontextmanager
    async def factory():
        yield page
    return factory


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def fast_policy(recording_sleep):
    return RetryPolicy(sleep=recording_sleep)


POSITIONS = ["TOP", "JUNGLE", "MIDDLE", "BOTTOM", "UTILITY"]


def make_participant(puuid, team_id, position, champion, win, kda=(1, 2, 3), name=None):
    kills, deaths, assists = kda
    return {
        "assists": assists,
        "championName": champion,
        "deaths": deaths,
        "kills": kills,
        "participantId": 0,
        "puuid": puuid,
        "summonerId": f"summoner-{puuid}",
        "summonerName": "",
        "riotIdGameName": name or f"name-{puuid}",
        "teamPosition": position,
        "teamId": team_id,
        "win": win,
    }


def make_match_document(match_id, puuid, win=True, position="TOP", champion="Aatrox", opponent_champion="Camille"):
    """A 5v5 match with `puuid` on team 100 playing `position`."""
    participants = []
    for index, lane in enumerate(POSITIONS):
        ally = puuid if lane == position else f"ally-{match_id}-{index}"
        participants.append(make_participant(
            ally, 100, lane, champion if lane == position else "Garen", win, kda=(5, 1, 7)
        ))
    for index, lane in enumerate(POSITIONS):
        participants.append(make_participant(
            f"enemy-{match_id}-{index}", 200, lane,
            opponent_champion if lane == position else "Darius", not win,
            kda=(2, 5, 1), name="Rival" if lane == position else None
        ))
    for number, participant in enumerate(participants, 1):
        participant["participantId"] = number
    return {
        "metadata": {"dataVersion": "2", "matchId": match_id},
        "info": {"gameMode": "CLASSIC", "participants": participants},
    }
