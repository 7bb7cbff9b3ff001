"""End-to-end tests for /matches against a fake Riot transport."""

import aiohttp
import pytest

from lolbot.data_models.discord_output import Palette
from lolbot.data_models.riot import MatchSummary
from lolbot.services.matches_service import MatchesService, format_win_rate, summarize_matches
from lolbot.services.riot_client import RiotClient
from lolbot.config import Config
from lolbot.utils.exceptions import AccountNotFoundError, InvalidRegionError, MatchListUnavailableError

from conftest import FakeResponse, FakeSession, make_match_document

BASE = "https://americas.api.riotgames.com"
ACCOUNT_URL = f"{BASE}/riot/account/v1/accounts/by-riot-id/Foo/NA1"
PUUID = "puuid-foo"


def ids_url(count):
    return f"{BASE}/lol/match/v5/matches/by-puuid/{PUUID}/ids?count={count}"


def match_url(match_id):
    return f"{BASE}/lol/match/v5/matches/{match_id}"


def riot_routes(match_documents, extra=None):
    routes = {
        ACCOUNT_URL: [FakeResponse(200, {"puuid": PUUID})],
        ids_url(len(match_documents)): [FakeResponse(200, list(match_documents))],
    }
    for match_id, document in match_documents.items():
        routes[match_url(match_id)] = [FakeResponse(200, document)]
    routes.update(extra or {})
    return routes


def make_service(session, fast_policy, concurrency=8):
    client = RiotClient(session, "riot-key", concurrency=concurrency, retry_policy=fast_policy)
    return MatchesService(client)


def test_format_win_rate():
    assert format_win_rate(2, 2) == "100"
    assert format_win_rate(1, 2) == "50"
    assert format_win_rate(2, 3) == "66.67"
    assert format_win_rate(0, 0) == "0"


@pytest.mark.asyncio
async def test_two_wins_give_full_win_rate(fast_policy):
    documents = {
        "NA1_1": make_match_document("NA1_1", PUUID, win=True),
        "NA1_2": make_match_document("NA1_2", PUUID, win=True),
    }
    session = FakeSession(riot_routes(documents))

    output = await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", "americas", 2)

    assert output.title == "Foo's Matches"
    assert output.description == "Winrate: 100% (2/2)"
    assert output.color is Palette.DARK_GREEN
    assert [f.name for f in output.fields] == ["1: TOP (WON)", "2: TOP (WON)"]
    assert all(f.inline for f in output.fields)


@pytest.mark.asyncio
async def test_api_key_header_on_every_request(fast_policy):
    documents = {"NA1_1": make_match_document("NA1_1", PUUID)}
    session = FakeSession(riot_routes(documents))

    await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", "americas", 1)

    assert len(session.calls) == 3
    assert all(headers == {"X-Riot-Token": "riot-key"} for _, _, headers in session.calls)


@pytest.mark.asyncio
async def test_broken_matches_are_dropped(fast_policy):
    documents = {
        "NA1_1": make_match_document("NA1_1", PUUID, win=True),
        "NA1_2": make_match_document("NA1_2", PUUID, win=False),
        "NA1_3": make_match_document("NA1_3", "not-foo"),
        "NA1_4": {"metadata": {"matchId": "NA1_4"}},
        "NA1_5": None,
        "NA1_6": None,
    }
    extra = {
        match_url("NA1_5"): [FakeResponse(500)],
        match_url("NA1_6"): [aiohttp.ClientConnectionError("reset")],
    }
    session = FakeSession(riot_routes(documents, extra))

    output = await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", "americas", 6)

    assert output.description == "Winrate: 50% (1/2)"
    assert [f.name for f in output.fields] == ["1: TOP (WON)", "2: TOP (LOST)"]


@pytest.mark.asyncio
async def test_win_and_loss_counts_sum_to_parsed_matches(fast_policy):
    documents = {
        f"NA1_{n}": make_match_document(f"NA1_{n}", PUUID, win=n % 3 == 0)
        for n in range(1, 8)
    }
    session = FakeSession(riot_routes(documents))
    client = RiotClient(session, "riot-key", retry_policy=fast_policy)

    puuid = await client.resolve_player("Foo", "NA1", "americas")
    match_ids = await client.list_recent_match_ids(puuid, "americas", 7)
    records = await client.fetch_match_details(match_ids, "americas")

    summaries = summarize_matches(records, puuid)
    wins = sum(1 for s in summaries if s.win)
    losses = sum(1 for s in summaries if not s.win)
    assert wins + losses == len(records) == 7
    assert wins == 2


@pytest.mark.asyncio
async def test_fan_out_is_bounded(fast_policy):
    documents = {f"NA1_{n}": make_match_document(f"NA1_{n}", PUUID) for n in range(1, 11)}
    session = FakeSession(riot_routes(documents))
    client = RiotClient(session, "riot-key", concurrency=3, retry_policy=fast_policy)

    records = await client.fetch_match_details(list(documents), "americas")

    assert len(records) == 10
    assert session.max_in_flight <= 3


@pytest.mark.asyncio
async def test_unknown_account_produces_error_output(fast_policy):
    session = FakeSession({ACCOUNT_URL: [FakeResponse(404)]})

    output = await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", "americas", 5)

    assert output.is_error
    assert output.title == "Request for Foo's matches FAILED"
    assert "(404) Foo#NA1: (americas)" in output.description
    assert session.count(ACCOUNT_URL) == 1


@pytest.mark.asyncio
async def test_resolve_player_raises_account_not_found(fast_policy):
    session = FakeSession({ACCOUNT_URL: [FakeResponse(403)]})
    client = RiotClient(session, "riot-key", retry_policy=fast_policy)

    with pytest.raises(AccountNotFoundError) as excinfo:
        await client.resolve_player("Foo", "NA1", "americas")

    assert excinfo.value.status == 403


@pytest.mark.asyncio
async def test_match_list_failure_raises(fast_policy):
    session = FakeSession({ids_url(5): [FakeResponse(400)]})
    client = RiotClient(session, "riot-key", retry_policy=fast_policy)

    with pytest.raises(MatchListUnavailableError):
        await client.list_recent_match_ids(PUUID, "americas", 5, player_name="Foo", tag="NA1")


@pytest.mark.asyncio
async def test_game_count_is_clamped(fast_policy):
    session = FakeSession({
        ACCOUNT_URL: [FakeResponse(200, {"puuid": PUUID})],
        ids_url(40): [FakeResponse(200, [])],
    })

    output = await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", "americas", 100)

    assert session.count(ids_url(40)) == 1
    assert output.description == "Winrate: 0% (0/0)"
    assert output.fields == ()


def test_field_count_is_capped():
    summaries = [MatchSummary(f"{n}: TOP (WON)", "body", True) for n in range(1, 31)]

    output = MatchesService.build_output("Foo", summaries)

    assert len(output.fields) == 24
    assert output.footer == "Showing 24 of 30 matches"
    assert output.description == "Winrate: 100% (30/30)"


@pytest.mark.asyncio
@pytest.mark.parametrize("region", ["attacker.example/#", "evil.com?", "na1", ""])
async def test_unknown_region_sends_no_request(fast_policy, region):
    session = FakeSession({})

    output = await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", region, 2)

    assert session.calls == []
    assert output.is_error
    assert output.title == "Request for Foo's matches FAILED"
    assert "americas" in output.description


@pytest.mark.asyncio
async def test_region_is_case_insensitive(fast_policy):
    session = FakeSession({ACCOUNT_URL: [FakeResponse(200, {"puuid": PUUID})]})
    client = RiotClient(session, "riot-key", retry_policy=fast_policy)

    assert await client.resolve_player("Foo", "NA1", " Americas ") == PUUID
    assert session.calls[0][1] == ACCOUNT_URL


@pytest.mark.asyncio
async def test_client_rejects_unknown_region_before_any_call(fast_policy):
    session = FakeSession({})
    client = RiotClient(session, "riot-key", retry_policy=fast_policy)

    with pytest.raises(InvalidRegionError):
        await client.list_recent_match_ids(PUUID, "attacker.example/#", 5)
    with pytest.raises(InvalidRegionError):
        await client.fetch_match_details(["NA1_1"], "attacker.example/#")

    assert session.calls == []


@pytest.mark.asyncio
async def test_default_region_comes_from_config(fast_policy):
    account_url = (
        f"https://{Config.DEFAULT_REGION}.api.riotgames.com/riot/account/v1/accounts/by-riot-id/Foo/NA1"
    )
    session = FakeSession({account_url: [FakeResponse(404)]})

    await make_service(session, fast_policy).handle_matches_command("Foo", "NA1", game_count=1)

    assert session.calls[0][1] == account_url
