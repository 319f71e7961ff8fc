# tests/test_api/test_endpoints.py
import httpx
import pytest
from fastapi.testclient import TestClient

from lotto_service.adapters.constants import GA_CASH4_URL, POWERBALL_URL
from lotto_service.api import app
from lotto_service.games import ALL_GAMES

EXPECTED_CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET,OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_shared_headers(response):
    for header, value in EXPECTED_CORS.items():
        assert response.headers[header] == value
    assert response.headers["cache-control"] == "public, max-age=300"


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert_shared_headers(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/", "/api"])
async def test_index_lists_endpoints(client, path):
    response = await client.get(path)
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["endpoints"] == [game.path for game in ALL_GAMES] + ["/api/all"]


@pytest.mark.asyncio
@pytest.mark.parametrize("game", ALL_GAMES, ids=lambda game: game.key)
async def test_each_game_endpoint_returns_its_record(client, mock_upstreams, game):
    response = await client.get(game.path)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json; charset=utf-8"
    assert_shared_headers(response)
    payload = response.json()
    assert payload["ok"] is True
    assert payload["game"] == game.label
    assert payload["error"] is None


@pytest.mark.asyncio
async def test_powerball_payload_shape(client, mock_upstreams):
    payload = (await client.get("/api/pb")).json()
    assert payload == {
        "game": "Powerball",
        "drawDate": payload["drawDate"],
        "numbers": ["09", "16", "29", "41", "56"],
        "special": "15",
        "multiplier": "3x",
        "jackpot": 59_000_000,
        "cashValue": 26_900_000,
        "nextDraw": None,
        "source": "powerball.com",
        "ok": True,
        "error": None,
    }
    assert payload["drawDate"].startswith("2026-01-31T05:00:00")


@pytest.mark.asyncio
async def test_sessioned_payload_shape(client, mock_upstreams):
    payload = (await client.get("/api/ga/cash3")).json()
    assert payload["midday"]["numbers"] == ["4", "4", "8"]
    assert payload["evening"]["game"] == "GA Cash 3 Evening"
    assert payload["night"]["drawDate"].startswith("2026-01-31T05:00:00")


@pytest.mark.asyncio
async def test_upstream_failure_returns_500_with_failed_record(client, mock_upstreams):
    mock_upstreams[POWERBALL_URL].mock(return_value=httpx.Response(500))

    response = await client.get("/api/pb")

    assert response.status_code == 500
    assert_shared_headers(response)
    payload = response.json()
    assert payload["ok"] is False
    assert payload["error"] == f"Fetch failed (500) for {POWERBALL_URL}"
    assert payload["numbers"] is None


@pytest.mark.asyncio
async def test_assembly_failure_returns_500_with_failed_record(client, mock_upstreams):
    def broken_parser(raw_data):
        raise ValueError("page layout changed")

    app.state.engine.adapters["ga_cash4"]._parse_draw = broken_parser

    response = await client.get("/api/ga/cash4")

    assert mock_upstreams[GA_CASH4_URL].called
    assert response.status_code == 500
    payload = response.json()
    assert payload["ok"] is False
    assert payload["error"] == "page layout changed"


@pytest.mark.asyncio
async def test_all_is_200_even_with_a_failed_game(client, mock_upstreams):
    mock_upstreams[POWERBALL_URL].mock(return_value=httpx.Response(503))

    response = await client.get("/api/all")

    assert response.status_code == 200
    assert_shared_headers(response)
    payload = response.json()
    assert payload["ok"] is True
    assert payload["games"]["pb"]["ok"] is False
    assert [key for key, record in payload["games"].items() if record["ok"]] == [
        "mm",
        "cash4life",
        "ga_fantasy5",
        "ga_cash3",
        "ga_cash4",
    ]
    assert len(payload["sourceInfo"]) == 6


@pytest.mark.asyncio
async def test_unhandled_error_returns_500_json(client):
    async def explode(game_keys=None):
        raise RuntimeError("engine exploded")

    app.state.engine.fetch_all = explode

    response = await client.get("/api/all")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "engine exploded"}
    assert_shared_headers(response)


@pytest.mark.asyncio
async def test_unknown_path_returns_json_404(client):
    response = await client.get("/api/keno")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Not found", "path": "/api/keno"}
    assert_shared_headers(response)


@pytest.mark.asyncio
async def test_wrong_method_returns_json_405(client):
    response = await client.post("/api/pb")

    assert response.status_code == 405
    assert response.json() == {"ok": False, "error": "Method Not Allowed", "path": "/api/pb"}


@pytest.mark.asyncio
async def test_preflight_returns_204(client):
    response = await client.options("/api/mm")

    assert response.status_code == 204
    assert response.content == b""
    assert_shared_headers(response)


def test_preflight_and_404_without_lifespan():
    """Routing answers don't need the engine."""
    sync_client = TestClient(app)

    preflight = sync_client.options("/anything/at/all")
    assert preflight.status_code == 204
    assert preflight.headers["access-control-allow-origin"] == "*"

    missing = sync_client.get("/nope")
    assert missing.status_code == 404
    assert missing.json()["path"] == "/nope"
