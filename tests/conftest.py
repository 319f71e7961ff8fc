import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# =============================================================================
# 1. SYSTEM PATH INJECTION
# =============================================================================
# Makes 'lotto_service' importable regardless of where pytest is run from.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


# =============================================================================
# 2. SETTINGS
# =============================================================================
@pytest.fixture
def test_settings():
    """Settings that don't depend on a .env file; generous timeouts, no retries."""
    from lotto_service.config import Settings

    return Settings(
        FETCH_TIMEOUT_SECONDS=5.0,
        FETCH_RETRY_ATTEMPTS=1,
        ADAPTER_TIMEOUT_SECONDS=5.0,
    )


# =============================================================================
# 3. UPSTREAM PAGES
# =============================================================================
@pytest.fixture
def upstream_pages():
    """Every upstream URL mapped to its sample page."""
    from lotto_service.adapters import constants

    return {
        constants.POWERBALL_URL: read_fixture("powerball.html"),
        constants.MEGA_MILLIONS_URL: read_fixture("mega_millions.html"),
        constants.MEGA_MILLIONS_NEXT_DRAW_URL: read_fixture("mega_millions_next_draw.html"),
        constants.GA_CASH4LIFE_URL: read_fixture("cash4life.html"),
        constants.GA_FANTASY5_URL: read_fixture("fantasy5.html"),
        constants.GA_CASH3_URL: read_fixture("cash3.html"),
        constants.GA_CASH4_URL: read_fixture("cash4.html"),
    }


@pytest.fixture
def mock_upstreams(upstream_pages):
    """
    Routes every upstream URL to its sample page. Tests can override a
    single route, e.g. ``mock_upstreams[url].mock(return_value=...)``.
    """
    import respx

    with respx.mock(assert_all_called=False) as router:
        routes = {
            url: router.get(url).mock(return_value=httpx.Response(200, text=html))
            for url, html in upstream_pages.items()
        }
        yield routes


# =============================================================================
# 4. ENGINE, FASTAPI APP & CLIENT
# =============================================================================
@pytest_asyncio.fixture
async def engine(test_settings):
    from lotto_service.engine import LotteryEngine

    lottery_engine = LotteryEngine(config=test_settings)
    yield lottery_engine
    await lottery_engine.close()


@pytest_asyncio.fixture
async def app(engine):
    from asgi_lifespan import LifespanManager

    from lotto_service.api import app as fastapi_app

    # An engine already on app.state is used as-is by the lifespan hook.
    fastapi_app.state.engine = engine
    async with LifespanManager(fastapi_app, startup_timeout=30) as manager:
        yield manager
    fastapi_app.state.engine = None


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app.app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def fetcher():
    """A fetcher over a fresh client; pair it with respx to mock the upstream."""
    from lotto_service.core.fetcher import UpstreamFetcher

    async with httpx.AsyncClient() as http_client:
        yield UpstreamFetcher(http_client, timeout=5.0)
