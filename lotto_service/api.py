# lotto_service/api.py

from contextlib import asynccontextmanager
from datetime import datetime
from datetime import timezone

import structlog
from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .core.exceptions import GameNotFoundError
from .engine import FetchStatus
from .engine import GameFetchResult
from .engine import LotteryEngine
from .games import ALL_GAMES
from .games import GameSpec
from .logging_config import configure_logging
from .middleware.error_handler import LottoJSONResponse
from .middleware.error_handler import game_not_found_handler
from .middleware.error_handler import http_exception_handler
from .middleware.error_handler import rate_limit_exceeded_handler
from .middleware.headers import response_headers_middleware

log = structlog.get_logger()

STATUS_CODES = {
    FetchStatus.SUCCESS: 200,
    FetchStatus.FAILED: 500,
    FetchStatus.TIMEOUT: 500,
    FetchStatus.ERROR: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    log.info("Uvicorn is online, starting lifespan hook.")

    created_engine = None
    if getattr(app.state, "engine", None) is None:
        created_engine = LotteryEngine(config=get_settings())
        app.state.engine = created_engine

    yield

    log.info("Server shutdown sequence initiated.")
    if created_engine is not None:
        await created_engine.close()
        app.state.engine = None
    log.info("Server shutdown sequence complete.")


def _rate_limit() -> str:
    return get_settings().RATE_LIMIT


limiter = Limiter(key_func=get_remote_address)
app = FastAPI(
    title="Lotto Hub API",
    version="1.0",
    lifespan=lifespan,
    default_response_class=LottoJSONResponse,
    docs_url="/api/docs",
    redoc_url=None,
    openapi_url="/api/openapi.json",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(GameNotFoundError, game_not_found_handler)
app.middleware("http")(response_headers_middleware)


def get_engine(request: Request) -> LotteryEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise RuntimeError("Lottery engine is not initialized")
    return engine


def _record_response(result: GameFetchResult) -> LottoJSONResponse:
    return LottoJSONResponse(
        status_code=STATUS_CODES[result.status],
        content=result.record.to_json_dict(),
    )


@app.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/")
@app.get("/api")
async def list_endpoints():
    return {"ok": True, "endpoints": [game.path for game in ALL_GAMES] + ["/api/all"]}


@app.get("/api/all")
@limiter.limit(_rate_limit)
async def get_all_games(request: Request, engine: LotteryEngine = Depends(get_engine)):
    """All six games fetched concurrently; always 200, failures live in each record."""
    response = await engine.fetch_all()
    return LottoJSONResponse(status_code=200, content=response.to_json_dict())


def _game_endpoint(game: GameSpec):
    async def get_game(request: Request, engine: LotteryEngine = Depends(get_engine)):
        result = await engine.fetch_game(game.key)
        return _record_response(result)

    get_game.__name__ = get_game.__qualname__ = f"get_{game.key}"
    get_game.__doc__ = f"Latest {game.label} draw."
    return limiter.limit(_rate_limit)(get_game)


for _game in ALL_GAMES:
    app.add_api_route(_game.path, _game_endpoint(_game), methods=["GET"], name=f"get_{_game.key}")
