# lotto_service/middleware/error_handler.py

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import GameNotFoundError

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class LottoJSONResponse(JSONResponse):
    media_type = JSON_CONTENT_TYPE


def _request_path(request: Request) -> str:
    return request.url.path.rstrip("/") or "/"


def not_found_response(request: Request) -> LottoJSONResponse:
    return LottoJSONResponse(
        status_code=404,
        content={"ok": False, "error": "Not found", "path": _request_path(request)},
    )


def internal_error_response(exc: Exception) -> LottoJSONResponse:
    return LottoJSONResponse(
        status_code=500,
        content={"ok": False, "error": str(exc) or type(exc).__name__},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (unknown path, wrong method) as machine-parseable JSON."""
    if exc.status_code == 404:
        return not_found_response(request)
    return LottoJSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.detail, "path": _request_path(request)},
        headers=getattr(exc, "headers", None),
    )


async def game_not_found_handler(request: Request, exc: GameNotFoundError):
    return not_found_response(request)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return LottoJSONResponse(
        status_code=429,
        content={"ok": False, "error": f"Rate limit exceeded: {exc.detail}"},
    )
