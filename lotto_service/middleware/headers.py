# lotto_service/middleware/headers.py
"""
Response headers shared by every endpoint: permissive CORS, a short public
cache lifetime, and a 204 answer to any preflight.
"""

import structlog
from fastapi import Request
from fastapi.responses import Response

from ..config import get_settings
from .error_handler import internal_error_response

log = structlog.get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def response_headers() -> dict:
    max_age = get_settings().CACHE_MAX_AGE_SECONDS
    return {**CORS_HEADERS, "Cache-Control": f"public, max-age={max_age}"}


async def response_headers_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=response_headers())

    try:
        response = await call_next(request)
    except Exception as exc:
        log.error("Unhandled error while serving request", path=request.url.path, exc_info=True)
        response = internal_error_response(exc)

    response.headers.update(response_headers())
    return response
