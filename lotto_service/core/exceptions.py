# lotto_service/core/exceptions.py
"""
Custom, application-specific exceptions for the Lotto Hub service.

Upstream failures are fatal to a single game's record and are always turned
into an ``ok: false`` record by the adapter that hit them. Extraction misses
are not exceptions at all: they resolve to ``Absent`` (see
``lotto_service.extraction.result``).
"""


class LottoHubException(Exception):
    """Base class for all custom exceptions in this application."""

    pass


class AdapterError(LottoHubException):
    """Base class for all adapter-related errors."""

    def __init__(self, adapter_name: str, message: str):
        self.adapter_name = adapter_name
        self.message = message
        super().__init__(f"[{adapter_name}] {message}")


class UpstreamError(AdapterError):
    """Raised when an upstream page could not be retrieved."""

    pass


class UpstreamUnreachableError(UpstreamError):
    """Raised for DNS lookup failures, refused connections and other transport errors."""

    def __init__(self, adapter_name: str, url: str, detail: str | None = None):
        self.url = url
        self.detail = detail
        message = f"Upstream unreachable: {url}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(adapter_name, message)


class UpstreamTimeoutError(UpstreamError):
    """Raised when a request to an upstream page times out."""

    def __init__(self, adapter_name: str, url: str | None = None, timeout: float | None = None):
        self.url = url
        self.timeout = timeout
        target = url or "upstream"
        message = f"Request timed out for {target}"
        if timeout is not None:
            message = f"{message} after {timeout:g}s"
        super().__init__(adapter_name, message)


class UpstreamStatusError(UpstreamError):
    """Raised for unsuccessful HTTP responses (4xx or 5xx status codes)."""

    def __init__(self, adapter_name: str, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(adapter_name, f"Fetch failed ({status_code}) for {url}")


class GameNotFoundError(LottoHubException):
    """Raised when a request names a game that no adapter serves."""

    def __init__(self, game_key: str):
        self.game_key = game_key
        super().__init__(f"Unknown game: {game_key}")
