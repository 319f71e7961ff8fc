# lotto_service/engine.py

import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

import httpx
import structlog

from .adapters.base import BaseLotteryAdapter
from .adapters.cash3_adapter import Cash3Adapter
from .adapters.cash4_adapter import Cash4Adapter
from .adapters.cash4life_adapter import Cash4LifeAdapter
from .adapters.fantasy5_adapter import Fantasy5Adapter
from .adapters.mega_millions_adapter import MegaMillionsAdapter
from .adapters.powerball_adapter import PowerballAdapter
from .config import Settings, get_settings
from .core.exceptions import GameNotFoundError, UpstreamTimeoutError
from .core.fetcher import UpstreamFetcher
from .models import AggregatedResponse, AnyDrawRecord, SourceInfo

ADAPTER_CLASSES = (
    PowerballAdapter,
    MegaMillionsAdapter,
    Cash4LifeAdapter,
    Fantasy5Adapter,
    Cash3Adapter,
    Cash4Adapter,
)


class FetchStatus(Enum):
    """Outcome of one adapter run."""
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    TIMEOUT = "TIMEOUT"
    ERROR = "ERROR"


@dataclass
class GameFetchResult:
    """Result of a single adapter run, with timing."""
    game_key: str
    status: FetchStatus
    record: AnyDrawRecord
    duration_ms: float = 0.0
    error: Optional[str] = None

    def source_info(self) -> SourceInfo:
        return SourceInfo(
            name=self.game_key,
            status=self.status.value,
            fetch_duration=round(self.duration_ms / 1000, 3),
            error_message=self.error,
        )


class LotteryEngine:
    """
    Runs the per-game adapters. Every adapter is isolated: whatever happens
    inside one (upstream down, page reshaped, a bug) comes back as an
    ok=false record for that game only.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.logger = structlog.get_logger(__name__)
        self.config = config or get_settings()

        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            limits=httpx.Limits(
                max_connections=self.config.HTTP_POOL_CONNECTIONS,
                max_keepalive_connections=self.config.HTTP_MAX_KEEPALIVE,
            )
        )
        self.fetcher = UpstreamFetcher(
            self.http_client,
            user_agent=self.config.USER_AGENT,
            timeout=self.config.FETCH_TIMEOUT_SECONDS,
            retry_attempts=self.config.FETCH_RETRY_ATTEMPTS,
        )
        self.adapters: Dict[str, BaseLotteryAdapter] = {}
        for adapter_cls in ADAPTER_CLASSES:
            adapter = adapter_cls(self.fetcher)
            self.adapters[adapter.game.key] = adapter

        self.semaphore = asyncio.Semaphore(self.config.MAX_CONCURRENT_REQUESTS)
        self.logger.info("LotteryEngine initialized", adapters=list(self.adapters))

    async def close(self):
        if self._owns_client:
            await self.http_client.aclose()

    def get_adapter(self, game_key: str) -> BaseLotteryAdapter:
        try:
            return self.adapters[game_key]
        except KeyError:
            raise GameNotFoundError(game_key) from None

    async def _run_adapter(self, adapter: BaseLotteryAdapter) -> GameFetchResult:
        """
        Wraps an adapter run for safe execution and returns a consistent
        result with timing information. Never raises.
        """
        game_key = adapter.game.key
        start_time = time.perf_counter()
        try:
            async with self.semaphore:
                record = await asyncio.wait_for(
                    adapter.get_draw(), timeout=self.config.ADAPTER_TIMEOUT_SECONDS
                )
            status = FetchStatus.SUCCESS if record.ok else FetchStatus.FAILED
            error = record.error
        except asyncio.TimeoutError:
            error = UpstreamTimeoutError(
                adapter.source_name, adapter.game.url, self.config.ADAPTER_TIMEOUT_SECONDS
            ).message
            self.logger.error("Adapter timed out", adapter=game_key, error=error)
            record = adapter.failed_record(error)
            status = FetchStatus.TIMEOUT
        except Exception as e:
            self.logger.error(
                "Critical failure during fetch from adapter.",
                adapter=game_key,
                error=str(e),
                exc_info=True,
            )
            error = str(e) or type(e).__name__
            record = adapter.failed_record(error)
            status = FetchStatus.ERROR

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            "Adapter finished",
            adapter=game_key,
            status=status.value,
            duration_ms=round(duration_ms, 1),
        )
        return GameFetchResult(
            game_key=game_key,
            status=status,
            record=record,
            duration_ms=duration_ms,
            error=error,
        )

    async def fetch_game(self, game_key: str) -> GameFetchResult:
        """Fetches one game. Raises GameNotFoundError for an unknown key."""
        return await self._run_adapter(self.get_adapter(game_key))

    async def fetch_all(self, game_keys: Optional[List[str]] = None) -> AggregatedResponse:
        """Fetches the requested games (all by default) concurrently."""
        adapters = (
            [self.get_adapter(key) for key in game_keys]
            if game_keys
            else list(self.adapters.values())
        )
        self.logger.info("Starting parallel fetch", adapters=len(adapters))
        results = await asyncio.gather(*(self._run_adapter(a) for a in adapters))

        response = AggregatedResponse(
            fetched_at=datetime.now(timezone.utc),
            games={result.game_key: result.record for result in results},
            source_info=[result.source_info() for result in results],
        )
        self.logger.info(
            "Parallel fetch complete",
            succeeded=sum(1 for r in results if r.status is FetchStatus.SUCCESS),
            failed=sum(1 for r in results if r.status is not FetchStatus.SUCCESS),
        )
        return response
