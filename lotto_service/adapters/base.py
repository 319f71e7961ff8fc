# lotto_service/adapters/base.py
from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from ..core.exceptions import UpstreamError
from ..core.fetcher import UpstreamFetcher
from ..extraction import AnchoredExtractor, BallsExtractor
from ..games import GameSpec
from ..models import AnyDrawRecord, DrawRecord
from ..utils.text import page_text


class BaseLotteryAdapter(ABC):
    """
    Abstract base class for all lottery adapters.
    Enforces a standardized fetch/parse pattern: network access lives in
    _fetch_data, record assembly in the pure _parse_draw.
    """

    GAME: GameSpec

    def __init__(self, fetcher: UpstreamFetcher):
        self.game = self.GAME
        self.source_name = self.game.label
        self.fetcher = fetcher
        self.logger = structlog.get_logger(adapter_name=self.game.key)

    async def _fetch_data(self) -> Any:
        """
        Fetches the raw page(s) for the game.
        This is the only method that should perform network operations.
        """
        return await self.fetcher.fetch_text(self.game.url, self.source_name)

    @abstractmethod
    def _parse_draw(self, raw_data: Any) -> AnyDrawRecord:
        """
        Builds the record from the data returned by _fetch_data.
        This method should be a pure function with no side effects.
        """
        raise NotImplementedError

    def failed_record(self, message: str) -> AnyDrawRecord:
        return DrawRecord.failed(self.game.label, message)

    async def get_draw(self) -> AnyDrawRecord:
        """
        Orchestrates the fetch-then-parse pipeline for the adapter.
        Upstream failures become an ok=false record; they are never raised.
        This public method should not be overridden by subclasses.
        """
        try:
            raw_data = await self._fetch_data()
        except UpstreamError as e:
            self.logger.warning("Upstream fetch failed", error=e.message)
            return self.failed_record(e.message)
        return self._parse_draw(raw_data)

    def _extract(self, field: str, extractor: Optional[AnchoredExtractor], text: str):
        """Runs one extractor; a miss is logged and comes back as None."""
        if extractor is None:
            return None
        result = extractor.extract(text)
        if not result:
            self.logger.debug("Field absent", field=field)
        return result.or_none()


class BallGameAdapter(BaseLotteryAdapter):
    """
    Adapter for single-draw ball games. Subclasses only declare their
    extraction strategies; a strategy left as None means the game does not
    publish that field.
    """

    DRAW_DATE: Optional[AnchoredExtractor] = None
    BALLS: Optional[BallsExtractor] = None
    MULTIPLIER: Optional[AnchoredExtractor] = None
    JACKPOT: Optional[AnchoredExtractor] = None
    CASH_VALUE: Optional[AnchoredExtractor] = None

    def _parse_draw(self, raw_data: Any) -> DrawRecord:
        return self._assemble(page_text(raw_data))

    def _assemble(self, text: str, **extra: Any) -> DrawRecord:
        balls = self._extract("numbers", self.BALLS, text)
        return DrawRecord(
            game=self.game.label,
            draw_date=self._extract("drawDate", self.DRAW_DATE, text),
            numbers=balls.main if balls else None,
            special=balls.special if balls else None,
            multiplier=self._extract("multiplier", self.MULTIPLIER, text),
            jackpot=self._extract("jackpot", self.JACKPOT, text),
            cash_value=self._extract("cashValue", self.CASH_VALUE, text),
            source=self.game.source,
            **extra,
        )
