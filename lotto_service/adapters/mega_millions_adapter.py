# lotto_service/adapters/mega_millions_adapter.py
import asyncio
from typing import Any, Dict, Optional

from ..core.exceptions import UpstreamError
from ..extraction import (
    BallsExtractor,
    DateExtractor,
    MoneyExtractor,
    MultiplierExtractor,
    TextExtractor,
)
from ..games import MEGA_MILLIONS
from ..models import DrawRecord
from ..utils.text import page_text
from .base import BallGameAdapter
from .constants import MEGA_MILLIONS_NEXT_DRAW_URL


class MegaMillionsAdapter(BallGameAdapter):
    """
    Adapter for megamillions.com.

    The winning-numbers page only prints a yearless "DRAWING DATE: Fri., 1/30.",
    so drawDate is filled only when a full date is published. The next drawing
    comes from a second page, fetched alongside the first, and is best effort.
    """

    GAME = MEGA_MILLIONS

    DRAW_DATE = DateExtractor(anchor=r"DRAWING DATE:?", window=60)
    BALLS = BallsExtractor(game=MEGA_MILLIONS, anchor=r"Latest Winning Numbers", window=200)
    MULTIPLIER = MultiplierExtractor(anchor=r"Megaplier")
    JACKPOT = MoneyExtractor(anchor=r"Estimated Jackpot:", stop=r"Cash Option")
    CASH_VALUE = MoneyExtractor(anchor=r"Cash Option:")
    NEXT_DRAW = TextExtractor(
        anchor=r"Next\s*Drawing",
        window=60,
        pattern=r"([A-Za-z]{3}\.?,?\s*\d{1,2}/\d{1,2}(?:/\d{4})?\s*@\s*\d{1,2}(?::\d{2})?\s*[ap]\.?m\.?)",
    )

    async def _fetch_next_draw_page(self) -> Optional[str]:
        try:
            return await self.fetcher.fetch_text(MEGA_MILLIONS_NEXT_DRAW_URL, self.source_name)
        except UpstreamError as e:
            self.logger.warning("Next drawing page unavailable", error=e.message)
            return None

    async def _fetch_data(self) -> Dict[str, Optional[str]]:
        next_draw = asyncio.create_task(self._fetch_next_draw_page())
        try:
            page = await super()._fetch_data()
            next_draw_page = await next_draw
        finally:
            next_draw.cancel()
        return {"page": page, "next_draw_page": next_draw_page}

    def _parse_draw(self, raw_data: Any) -> DrawRecord:
        next_draw_text = page_text(raw_data.get("next_draw_page"))
        return self._assemble(
            page_text(raw_data.get("page")),
            next_draw=self._extract("nextDraw", self.NEXT_DRAW, next_draw_text),
        )
