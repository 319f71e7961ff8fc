# lotto_service/adapters/digit_game_adapter.py
from typing import Any, Dict, Optional

from ..extraction import BallsExtractor, DateExtractor, extract_labeled_blocks
from ..models import DrawRecord, SessionedDrawRecord
from ..utils.text import page_text
from .base import BaseLotteryAdapter
from .constants import GA_DRAW_DATE_PATTERN, GA_LAST_DRAW_ANCHOR, GA_SECTION_END


class DigitGameAdapter(BaseLotteryAdapter):
    """
    Base adapter for Georgia Lottery digit games drawn several times a day.

    One page carries every session under "LAST DRAW RESULTS:", e.g.
    "Midday ( 02/01/2026 ). 4 4 8. Evening ( 02/01/2026 ). 0 1 7. Night ...".
    Each session block is split out and parsed on its own, so a missing or
    mangled session never affects its siblings. Without that heading the
    whole page is searched, but only for labels followed by a draw date.
    """

    SECTION_ANCHOR = GA_LAST_DRAW_ANCHOR
    SECTION_END = GA_SECTION_END
    SESSION_LABEL_SUFFIX = r"\s*" + GA_DRAW_DATE_PATTERN
    SESSION_DATE = DateExtractor(window=None, pattern=GA_DRAW_DATE_PATTERN)

    def __init__(self, fetcher):
        super().__init__(fetcher)
        self.session_digits = BallsExtractor(game=self.game, window=None)

    def failed_record(self, message: str) -> SessionedDrawRecord:
        return SessionedDrawRecord.failed(self.game.label, message)

    def _parse_session(self, label: str, block: str) -> DrawRecord:
        digits = self._extract(f"{label.lower()}.numbers", self.session_digits, block)
        return DrawRecord(
            game=f"{self.game.label} {label}",
            draw_date=self._extract(f"{label.lower()}.drawDate", self.SESSION_DATE, block),
            numbers=digits.main if digits else None,
            source=self.game.source,
        )

    def _parse_draw(self, raw_data: Any) -> SessionedDrawRecord:
        blocks = extract_labeled_blocks(
            page_text(raw_data),
            self.game.sessions,
            section_anchor=self.SECTION_ANCHOR,
            section_end=self.SECTION_END,
            fallback_suffix=self.SESSION_LABEL_SUFFIX,
        )
        sessions: Dict[str, Optional[DrawRecord]] = {}
        for label, block in blocks.items():
            if not block:
                self.logger.debug("Session absent", session=label)
                sessions[label.lower()] = None
                continue
            sessions[label.lower()] = self._parse_session(label, block.value)
        return SessionedDrawRecord(game=self.game.label, source=self.game.source, **sessions)
