# lotto_service/extraction/extractors.py
"""
Anchor-then-window field extractors.

Each extractor locates a distinctive label (the anchor) in flattened page
text, looks only at a bounded window after it, and returns ``Found(value)``
or ``ABSENT``. A page reshape should only ever require changing one
extractor's anchor or pattern.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..games import GameSpec
from ..utils.dates import DATE_PHRASE_PATTERN, US_DATE_PATTERN, normalize_draw_date
from ..utils.money import parse_money
from ..utils.text import pad_number
from .result import ABSENT, ExtractionResult, Found

ANY_DATE_PATTERN = f"{US_DATE_PATTERN.pattern}|{DATE_PHRASE_PATTERN.pattern}"
MONEY_PHRASE_PATTERN = (
    r"\$\s*(?:\d[\d,]*(?:\.\d+)?|\.\d+)(?:\s*(?:thousand|million|billion)\b)?"
)
MULTIPLIER_PATTERN = r"\b(\d{1,2})\s*x\b"


@dataclass(frozen=True)
class Balls:
    main: Tuple[str, ...]
    special: Optional[str] = None


@dataclass(frozen=True)
class AnchoredExtractor:
    """
    Base strategy: an optional anchor regex and a bounded character window
    after it. ``stop`` cuts the window short at the next field's label so a
    missing value never borrows its neighbour's.
    """

    anchor: Optional[str] = None
    window: Optional[int] = 400
    stop: Optional[str] = None

    def window_text(self, text: Optional[str]) -> Optional[str]:
        """Returns the text following the anchor, or None when the anchor is missing."""
        if not text:
            return None
        start = 0
        if self.anchor is not None:
            match = re.search(self.anchor, text, re.IGNORECASE)
            if not match:
                return None
            start = match.end()
        end = len(text) if self.window is None else start + self.window
        segment = text[start:end]
        if self.stop is not None:
            boundary = re.search(self.stop, segment, re.IGNORECASE)
            if boundary:
                segment = segment[: boundary.start()]
        return segment

    def extract(self, text: Optional[str]) -> ExtractionResult:
        raise NotImplementedError


@dataclass(frozen=True)
class DateExtractor(AnchoredExtractor):
    pattern: str = ANY_DATE_PATTERN

    def extract(self, text: Optional[str]) -> ExtractionResult[datetime]:
        segment = self.window_text(text)
        if segment is None:
            return ABSENT
        match = re.search(self.pattern, segment, re.IGNORECASE)
        if not match:
            return ABSENT
        parsed = normalize_draw_date(match.group(0))
        return ABSENT if parsed is None else Found(parsed)


@dataclass(frozen=True)
class MoneyExtractor(AnchoredExtractor):
    window: Optional[int] = 60
    pattern: str = MONEY_PHRASE_PATTERN

    def extract(self, text: Optional[str]) -> ExtractionResult[int]:
        segment = self.window_text(text)
        if segment is None:
            return ABSENT
        match = re.search(self.pattern, segment, re.IGNORECASE)
        if not match:
            return ABSENT
        amount = parse_money(match.group(0))
        return ABSENT if amount is None else Found(amount)


@dataclass(frozen=True)
class MultiplierExtractor(AnchoredExtractor):
    window: Optional[int] = 40
    pattern: str = MULTIPLIER_PATTERN

    def extract(self, text: Optional[str]) -> ExtractionResult[str]:
        segment = self.window_text(text)
        if segment is None:
            return ABSENT
        match = re.search(self.pattern, segment, re.IGNORECASE)
        if not match:
            return ABSENT
        return Found(f"{int(match.group(1))}x")


@dataclass(frozen=True)
class TextExtractor(AnchoredExtractor):
    """Returns the first capture group of ``pattern`` inside the window, whitespace-collapsed."""

    window: Optional[int] = 80
    pattern: str = r"(.+)"

    def extract(self, text: Optional[str]) -> ExtractionResult[str]:
        segment = self.window_text(text)
        if segment is None:
            return ABSENT
        match = re.search(self.pattern, segment, re.IGNORECASE)
        if not match:
            return ABSENT
        value = " ".join(match.group(1).split())
        return Found(value) if value else ABSENT


@dataclass(frozen=True)
class BallsExtractor(AnchoredExtractor):
    """
    Positional number-sequence extraction.

    Date tokens are blanked out of the window first, then every standalone
    integer token (up to the game's widest ball) is taken in document order.
    The first ``main_count`` become the main numbers and, for games with a
    bonus ball, the next one becomes the special. Too few tokens or any value
    outside the game's ranges yields ABSENT: numbers are never truncated,
    padded out or guessed.
    """

    game: Optional[GameSpec] = None
    window: Optional[int] = 200

    def _tokens(self, segment: str) -> list:
        segment = US_DATE_PATTERN.sub(" ", segment)
        segment = DATE_PHRASE_PATTERN.sub(" ", segment)
        token_pattern = (
            rf"(?<![\w$.,/:])(\d{{1,{self.game.max_digits}}})(?![\w,/]|\.\d)"
        )
        return [int(token) for token in re.findall(token_pattern, segment)]

    def extract(self, text: Optional[str]) -> ExtractionResult[Balls]:
        if self.game is None:
            raise ValueError("BallsExtractor requires a game")
        segment = self.window_text(text)
        if segment is None:
            return ABSENT

        game = self.game
        needed = game.main_count + (1 if game.has_special else 0)
        tokens = self._tokens(segment)
        if len(tokens) < needed:
            return ABSENT

        main = tokens[: game.main_count]
        if not all(game.in_main_range(n) for n in main):
            return ABSENT

        special = None
        if game.has_special:
            special_value = tokens[game.main_count]
            if not game.in_special_range(special_value):
                return ABSENT
            special = pad_number(str(special_value), game.pad_width)

        return Found(
            Balls(
                main=tuple(pad_number(str(n), game.pad_width) for n in main),
                special=special,
            )
        )
