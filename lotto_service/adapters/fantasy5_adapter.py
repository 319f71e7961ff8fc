# lotto_service/adapters/fantasy5_adapter.py

from ..extraction import BallsExtractor, DateExtractor, MoneyExtractor
from ..games import GA_FANTASY5
from .base import BallGameAdapter
from .constants import GA_DRAW_DATE_PATTERN, GA_LAST_DRAW_ANCHOR, GA_NUMBERS_ANCHOR


class Fantasy5Adapter(BallGameAdapter):
    """Adapter for the Georgia Lottery Fantasy 5 page (five balls, no bonus ball)."""

    GAME = GA_FANTASY5

    DRAW_DATE = DateExtractor(anchor=GA_LAST_DRAW_ANCHOR, window=40, pattern=GA_DRAW_DATE_PATTERN)
    BALLS = BallsExtractor(game=GA_FANTASY5, anchor=GA_NUMBERS_ANCHOR, window=120)
    JACKPOT = MoneyExtractor(anchor=r"\bJACKPOT\b", window=40, stop=GA_LAST_DRAW_ANCHOR)
