# lotto_service/adapters/cash4life_adapter.py

from ..extraction import BallsExtractor, DateExtractor
from ..games import CASH4LIFE
from .base import BallGameAdapter
from .constants import GA_DRAW_DATE_PATTERN, GA_LAST_DRAW_ANCHOR, GA_NUMBERS_ANCHOR


class Cash4LifeAdapter(BallGameAdapter):
    """
    Adapter for the Georgia Lottery Cash4Life page.

    Cash4Life pays a fixed top prize, so jackpot and cashValue stay null.
    """

    GAME = CASH4LIFE

    DRAW_DATE = DateExtractor(anchor=GA_LAST_DRAW_ANCHOR, window=40, pattern=GA_DRAW_DATE_PATTERN)
    BALLS = BallsExtractor(game=CASH4LIFE, anchor=GA_NUMBERS_ANCHOR, window=120)
