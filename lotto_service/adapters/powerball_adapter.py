# lotto_service/adapters/powerball_adapter.py

from ..extraction import BallsExtractor, DateExtractor, MoneyExtractor, MultiplierExtractor
from ..games import POWERBALL
from ..utils.dates import DATE_PHRASE_PATTERN
from .base import BallGameAdapter


class PowerballAdapter(BallGameAdapter):
    """
    Adapter for the official powerball.com draw-result page (Georgia view).

    The page shows the draw date as "Sat, Jan 31, 2026" right under the
    "Winning Numbers" heading, then the five white balls and the Powerball,
    the Power Play multiplier and the jackpot block.
    """

    GAME = POWERBALL

    DRAW_DATE = DateExtractor(
        anchor=r"Winning Numbers", window=40, pattern=DATE_PHRASE_PATTERN.pattern
    )
    BALLS = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers", window=200)
    MULTIPLIER = MultiplierExtractor(anchor=r"Power Play")
    JACKPOT = MoneyExtractor(anchor=r"Estimated Jackpot:", stop=r"Cash Value")
    CASH_VALUE = MoneyExtractor(anchor=r"Cash Value:")
