# lotto_service/adapters/cash3_adapter.py

from ..games import GA_CASH3
from .digit_game_adapter import DigitGameAdapter


class Cash3Adapter(DigitGameAdapter):
    """Adapter for Georgia Lottery Cash 3 (three digits, midday/evening/night)."""

    GAME = GA_CASH3
