# lotto_service/adapters/cash4_adapter.py

from ..games import GA_CASH4
from .digit_game_adapter import DigitGameAdapter


class Cash4Adapter(DigitGameAdapter):
    """Adapter for Georgia Lottery Cash 4 (four digits, midday/evening/night)."""

    GAME = GA_CASH4
