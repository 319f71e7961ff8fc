# lotto_service/utils/money.py
"""Money parsing for jackpot and cash-value strings."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

_MONEY_PATTERN = re.compile(
    r"\$?\s*(\d+(?:\.\d+)?|\.\d+)\s*(thousand|million|billion)?", re.IGNORECASE
)

_MAGNITUDES = {
    "thousand": Decimal(10) ** 3,
    "million": Decimal(10) ** 6,
    "billion": Decimal(10) ** 9,
}


def parse_money(text: Optional[str]) -> Optional[int]:
    """
    Converts a free-text amount into whole currency units.

    Supports:
    - Plain amounts: "$1,200,000", "125000"
    - Magnitude suffixes: "$26.5 Million", "$3 Billion", "$750 thousand"

    Returns:
        The amount as a non-negative int, or None if nothing parseable was
        found. None is distinct from 0, which is a valid amount.
    """
    if not text:
        return None

    if not isinstance(text, str):
        text = str(text)

    match = _MONEY_PATTERN.search(text.replace(",", ""))
    if not match:
        return None

    try:
        amount = Decimal(match.group(1))
    except InvalidOperation:
        return None

    suffix = (match.group(2) or "").lower()
    amount *= _MAGNITUDES.get(suffix, Decimal(1))
    return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))
