# lotto_service/utils/dates.py
"""
Draw-date normalization.

Operator pages publish civil dates without a zone. Every date is read as a
calendar day in US Eastern time and converted to the absolute instant of
local midnight, expressed in UTC.
"""

import re
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

EASTERN = ZoneInfo("America/New_York")

US_DATE_PATTERN = re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b")
DATE_PHRASE_PATTERN = re.compile(
    r"\b[A-Za-z]{3,9}\.?,\s*[A-Za-z]{3,9}\.?\s+\d{1,2},\s*\d{4}\b"
)

_PHRASE_FORMATS = (
    "%a, %b %d, %Y",
    "%A, %B %d, %Y",
    "%a, %B %d, %Y",
    "%A, %b %d, %Y",
)


def _eastern_midnight(year: int, month: int, day: int) -> Optional[datetime]:
    try:
        local = datetime(year, month, day, tzinfo=EASTERN)
    except ValueError:
        return None
    return local.astimezone(timezone.utc)


def parse_us_date(text: Optional[str]) -> Optional[datetime]:
    """'01/31/2026' -> 2026-01-31 00:00 America/New_York, as an aware UTC datetime."""
    if not text:
        return None
    match = US_DATE_PATTERN.search(text)
    if not match:
        return None
    month, day, year = (int(part) for part in match.groups())
    return _eastern_midnight(year, month, day)


def parse_draw_date_phrase(text: Optional[str]) -> Optional[datetime]:
    """'Sat, Jan 31, 2026' (or 'Saturday, January 31, 2026') -> Eastern midnight in UTC."""
    if not text:
        return None
    match = DATE_PHRASE_PATTERN.search(text)
    if not match:
        return None
    phrase = " ".join(match.group(0).replace(".", "").split())
    for fmt in _PHRASE_FORMATS:
        try:
            parsed = datetime.strptime(phrase, fmt)
        except ValueError:
            continue
        return _eastern_midnight(parsed.year, parsed.month, parsed.day)
    return None


def normalize_draw_date(text: Optional[str]) -> Optional[datetime]:
    """Tries the MM/DD/YYYY shape first, then the weekday/month/day/year phrase."""
    return parse_us_date(text) or parse_draw_date_phrase(text)
