# lotto_service/games.py
"""Per-game constants: arity, ball ranges, request paths and upstream pages."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .adapters.constants import (
    GA_CASH3_URL,
    GA_CASH4_URL,
    GA_CASH4LIFE_URL,
    GA_FANTASY5_URL,
    GA_LOTTERY_SOURCE,
    GA_SESSION_LABELS,
    MEGA_MILLIONS_SOURCE,
    MEGA_MILLIONS_URL,
    POWERBALL_SOURCE,
    POWERBALL_URL,
)


@dataclass(frozen=True)
class GameSpec:
    key: str
    label: str
    path: str
    url: str
    source: str
    main_count: int
    main_min: int
    main_max: int
    special_min: Optional[int] = None
    special_max: Optional[int] = None
    pad_width: int = 2
    sessions: Tuple[str, ...] = ()

    @property
    def has_special(self) -> bool:
        return self.special_max is not None

    @property
    def max_digits(self) -> int:
        """Widest token a ball of this game can have on the page."""
        upper = max(self.main_max, self.special_max or 0)
        return len(str(upper))

    def in_main_range(self, value: int) -> bool:
        return self.main_min <= value <= self.main_max

    def in_special_range(self, value: int) -> bool:
        return self.has_special and self.special_min <= value <= self.special_max


POWERBALL = GameSpec(
    key="pb",
    label="Powerball",
    path="/api/pb",
    url=POWERBALL_URL,
    source=POWERBALL_SOURCE,
    main_count=5,
    main_min=1,
    main_max=69,
    special_min=1,
    special_max=26,
)

MEGA_MILLIONS = GameSpec(
    key="mm",
    label="Mega Millions",
    path="/api/mm",
    url=MEGA_MILLIONS_URL,
    source=MEGA_MILLIONS_SOURCE,
    main_count=5,
    main_min=1,
    main_max=70,
    special_min=1,
    special_max=25,
)

CASH4LIFE = GameSpec(
    key="cash4life",
    label="Cash4Life (GA)",
    path="/api/cash4life",
    url=GA_CASH4LIFE_URL,
    source=GA_LOTTERY_SOURCE,
    main_count=5,
    main_min=1,
    main_max=60,
    special_min=1,
    special_max=4,
)

GA_FANTASY5 = GameSpec(
    key="ga_fantasy5",
    label="GA Fantasy 5",
    path="/api/ga/fantasy5",
    url=GA_FANTASY5_URL,
    source=GA_LOTTERY_SOURCE,
    main_count=5,
    main_min=1,
    main_max=42,
)

GA_CASH3 = GameSpec(
    key="ga_cash3",
    label="GA Cash 3",
    path="/api/ga/cash3",
    url=GA_CASH3_URL,
    source=GA_LOTTERY_SOURCE,
    main_count=3,
    main_min=0,
    main_max=9,
    pad_width=1,
    sessions=GA_SESSION_LABELS,
)

GA_CASH4 = GameSpec(
    key="ga_cash4",
    label="GA Cash 4",
    path="/api/ga/cash4",
    url=GA_CASH4_URL,
    source=GA_LOTTERY_SOURCE,
    main_count=4,
    main_min=0,
    main_max=9,
    pad_width=1,
    sessions=GA_SESSION_LABELS,
)

ALL_GAMES: Tuple[GameSpec, ...] = (
    POWERBALL,
    MEGA_MILLIONS,
    CASH4LIFE,
    GA_FANTASY5,
    GA_CASH3,
    GA_CASH4,
)

GAMES_BY_KEY: Dict[str, GameSpec] = {game.key: game for game in ALL_GAMES}

# Session-qualified labels ("GA Cash 3 Midday") resolve to their parent game.
GAMES_BY_LABEL: Dict[str, GameSpec] = {game.label: game for game in ALL_GAMES}
GAMES_BY_LABEL.update(
    {f"{game.label} {session}": game for game in ALL_GAMES for session in game.sessions}
)
