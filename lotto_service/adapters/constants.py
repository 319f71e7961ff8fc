# lotto_service/adapters/constants.py
"""Shared constants for all adapters: upstream URLs, hosts and request headers."""

from typing import Final

LOTTO_HUB_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (compatible; ga-lotto-hub/1.0; +https://workers.dev)"
)

# --- Upstream pages ---
POWERBALL_URL: Final[str] = "https://www.powerball.com/draw-result?gc=powerbal&oc=ga"
MEGA_MILLIONS_URL: Final[str] = "https://www.megamillions.com/winning-numbers.aspx"
MEGA_MILLIONS_NEXT_DRAW_URL: Final[str] = (
    "https://www.megamillions.com/winning-numbers/check-your-numbers.aspx"
)
GA_CASH4LIFE_URL: Final[str] = (
    "https://gas-origin2.galottery.com/en-us/games/draw-games/cash-for-life.html"
)
GA_FANTASY5_URL: Final[str] = (
    "https://gas-origin2.galottery.com/en-us/games/draw-games/fantasy-five.html"
)
GA_CASH3_URL: Final[str] = (
    "https://gas-origin2.galottery.com/en-us/games/draw-games/cash-three.html"
)
GA_CASH4_URL: Final[str] = (
    "https://gas-origin2.galottery.com/en-us/games/draw-games/cash-four.html"
)

# --- Provenance labels reported in each record ---
POWERBALL_SOURCE: Final[str] = "powerball.com"
MEGA_MILLIONS_SOURCE: Final[str] = "megamillions.com"
GA_LOTTERY_SOURCE: Final[str] = "gas-origin2.galottery.com"

# --- Anchors shared by the Georgia Lottery game pages ---
GA_LAST_DRAW_ANCHOR: Final[str] = r"LAST DRAW RESULTS:"
GA_SECTION_END: Final[str] = r"About|How To Play|Odds"
GA_SESSION_LABELS: Final[tuple] = ("Midday", "Evening", "Night")
GA_DRAW_DATE_PATTERN: Final[str] = r"\(\s*\d{1,2}/\d{1,2}/\d{4}\s*\)"
GA_NUMBERS_ANCHOR: Final[str] = GA_LAST_DRAW_ANCHOR + r"\s*\([^)]*\)\s*\.?"
