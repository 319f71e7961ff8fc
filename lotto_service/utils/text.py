# lotto_service/utils/text.py
# Centralized text normalization utilities
from typing import Optional

from bs4 import BeautifulSoup

_NON_CONTENT_TAGS = ("script", "style", "noscript", "template", "svg")


def clean_text(text: Optional[str]) -> Optional[str]:
    """Strips leading/trailing whitespace and collapses internal whitespace."""
    if not text:
        return None
    return " ".join(text.strip().split())


def page_text(html: Optional[str]) -> str:
    """
    Flattens an HTML page into a single whitespace-normalized line of text.

    Every tag boundary becomes a space, so labels and values that live in
    sibling elements ("Estimated Jackpot:" / "$59 Million") end up adjacent
    in the output. Scripts, styles and other non-visible content are dropped.
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()
    return clean_text(soup.get_text(" ")) or ""


def pad_number(token: str, width: int) -> str:
    """'7' -> '07' for width 2; strips leading zeros first so '007' -> '07'."""
    return str(int(token)).zfill(width)
