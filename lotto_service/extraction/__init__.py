# lotto_service/extraction/__init__.py
"""Field extraction strategies for scraped operator pages."""

from .blocks import extract_labeled_blocks
from .extractors import (
    AnchoredExtractor,
    Balls,
    BallsExtractor,
    DateExtractor,
    MoneyExtractor,
    MultiplierExtractor,
    TextExtractor,
)
from .result import ABSENT, ExtractionResult, Found

__all__ = [
    "ABSENT",
    "AnchoredExtractor",
    "Balls",
    "BallsExtractor",
    "DateExtractor",
    "ExtractionResult",
    "Found",
    "MoneyExtractor",
    "MultiplierExtractor",
    "TextExtractor",
    "extract_labeled_blocks",
]
