# lotto_service/__init__.py
"""Scrapes lottery operator pages into normalized draw records."""

__version__ = "1.0.0"
