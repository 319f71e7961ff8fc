# lotto_service/adapters/__init__.py
"""
Per-game adapters. Import adapter classes from their modules directly;
this package also hosts the shared constants that config and games use.
"""
