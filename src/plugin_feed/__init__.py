"""Aggregated, de-duplicated plugin feed built from third-party repositories."""

__version__ = "0.1.0"
