"""Errors propagated to callers."""


class FeedLoadError(Exception):
    """The primary plugin feed could not be loaded."""
