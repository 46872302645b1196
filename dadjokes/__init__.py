"""Fetch random dad jokes, keep the favourites, save them when the app is backgrounded."""

__version__ = "1.0.0"
