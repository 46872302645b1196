"""
Design (errors.py)
- Purpose: Error kinds raised by the client and storage layers.
- Handling: AppController catches them, logs, and leaves its state unchanged.
"""


class JokeAppError(Exception):
    """Base class for every recoverable error in the app."""


class NetworkError(JokeAppError):
    """The HTTP call could not complete (timeout, DNS, refused, error status)."""


class DecodeError(JokeAppError):
    """The response body is not JSON or lacks the id/joke/status fields."""


class PersistenceError(JokeAppError):
    """The favourites file could not be encoded or written."""
