"""
Design (client.py)
- Purpose: Fetch one random joke from icanhazdadjoke over HTTP.
- Inputs: None per call (endpoint, headers and timeout come from config).
- Outputs: Joke on success.
- Side effects: One outbound GET per call.
- Thread-safety: Blocking; AppController runs it on a worker thread. A requests.Session
                 is shared, which is fine for the one-request-at-a-time use here and for
                 the occasional overlapping refresh.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .config import JOKE_API_URL, REQUEST_HEADERS, REQUEST_TIMEOUT_SEC
from .errors import DecodeError, NetworkError
from .models import Joke

logger = logging.getLogger(__name__)


class JokeClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url: str = JOKE_API_URL,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = REQUEST_TIMEOUT_SEC,
    ):
        self.url = url
        self.headers = dict(REQUEST_HEADERS if headers is None else headers)
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def fetch_random_joke(self) -> Joke:
        """
        Purpose: GET the endpoint and decode the body into a Joke.
        Raises:
            NetworkError: transport failure or HTTP error status.
            DecodeError: body is not JSON or has the wrong shape.
        """
        try:
            response = self._session.get(self.url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"could not reach {self.url}: {exc}") from exc

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise DecodeError(f"response from {self.url} is not valid JSON") from exc

        joke = Joke.from_payload(payload)
        logger.debug("Fetched joke %s", joke.id)
        return joke

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "JokeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
