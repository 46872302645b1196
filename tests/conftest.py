import pytest
import requests

from dadjokes.models import SAMPLE_JOKE, Joke
from dadjokes.repository import FavouritesStore


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Stands in for requests.Session; replays queued responses or exceptions."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class StubClient:
    """JokeClient double: each fetch returns (or raises) the next queued outcome."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.fetches = 0
        self.closed = False

    def fetch_random_joke(self):
        self.fetches += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class QueueDispatcher:
    """Collects callbacks like a UI event queue; the test decides when and in which order they run."""

    def __init__(self):
        self.pending = []

    def __call__(self, fn):
        self.pending.append(fn)

    def run_all(self):
        while self.pending:
            self.pending.pop(0)()

    def run_in_reverse(self):
        pending, self.pending = self.pending, []
        for fn in reversed(pending):
            fn()


def run_now(fn):
    fn()


@pytest.fixture
def favourites_path(tmp_path):
    return tmp_path / "data" / "favourites.json"


@pytest.fixture
def store(favourites_path):
    return FavouritesStore(favourites_path)


@pytest.fixture
def dispatcher():
    return QueueDispatcher()


@pytest.fixture
def make_controller(store, dispatcher):
    from dadjokes.controller import AppController

    def _make(*outcomes):
        client = StubClient(*outcomes)
        controller = AppController(client, store, dispatch=dispatcher, run_in_background=run_now)
        return controller, client

    return _make


@pytest.fixture
def sample_joke():
    return SAMPLE_JOKE


def joke(text, joke_id=None):
    return Joke(id=joke_id or "id-" + text.lower().replace(" ", "-")[:12], text=text, status=200)
