"""
App controller: the state behind the window.

Design:
- Owns an explicit AppState (current joke, favourites, favourite flag, fetching, phase).
- The view subscribes and re-renders from each new state; it never mutates state itself.
- Fetches and favourites writes run on worker threads so the UI stays responsive;
  fetch results are posted back through dispatch() and applied on the UI thread.
- Overlapping refreshes are not coordinated: whichever completion is processed last
  is the joke on screen.
- Methods:
    start(): load saved favourites and fetch the first joke
    refresh(): fetch another joke
    favourite_current(): add the joke on screen to the favourites
    on_phase_change(): host lifecycle hook; BACKGROUND saves the favourites
    shutdown(): save, wait a bounded time for the write, release the HTTP session
- Thread-safety: state changes happen on the UI thread only; FavouritesStore does its own
  locking for the persist worker.
"""

import functools
import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from .client import JokeClient
from .config import PERSIST_TIMEOUT_SEC
from .errors import JokeAppError, PersistenceError
from .models import Joke
from .repository import FavouritesStore
from .storage import encode_favourites

logger = logging.getLogger(__name__)


class Phase(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BACKGROUND = "background"


@dataclass(frozen=True)
class AppState:
    current_joke: Joke
    favourites: Tuple[Joke, ...] = ()
    is_current_favourited: bool = False
    fetching: bool = False
    phase: Phase = Phase.ACTIVE
    last_error: Optional[str] = None


def start_daemon_thread(target: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


class AppController:
    def __init__(
        self,
        client: JokeClient,
        store: FavouritesStore,
        dispatch: Callable[[Callable[[], None]], Any],
        run_in_background: Callable[[Callable[[], None]], Any] = start_daemon_thread,
    ):
        self.client = client
        self.store = store
        self.dispatch = dispatch
        self.run_in_background = run_in_background
        self._state = AppState(current_joke=Joke.empty(), favourites=tuple(store.snapshot()))
        self._subscribers: List[Callable[[AppState], None]] = []
        self._pending_fetches = 0
        self._persist_job: Any = None

    # ---------- State & subscriptions ----------

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, callback: Callable[[AppState], None]) -> Callable[[], None]:
        """
        Purpose: Register a listener called with every new AppState.
        Outputs: A function that removes the listener again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _update(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for callback in list(self._subscribers):
            callback(self._state)

    # ---------- User & host events ----------

    def start(self) -> None:
        """Load saved favourites before the first fetch so the flag is right from the start."""
        self.store.load()
        self._update(favourites=tuple(self.store.snapshot()))
        self.refresh()

    def refresh(self) -> None:
        self._pending_fetches += 1
        self._update(fetching=True)
        self.run_in_background(self._fetch)

    def favourite_current(self) -> bool:
        """
        Purpose: Add the joke on screen to the favourites.
        Outputs: True if a new favourite was added.
        Side effects: Sets is_current_favourited; repeated taps are no-ops.
        """
        joke = self._state.current_joke
        if joke.is_empty or self._state.is_current_favourited:
            return False
        added = self.store.add(joke)
        if added:
            logger.info("Added favourite %s (%d total)", joke.id or "<no id>", len(self.store))
        self._update(is_current_favourited=True, favourites=tuple(self.store.snapshot()))
        return added

    def on_phase_change(self, phase: Phase) -> None:
        if phase is self._state.phase:
            return
        logger.info("App is now %s", phase.value)
        self._update(phase=phase)
        if phase is Phase.BACKGROUND:
            self.persist_in_background()

    def shutdown(self, timeout: float = PERSIST_TIMEOUT_SEC) -> None:
        if self._state.phase is not Phase.BACKGROUND:
            self.on_phase_change(Phase.BACKGROUND)
        if not self.wait_for_persist(timeout):
            logger.warning("Favourites write still running after %.1fs; exiting anyway", timeout)
        self.client.close()

    # ---------- Fetching (worker thread -> UI thread) ----------

    def _fetch(self) -> None:
        try:
            joke = self.client.fetch_random_joke()
        except JokeAppError as exc:
            self.dispatch(functools.partial(self._on_fetch_failed, exc))
            return
        except Exception as exc:
            logger.exception("Unexpected error while fetching a joke")
            self.dispatch(functools.partial(self._on_fetch_failed, exc))
            return
        self.dispatch(functools.partial(self._on_fetched, joke))

    def _on_fetched(self, joke: Joke) -> None:
        self._pending_fetches = max(0, self._pending_fetches - 1)
        self._update(
            current_joke=joke,
            is_current_favourited=self.store.contains(joke),
            fetching=self._pending_fetches > 0,
            last_error=None,
        )

    def _on_fetch_failed(self, error: Exception) -> None:
        self._pending_fetches = max(0, self._pending_fetches - 1)
        logger.error("Could not retrieve / decode joke from endpoint: %s", error)
        self._update(fetching=self._pending_fetches > 0, last_error=str(error))

    # ---------- Persistence ----------

    def persist_in_background(self) -> Any:
        """Start writing the favourites and return without waiting for the write."""
        self._persist_job = self.run_in_background(self._persist)
        return self._persist_job

    def wait_for_persist(self, timeout: float = PERSIST_TIMEOUT_SEC) -> bool:
        """
        Purpose: Wait up to timeout seconds for the last persist started.
        Outputs: True if no write is still running.
        """
        job = self._persist_job
        if not isinstance(job, threading.Thread):
            return True
        job.join(timeout)
        return not job.is_alive()

    def _persist(self) -> None:
        try:
            jokes = self.store.persist()
        except PersistenceError as exc:
            logger.error("Unable to write list of favourites: %s", exc)
            return
        logger.info("Saved %d favourite(s) to %s", len(jokes), self.store.path)
        logger.debug("Favourites file contents:\n%s", encode_favourites(jokes))
