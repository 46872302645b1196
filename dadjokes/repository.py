"""
Design (repository.py)
- Purpose: Encapsulate the favourites list behind a tiny API (and a lock), so the UI thread
           can add while a worker thread persists.
- Inputs: Joke objects; the favourites file path.
- Outputs: Snapshots (copies) of the ordered favourites.
- Side effects: load()/persist() read and write the favourites file.
- Thread-safety: All reading/mutating methods take the internal lock; snapshot returns a copy.
"""

import logging
import threading
from pathlib import Path
from typing import List, Set

from .models import Joke
from .storage import load_favourites, save_favourites

logger = logging.getLogger(__name__)


class FavouritesStore:
    """
    Design (FavouritesStore)
    - State:
        _jokes: [Joke] in the order they were favourited (append only)
        _keys: {Joke.key} for content-based membership checks
        _lock: threading.Lock to protect all operations
        _persist_lock: threading.Lock held across snapshot and write, so overlapping
                       persists land in order and the newest snapshot wins
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.Lock()
        self._persist_lock = threading.Lock()
        self._jokes: List[Joke] = []
        self._keys: Set[str] = set()

    # -------- Membership --------

    def add(self, joke: Joke) -> bool:
        """
        Purpose: Append a joke unless one with the same text is already a favourite.
        Inputs: joke (Joke)
        Outputs: True if appended, False if it was already there.
        Thread-safety: Protected by _lock.
        """
        with self._lock:
            if joke.key in self._keys:
                return False
            self._jokes.append(joke)
            self._keys.add(joke.key)
            return True

    def contains(self, joke: Joke) -> bool:
        with self._lock:
            return joke.key in self._keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._jokes)

    def snapshot(self) -> List[Joke]:
        """Copy of the favourites in insertion order, safe to iterate on any thread."""
        with self._lock:
            return list(self._jokes)

    # -------- Persistence --------

    def load(self) -> int:
        """
        Purpose: Replace the in-memory list with the saved favourites.
        Outputs: Number of favourites loaded (duplicates in the file are dropped).
        Side effects: Reads the favourites file.
        """
        loaded = load_favourites(self.path)
        with self._lock:
            self._jokes = []
            self._keys = set()
            for joke in loaded:
                if joke.key not in self._keys:
                    self._jokes.append(joke)
                    self._keys.add(joke.key)
            count = len(self._jokes)
        logger.info("Loaded %d favourite(s) from %s", count, self.path)
        return count

    def persist(self) -> List[Joke]:
        """
        Purpose: Write the full ordered list to the favourites file (full overwrite).
        Outputs: The snapshot that was written.
        Raises: PersistenceError; the in-memory list is left as it was.
        Thread-safety: One write at a time; the snapshot is taken once the write lock is held.
        """
        with self._persist_lock:
            jokes = self.snapshot()
            save_favourites(jokes, self.path)
        return jokes
