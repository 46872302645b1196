"""
Design (storage.py)
- Purpose: Load and save the favourites list to/from disk (JSON).
- Inputs: Path (from get_favourites_path()), list of Joke for save.
- Outputs: list[Joke] on load; None on save.
- Side effects: Reads/writes file. On load failure returns empty list; on save failure
                raises PersistenceError (the caller decides to log and carry on).
- Thread-safety: Stateless; FavouritesStore serialises access to a given path.
"""

import json
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Iterable, List

from .config import APP_DIR_NAME, FAVOURITES_FILENAME, HOME_ENV_VAR
from .errors import DecodeError, PersistenceError
from .models import Joke

logger = logging.getLogger(__name__)


def get_favourites_path() -> Path:
    """
    Resolve path for favourites.json. Prefer an explicit DADJOKES_HOME, then the
    per-user app data dir so it survives reinstalls. Fallback to a dot dir in home.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser() / FAVOURITES_FILENAME
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_DIR_NAME / FAVOURITES_FILENAME
    return Path.home() / ".dadjokes" / FAVOURITES_FILENAME


def encode_favourites(jokes: Iterable[Joke]) -> str:
    """Pretty-printed JSON array of {"id", "joke", "status"} objects."""
    return json.dumps([joke.to_payload() for joke in jokes], indent=2, ensure_ascii=False)


def load_favourites(path: Path) -> List[Joke]:
    """
    Load favourites from JSON file. Returns empty list on missing file or parse error;
    entries that are not valid jokes are skipped.
    """
    if not path.exists():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:  # bad JSON or bytes that are not UTF-8
        logger.warning("Could not read favourites from %s: %s", path, exc)
        return []
    if not isinstance(data, list):
        logger.warning("Favourites file %s does not hold a JSON array; ignoring it", path)
        return []

    jokes: List[Joke] = []
    for index, item in enumerate(data):
        try:
            jokes.append(Joke.from_payload(item))
        except DecodeError as exc:
            logger.warning("Skipping favourite #%d in %s: %s", index, path, exc)
    return jokes


def save_favourites(jokes: Iterable[Joke], path: Path) -> None:
    """
    Save favourites to JSON file, replacing any previous file. The data goes to a temp
    file in the same directory first, so a failed write leaves the old file intact.
    Raises PersistenceError on encoding or filesystem failure.
    """
    try:
        data = encode_favourites(jokes).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise PersistenceError(f"could not encode favourites: {exc}") from exc

    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".favourites-", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"could not write favourites to {path}: {exc}") from exc
