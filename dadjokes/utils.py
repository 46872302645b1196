"""
Design (utils.py)
- Purpose: Reusable display helpers: heart colour, list labels, log-panel trimming.
- Inputs: Various helper parameters (flags, jokes, line counts).
- Outputs: Helper results (strings, ints).
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from .config import FAVOURITE_LABEL_MAX, HEART_OFF_COLOUR, HEART_ON_COLOUR
from .models import Joke


def heart_colour(favourited: bool) -> str:
    return HEART_ON_COLOUR if favourited else HEART_OFF_COLOUR


def favourite_label(joke: Joke, max_len: int = FAVOURITE_LABEL_MAX) -> str:
    """
    Purpose: One-line text for the favourites list.
    Inputs: joke, max_len (>= 2).
    Outputs: Joke text with whitespace runs collapsed, cut with '…' when longer than max_len.
    """
    text = " ".join(joke.text.split())
    if len(text) <= max_len:
        return text
    return text[: max_len - 1].rstrip() + "…"


def joke_display_text(joke: Joke, fetching: bool) -> str:
    """Text for the big joke label; a hint until the first joke arrives."""
    if not joke.is_empty:
        return joke.text
    return "Fetching a joke…" if fetching else "No joke yet. Press “Another one!”"


def lines_to_trim(total_lines: int, max_lines: int) -> int:
    """How many of the oldest lines to drop so the Logs panel keeps at most max_lines."""
    return max(0, total_lines - max_lines)
