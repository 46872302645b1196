"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Joke).
- Inputs: Field values, or the JSON object returned by the joke endpoint.
- Outputs: Dataclass instances; plain dicts for JSON encoding.
- Side effects: None.
- Thread-safety: Joke is frozen, so instances can be shared between threads.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .errors import DecodeError


@dataclass(frozen=True)
class Joke:
    """
    Design (Joke)
    - Purpose: One joke as served by icanhazdadjoke.
    - Fields:
        id: opaque identifier from the endpoint.
        text: the joke body (JSON field "joke").
        status: status echoed in the payload, not the transport status.
    - Identity: two jokes are the same favourite when their text matches (see key).
    """
    id: str
    text: str
    status: int = 200

    @property
    def key(self) -> str:
        return self.text.strip()

    @property
    def is_empty(self) -> bool:
        return not self.key

    @classmethod
    def empty(cls) -> "Joke":
        """Placeholder shown until the first fetch completes."""
        return cls(id="", text="", status=200)

    @classmethod
    def from_payload(cls, payload: Any) -> "Joke":
        """
        Purpose: Strictly decode one {"id", "joke", "status"} object.
        Outputs: Joke
        Raises: DecodeError when the shape or a field type is wrong.
        """
        if not isinstance(payload, dict):
            raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")
        missing = [name for name in ("id", "joke", "status") if name not in payload]
        if missing:
            raise DecodeError(f"missing field(s): {', '.join(missing)}")

        joke_id, text, status = payload["id"], payload["joke"], payload["status"]
        if not isinstance(joke_id, str):
            raise DecodeError("field 'id' must be a string")
        if not isinstance(text, str) or not text.strip():
            raise DecodeError("field 'joke' must be a non-empty string")
        # bool is an int subclass; true/false is not a status
        if isinstance(status, bool) or not isinstance(status, int):
            raise DecodeError("field 'status' must be an integer")
        return cls(id=joke_id, text=text, status=status)

    def to_payload(self) -> Dict[str, Any]:
        return {"id": self.id, "joke": self.text, "status": self.status}


# Known joke, handy for previews and tests
SAMPLE_JOKE = Joke(
    id="eNuHJBQCdFd",
    text="How do you organize a space party? You planet.",
    status=200,
)
