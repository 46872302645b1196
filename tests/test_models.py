import pytest

from dadjokes.errors import DecodeError
from dadjokes.models import SAMPLE_JOKE, Joke


def test_from_payload_keeps_every_field():
    joke = Joke.from_payload({"id": "R7UfaahVfFd", "joke": "My dog used to chase people on a bike a lot.", "status": 200})

    assert joke == Joke(id="R7UfaahVfFd", text="My dog used to chase people on a bike a lot.", status=200)
    assert joke.to_payload() == {"id": "R7UfaahVfFd", "joke": "My dog used to chase people on a bike a lot.", "status": 200}


def test_from_payload_ignores_extra_fields():
    joke = Joke.from_payload({"id": "x", "joke": "Hi", "status": 200, "permalink": "https://example"})
    assert joke.text == "Hi"


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "a joke",
        {"id": "x", "joke": "Hi"},
        {"joke": "Hi", "status": 200},
        {"id": 5, "joke": "Hi", "status": 200},
        {"id": "x", "joke": "   ", "status": 200},
        {"id": "x", "joke": None, "status": 200},
        {"id": "x", "joke": "Hi", "status": "200"},
        {"id": "x", "joke": "Hi", "status": True},
    ],
)
def test_from_payload_rejects_bad_shapes(payload):
    with pytest.raises(DecodeError):
        Joke.from_payload(payload)


def test_key_is_the_stripped_text():
    assert Joke(id="a", text=" Same joke ").key == Joke(id="b", text="Same joke").key


def test_empty_placeholder():
    assert Joke.empty().is_empty
    assert not SAMPLE_JOKE.is_empty


def test_jokes_are_immutable():
    with pytest.raises(AttributeError):
        SAMPLE_JOKE.text = "changed"
