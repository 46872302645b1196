import json

import pytest

from dadjokes.errors import PersistenceError
from dadjokes.models import SAMPLE_JOKE, Joke
from dadjokes.storage import get_favourites_path, load_favourites, save_favourites
from tests.conftest import joke


def test_save_writes_pretty_json_array_in_order(favourites_path):
    save_favourites([joke("A"), joke("B")], favourites_path)

    text = favourites_path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert [item["joke"] for item in json.loads(text)] == ["A", "B"]


def test_save_overwrites_previous_file(favourites_path):
    save_favourites([joke("A"), joke("B")], favourites_path)
    save_favourites([SAMPLE_JOKE], favourites_path)

    assert json.loads(favourites_path.read_text(encoding="utf-8")) == [SAMPLE_JOKE.to_payload()]
    assert [p.name for p in favourites_path.parent.iterdir()] == ["favourites.json"]


def test_save_then_load_round_trip(favourites_path):
    jokes = [joke("A"), joke("B"), SAMPLE_JOKE]
    save_favourites(jokes, favourites_path)

    assert load_favourites(favourites_path) == jokes


def test_save_failure_raises_persistence_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")

    with pytest.raises(PersistenceError):
        save_favourites([SAMPLE_JOKE], blocker / "favourites.json")


def test_save_unencodable_text_raises_persistence_error(favourites_path):
    save_favourites([SAMPLE_JOKE], favourites_path)
    lone_surrogate = Joke.from_payload(json.loads('{"id": "x", "joke": "bad \\ud83d joke", "status": 200}'))

    with pytest.raises(PersistenceError):
        save_favourites([lone_surrogate], favourites_path)

    assert [p.name for p in favourites_path.parent.iterdir()] == ["favourites.json"]
    assert load_favourites(favourites_path) == [SAMPLE_JOKE]


def test_load_missing_file_is_empty(favourites_path):
    assert load_favourites(favourites_path) == []


def test_load_corrupt_file_is_empty(favourites_path):
    favourites_path.parent.mkdir(parents=True)
    favourites_path.write_text("{not json", encoding="utf-8")

    assert load_favourites(favourites_path) == []


def test_load_file_that_is_not_utf8_is_empty(favourites_path):
    favourites_path.parent.mkdir(parents=True)
    favourites_path.write_bytes(b"\xff\xfe not utf8")

    assert load_favourites(favourites_path) == []


def test_load_non_array_is_empty(favourites_path):
    favourites_path.parent.mkdir(parents=True)
    favourites_path.write_text('{"id": "x"}', encoding="utf-8")

    assert load_favourites(favourites_path) == []


def test_load_skips_bad_entries(favourites_path):
    favourites_path.parent.mkdir(parents=True)
    favourites_path.write_text(json.dumps([{"id": "x"}, SAMPLE_JOKE.to_payload(), 3]), encoding="utf-8")

    assert load_favourites(favourites_path) == [SAMPLE_JOKE]


def test_path_honours_home_override(monkeypatch, tmp_path):
    monkeypatch.setenv("DADJOKES_HOME", str(tmp_path))

    assert get_favourites_path() == tmp_path / "favourites.json"
