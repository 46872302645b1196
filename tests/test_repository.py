import json
import threading

from dadjokes.models import Joke
from dadjokes.repository import FavouritesStore
from tests.conftest import joke


def test_add_keeps_insertion_order(store):
    assert store.add(joke("A"))
    assert store.add(joke("B"))

    assert [j.text for j in store.snapshot()] == ["A", "B"]
    assert len(store) == 2


def test_add_skips_same_text_even_with_new_id(store):
    store.add(Joke(id="1", text="Same"))

    assert store.add(Joke(id="2", text="Same")) is False
    assert len(store) == 1
    assert store.contains(Joke(id="3", text="Same"))


def test_snapshot_is_a_copy(store):
    store.add(joke("A"))
    snap = store.snapshot()
    snap.append(joke("B"))

    assert len(store) == 1


def test_persist_then_load_reproduces_the_list(store, favourites_path):
    store.add(joke("A"))
    store.add(joke("B"))
    store.persist()

    data = json.loads(favourites_path.read_text(encoding="utf-8"))
    assert [item["joke"] for item in data] == ["A", "B"]

    reloaded = FavouritesStore(favourites_path)
    assert reloaded.load() == 2
    assert reloaded.snapshot() == store.snapshot()


def test_load_drops_duplicate_entries(favourites_path):
    favourites_path.parent.mkdir(parents=True)
    favourites_path.write_text(
        json.dumps([joke("A").to_payload(), Joke(id="other", text="A").to_payload()]), encoding="utf-8"
    )
    store = FavouritesStore(favourites_path)

    assert store.load() == 1


def test_load_replaces_contents(store, favourites_path):
    store.add(joke("A"))
    store.persist()
    store.add(joke("B"))

    store.load()
    assert [j.text for j in store.snapshot()] == ["A"]


def test_overlapping_persists_write_one_at_a_time(store, monkeypatch):
    written = []
    first_started = threading.Event()
    release_first = threading.Event()

    def slow_save(jokes, path):
        if not first_started.is_set():
            first_started.set()
            release_first.wait(5)
        written.append([j.text for j in jokes])

    monkeypatch.setattr("dadjokes.repository.save_favourites", slow_save)
    store.add(joke("A"))
    first = threading.Thread(target=store.persist)
    first.start()
    assert first_started.wait(5)

    store.add(joke("B"))
    second = threading.Thread(target=store.persist)
    second.start()
    second.join(0.2)
    assert second.is_alive()

    release_first.set()
    first.join(5)
    second.join(5)
    assert written == [["A"], ["A", "B"]]
