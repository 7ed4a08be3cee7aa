"""Joke store: unit tests for the in-memory service.

Tests cover:
    - reads: random, get, filter_by_type (400 vs 404 distinction)
    - create assigns len + 1 and never appends on a bad key
    - replace overwrites, patch merges non-empty values only
    - lookup happens before the key check, the key check before mutation
    - delete and delete_all
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from jokes_api.app.core.errors import (
    ForbiddenError,
    JokeNotFound,
    MissingJokeType,
    NoJokesForType,
)
from jokes_api.app.services.joke_service import JokeStore, is_provided, parse_joke_id

from .conftest import MASTER_KEY, SAMPLE_JOKES


# ─── parse_joke_id / is_provided ─────────────────────────────────

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1), ("42", 42), (" 7 ", 7), ("-3", -3), (5, 5),
        ("1.5", 1), ("12abc", 12), ("2 3", 2), ("+4x", 4),
        ("abc", None), ("x12", None), ("-", None), ("", None), (None, None), (True, None),
    ],
)
def test_parse_joke_id(raw, expected):
    assert parse_joke_id(raw) == expected


def test_is_provided_rejects_none_and_empty_string():
    assert not is_provided(None)
    assert not is_provided("")
    assert is_provided(" ")
    assert is_provided("Math")


# ─── reads ───────────────────────────────────────────────────────

def test_store_copies_seed_records():
    seed = [dict(joke) for joke in SAMPLE_JOKES]
    store = JokeStore(seed, master_key=MASTER_KEY)
    store.delete_all(MASTER_KEY)
    assert len(seed) == 3


def test_random_returns_a_stored_joke(store):
    ids = {joke.id for joke in store.all()}
    for _ in range(20):
        assert store.random().id in ids


def test_random_on_empty_store_raises_not_found():
    store = JokeStore([], master_key=MASTER_KEY)
    with pytest.raises(JokeNotFound):
        store.random()


def test_get_returns_matching_joke(store):
    joke = store.get(2)
    assert joke.jokeText == "B"
    assert joke.jokeType == "Food"


@pytest.mark.parametrize("joke_id", [0, 99, -1, None])
def test_get_unknown_id_raises_not_found(store, joke_id):
    with pytest.raises(JokeNotFound) as exc_info:
        store.get(joke_id)
    assert exc_info.value.message == "Joke not found"
    assert exc_info.value.status_code == 404


def test_get_returns_a_copy(store):
    joke = store.get(1)
    joke.jokeText = "changed"
    assert store.get(1).jokeText == "A"


def test_filter_by_type_is_case_insensitive_and_ordered(store):
    jokes = store.filter_by_type("MATH")
    assert [joke.id for joke in jokes] == [1, 3]


@pytest.mark.parametrize("joke_type", [None, ""])
def test_filter_by_type_requires_a_type(store, joke_type):
    with pytest.raises(MissingJokeType) as exc_info:
        store.filter_by_type(joke_type)
    assert exc_info.value.status_code == 400


def test_filter_by_type_without_match_raises_not_found(store):
    with pytest.raises(NoJokesForType) as exc_info:
        store.filter_by_type("Sports")
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "No jokes found for this type"


def test_filter_by_type_skips_jokes_without_type(store):
    store.create(MASTER_KEY, "no type", None)
    assert [joke.id for joke in store.filter_by_type("food")] == [2]


# ─── create ──────────────────────────────────────────────────────

def test_create_assigns_next_id_and_appends(store):
    joke = store.create(MASTER_KEY, "D", "Puns")
    assert joke.id == 4
    assert store.count() == 4
    assert store.all()[-1] == joke


def test_create_with_wrong_key_does_not_append(store):
    with pytest.raises(ForbiddenError):
        store.create("wrong", "D", "Puns")
    assert store.count() == 3


def test_create_without_key_is_forbidden(store):
    with pytest.raises(ForbiddenError):
        store.create(None, "D", "Puns")


def test_create_accepts_missing_fields(store):
    joke = store.create(MASTER_KEY, None, None)
    assert joke.jokeText is None
    assert joke.jokeType is None


def test_create_after_delete_can_duplicate_an_id(store):
    store.delete(1, MASTER_KEY)
    joke = store.create(MASTER_KEY, "D", "Puns")
    assert joke.id == 3
    assert [j.id for j in store.all()] == [2, 3, 3]


def test_store_without_master_key_forbids_everything():
    store = JokeStore(SAMPLE_JOKES, master_key="")
    with pytest.raises(ForbiddenError):
        store.create("", "x", "y")
    with pytest.raises(ForbiddenError):
        store.delete_all(None)
    assert store.count() == 3


# ─── replace / patch ─────────────────────────────────────────────

def test_replace_overwrites_both_fields(store):
    joke = store.replace(1, MASTER_KEY, "New", "Puns")
    assert (joke.id, joke.jokeText, joke.jokeType) == (1, "New", "Puns")
    assert store.get(1) == joke


def test_replace_with_absent_values_clears_fields(store):
    joke = store.replace(1, MASTER_KEY, None, None)
    assert joke.jokeText is None
    assert joke.jokeType is None


def test_replace_with_empty_string_stores_empty_string(store):
    joke = store.replace(1, MASTER_KEY, "", "Math")
    assert joke.jokeText == ""


def test_patch_only_overwrites_provided_fields(store):
    joke = store.patch(1, MASTER_KEY, "New", None)
    assert joke.jokeText == "New"
    assert joke.jokeType == "Math"


def test_patch_ignores_empty_strings(store):
    joke = store.patch(2, MASTER_KEY, "", "")
    assert joke.jokeText == "B"
    assert joke.jokeType == "Food"


@pytest.mark.parametrize("operation", ["replace", "patch"])
def test_update_unknown_id_is_not_found_even_with_wrong_key(store, operation):
    with pytest.raises(JokeNotFound):
        getattr(store, operation)(99, "wrong", "x", "y")


@pytest.mark.parametrize("operation", ["replace", "patch"])
def test_update_with_wrong_key_leaves_record_unchanged(store, operation):
    with pytest.raises(ForbiddenError):
        getattr(store, operation)(1, "wrong", "x", "y")
    joke = store.get(1)
    assert (joke.jokeText, joke.jokeType) == ("A", "Math")


# ─── delete ──────────────────────────────────────────────────────

def test_delete_removes_exactly_one_record(store):
    store.delete(2, MASTER_KEY)
    assert [joke.id for joke in store.all()] == [1, 3]
    with pytest.raises(JokeNotFound):
        store.get(2)


def test_delete_with_wrong_key_keeps_record(store):
    with pytest.raises(ForbiddenError):
        store.delete(1, "wrong")
    assert store.count() == 3


def test_delete_unknown_id_is_checked_before_key(store):
    with pytest.raises(JokeNotFound):
        store.delete(99, "wrong")


def test_delete_removes_first_of_duplicate_ids(store):
    store.delete(1, MASTER_KEY)
    store.create(MASTER_KEY, "D", "Puns")
    store.delete(3, MASTER_KEY)
    assert [(j.id, j.jokeText) for j in store.all()] == [(2, "B"), (3, "D")]


def test_delete_all_empties_store(store):
    store.delete_all(MASTER_KEY)
    assert store.count() == 0
    assert store.all() == []
    with pytest.raises(JokeNotFound):
        store.random()


def test_delete_all_with_wrong_key_is_forbidden(store):
    with pytest.raises(ForbiddenError) as exc_info:
        store.delete_all("wrong")
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Forbidden"
    assert store.count() == 3


# ─── concurrency ─────────────────────────────────────────────────

def test_concurrent_creates_get_unique_sequential_ids():
    store = JokeStore([], master_key=MASTER_KEY)
    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda n: store.create(MASTER_KEY, f"joke {n}", "Puns"), range(200)))
    assert store.count() == 200
    assert sorted(joke.id for joke in created) == list(range(1, 201))
    assert [joke.id for joke in store.all()] == list(range(1, 201))


def test_concurrent_deletes_and_reads_stay_consistent():
    store = JokeStore(
        [{"id": n, "jokeText": f"joke {n}", "jokeType": "Math"} for n in range(1, 101)],
        master_key=MASTER_KEY,
    )

    def delete_and_read(joke_id):
        store.delete(joke_id, MASTER_KEY)
        return [joke.id for joke in store.all()]

    with ThreadPoolExecutor(max_workers=8) as pool:
        snapshots = list(pool.map(delete_and_read, range(1, 101)))
    for joke_id, snapshot in zip(range(1, 101), snapshots):
        assert joke_id not in snapshot
        assert snapshot == sorted(snapshot)
    assert store.count() == 0
    assert store.all() == []
