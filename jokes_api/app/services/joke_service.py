"""
In‑memory joke store.

``JokeStore`` owns the ordered list of joke records and implements
every operation exposed by the API.  An instance is created by the
application factory and handed to request handlers through the
``get_joke_store`` dependency, so each application (and each test)
works on its own collection.

Protected operations always run their checks in the same order:
the record is looked up first, the master key is verified second and
the collection is mutated last.  A wrong key therefore never changes
state, and a missing record is reported as 404 even when the key is
wrong.

Identifiers are stored values assigned as ``len(collection) + 1``;
they are not positions and are not guaranteed unique once records
have been deleted.
"""

from __future__ import annotations

import logging
import random
import re
import threading
from typing import Iterable, List, Mapping, Optional

from fastapi import Request

from jokes_api.app.core.errors import (
    ForbiddenError,
    JokeNotFound,
    MissingJokeType,
    NoJokesForType,
)
from jokes_api.app.core.security import verify_master_key
from jokes_api.app.schemas.joke import Joke

logger = logging.getLogger(__name__)

_ID_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_joke_id(raw: object) -> Optional[int]:
    """Parse a path identifier into an integer.

    Integers are returned unchanged.  For strings the leading integer
    (optional whitespace, optional sign, decimal digits) is read and the
    rest ignored, so ``"1.5"`` and ``"2abc"`` parse to 1 and 2.  Input
    without a leading integer yields ``None``, which never matches a
    stored record.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        match = _ID_PREFIX.match(raw)
        if match:
            return int(match.group(1))
    return None


def is_provided(value: Optional[str]) -> bool:
    """Return ``True`` if a partial‑update field is present and non‑empty."""
    return value is not None and value != ""


class JokeStore:
    """Ordered, lock‑guarded collection of joke records."""

    def __init__(self, jokes: Iterable[Mapping] = (), master_key: str = "") -> None:
        self._jokes: List[Joke] = [Joke(**joke) for joke in jokes]
        self._master_key = master_key
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _index_of(self, joke_id: Optional[int]) -> int:
        """Return the position of the first record with ``joke_id``.

        Raises ``JokeNotFound`` when no record matches.  Must be called
        with the lock held.
        """
        if joke_id is not None:
            for index, joke in enumerate(self._jokes):
                if joke.id == joke_id:
                    return index
        raise JokeNotFound()

    def _authorize(self, key: Optional[str]) -> None:
        if not verify_master_key(key, self._master_key):
            raise ForbiddenError()

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def count(self) -> int:
        with self._lock:
            return len(self._jokes)

    def all(self) -> List[Joke]:
        """Return a snapshot of every record in insertion order."""
        with self._lock:
            return [joke.model_copy() for joke in self._jokes]

    def random(self) -> Joke:
        """Return a uniformly chosen record; ``JokeNotFound`` if empty."""
        with self._lock:
            if not self._jokes:
                raise JokeNotFound()
            return random.choice(self._jokes).model_copy()

    def get(self, joke_id: Optional[int]) -> Joke:
        with self._lock:
            return self._jokes[self._index_of(joke_id)].model_copy()

    def filter_by_type(self, joke_type: Optional[str]) -> List[Joke]:
        """Return every record whose type matches ``joke_type`` ignoring case.

        A missing or empty filter raises ``MissingJokeType``; a filter
        with no matches raises ``NoJokesForType`` rather than returning
        an empty list, so callers can tell the two situations apart.
        """
        if not joke_type:
            raise MissingJokeType()
        wanted = joke_type.lower()
        with self._lock:
            matches = [
                joke.model_copy()
                for joke in self._jokes
                if joke.jokeType is not None and joke.jokeType.lower() == wanted
            ]
        if not matches:
            raise NoJokesForType()
        return matches

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------
    def create(self, key: Optional[str], text: Optional[str], joke_type: Optional[str]) -> Joke:
        """Append a new record with ``id = len(collection) + 1``.

        Text and type are stored as given, ``None`` included.
        """
        with self._lock:
            joke = Joke(id=len(self._jokes) + 1, jokeText=text, jokeType=joke_type)
            self._authorize(key)
            self._jokes.append(joke)
        logger.info("Created joke %s", joke.id)
        return joke.model_copy()

    def replace(
        self,
        joke_id: Optional[int],
        key: Optional[str],
        text: Optional[str],
        joke_type: Optional[str],
    ) -> Joke:
        """Overwrite both fields of a record, absent values included."""
        with self._lock:
            index = self._index_of(joke_id)
            self._authorize(key)
            joke = self._jokes[index].model_copy(update={"jokeText": text, "jokeType": joke_type})
            self._jokes[index] = joke
        logger.info("Replaced joke %s", joke.id)
        return joke.model_copy()

    def patch(
        self,
        joke_id: Optional[int],
        key: Optional[str],
        text: Optional[str],
        joke_type: Optional[str],
    ) -> Joke:
        """Overwrite only the fields whose new value is present and non‑empty.

        An empty string is treated like an absent value, so a partial
        update can never clear a field; use ``replace`` for that.
        """
        with self._lock:
            index = self._index_of(joke_id)
            self._authorize(key)
            changes = {}
            if is_provided(text):
                changes["jokeText"] = text
            if is_provided(joke_type):
                changes["jokeType"] = joke_type
            joke = self._jokes[index].model_copy(update=changes)
            self._jokes[index] = joke
        logger.info("Patched joke %s (%s)", joke.id, ", ".join(changes) or "no changes")
        return joke.model_copy()

    def delete(self, joke_id: Optional[int], key: Optional[str]) -> None:
        with self._lock:
            index = self._index_of(joke_id)
            self._authorize(key)
            del self._jokes[index]
        logger.info("Deleted joke %s", joke_id)

    def delete_all(self, key: Optional[str]) -> None:
        """Empty the collection in place."""
        with self._lock:
            self._authorize(key)
            removed = len(self._jokes)
            self._jokes.clear()
        logger.info("Deleted all jokes (%d removed)", removed)


def get_joke_store(request: Request) -> JokeStore:
    """FastAPI dependency returning the store owned by the application."""
    return request.app.state.joke_store
