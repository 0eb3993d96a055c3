"""Pluggable id generators for content items.

Ids only need to be unique within one collection for a single writer in a
single process.  The repository re-draws an id that is already taken, so a
generator only has to avoid repeating itself.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable, Iterable
from typing import Protocol


class IdGenerator(Protocol):
    """Returns a new id on each call.

    A generator may also define ``observe(existing_ids)``; the repository
    calls it once with the ids already in the collection after loading.
    """

    def __call__(self) -> str: ...


def _numeric(ids: Iterable[str]) -> list[int]:
    return [int(value) for value in ids if value.isascii() and value.isdigit()]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TimestampIdGenerator:
    """Millisecond wall-clock ids, the format the site has always used.

    Two calls within the same millisecond (or after the clock steps back)
    would collide, so each id is bumped to one past the last one issued.
    """

    def __init__(self, clock_ms: Callable[[], int] = _now_ms) -> None:
        self._clock_ms = clock_ms
        self._last = -1

    def observe(self, existing_ids: Iterable[str]) -> None:
        """Never issue an id at or below a numeric id already in use."""
        self._last = max([self._last, *_numeric(existing_ids)])

    def __call__(self) -> str:
        value = max(self._clock_ms(), self._last + 1)
        self._last = value
        return str(value)


class CounterIdGenerator:
    """Sequential ids starting at ``start``.

    After ``observe`` the count resumes past the highest numeric id already
    in the collection, so a reopened collection keeps counting.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def observe(self, existing_ids: Iterable[str]) -> None:
        self._next = max([self._next, *(value + 1 for value in _numeric(existing_ids))])

    def __call__(self) -> str:
        value = self._next
        self._next += 1
        return str(value)


class UuidIdGenerator:
    """Random uuid4 ids (hex, no dashes)."""

    def __call__(self) -> str:
        return uuid.uuid4().hex


ID_STRATEGIES: dict[str, Callable[[], IdGenerator]] = {
    "timestamp": TimestampIdGenerator,
    "counter": CounterIdGenerator,
    "uuid": UuidIdGenerator,
}


def make_id_generator(strategy: str) -> IdGenerator:
    """Build an id generator by strategy name.

    Raises ValueError for an unknown strategy.
    """
    try:
        factory = ID_STRATEGIES[strategy]
    except KeyError:
        known = ", ".join(sorted(ID_STRATEGIES))
        raise ValueError(f"Unknown id strategy {strategy!r} (expected one of: {known})") from None
    return factory()
