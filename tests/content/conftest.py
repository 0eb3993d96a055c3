"""Shared fixtures for content repository tests."""

from datetime import UTC, datetime, timedelta

import pytest
from greengroves.content.storage import MemoryStore


class FakeClock:
    """Deterministic clock that advances by ``step`` on every call."""

    def __init__(
        self,
        start: datetime = datetime(2025, 3, 1, 12, 0, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


class CountingStore(MemoryStore):
    """MemoryStore that records how often each slot is read."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        super().__init__(data)
        self.loads = 0

    def load(self, key: str) -> str | None:
        self.loads += 1
        return super().load(key)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture
def clock_factory() -> type[FakeClock]:
    return FakeClock
