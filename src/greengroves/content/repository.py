"""Generic CRUD repository over one content-type collection.

The repository owns the in-memory collection for a single content type and
writes the whole collection back to its key-value store after every
mutation.  It assumes a single writer: two repositories over the same key
silently overwrite each other (last writer wins).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from greengroves.content.ids import IdGenerator, TimestampIdGenerator
from greengroves.content.models import BaseContent, ContentStatus, wire_key
from greengroves.content.storage import (
    DEFAULT_KEY_PREFIX,
    KeyValueStore,
    decode_collection,
    encode_collection,
    storage_key,
)
from greengroves.errors import GreenGrovesError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseContent)

# Alias to avoid shadowing by ContentRepository.list method
_list = list

MAX_ID_ATTEMPTS = 100

# Managed by the repository; ignored when supplied to create().
_MANAGED_ON_CREATE = frozenset({"id", "createdAt", "updatedAt"})
# Immutable after creation; ignored when supplied to update().
_IMMUTABLE = frozenset({"id", "createdAt"})


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_timestamp(value: str) -> datetime | None:
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment


def latest_timestamp(first: str, second: str) -> str:
    """Return whichever timestamp is later in time.

    Offsets, missing fractions and date-only values are compared as
    instants; values that do not parse are compared as strings.
    """
    first_at, second_at = _parse_timestamp(first), _parse_timestamp(second)
    if first_at is None or second_at is None:
        return max(first, second)
    return first if first_at >= second_at else second


class ContentRepository(Generic[T]):
    """CRUD and query operations for one content type.

    The collection is loaded lazily on first access: persisted state if it
    parses, otherwise a copy of ``seed``.  From then on the repository stays
    ready for its whole lifetime.

    Args:
        content_type: Collection identifier, e.g. ``"tool"``.
        model: Variant model every item is validated against.
        seed: Default items used when nothing valid is persisted.
        store: Persistence port.
        id_generator: Source of new ids (millisecond timestamps by default).
        clock: Returns the current time; used for created/updated stamps.
        key_prefix: Prefix of the persistence key.
    """

    def __init__(
        self,
        content_type: str,
        model: type[T],
        seed: Iterable[T | Mapping[str, Any]] = (),
        *,
        store: KeyValueStore,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = _utc_now,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._content_type = str(content_type)
        self._model = model
        self._seed = [self._coerce(item) for item in seed]
        self._store = store
        self._id_generator = id_generator or TimestampIdGenerator()
        self._clock = clock
        self._key = storage_key(self._content_type, key_prefix)
        self._items: _list[T] | None = None
        self.last_save_error: StorageError | None = None

    # ── Properties ───────────────────────────────────────────────

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def model(self) -> type[T]:
        return self._model

    @property
    def key(self) -> str:
        return self._key

    @property
    def is_ready(self) -> bool:
        """True once the collection has been loaded or seeded."""
        return self._items is not None

    # ── Private helpers ──────────────────────────────────────────

    def _coerce(self, item: T | Mapping[str, Any]) -> T:
        if isinstance(item, BaseContent):
            return self._model.model_validate(item.model_dump(by_alias=True))
        return self._model.model_validate(item)

    def _seed_copy(self) -> _list[T]:
        return [item.model_copy(deep=True) for item in self._seed]

    def _ensure_ready(self) -> _list[T]:
        if self._items is None:
            self._items = self._load()
            observe = getattr(self._id_generator, "observe", None)
            if observe is not None:
                observe(item.id for item in self._items)
        return self._items

    def _load(self) -> _list[T]:
        payload = self._store.load(self._key)
        if payload is None:
            logger.debug(
                "No saved %s collection, seeding %d items", self._content_type, len(self._seed)
            )
            return self._seed_copy()
        try:
            items = decode_collection(payload, self._model)
        except ValidationError as exc:
            logger.warning(
                "Corrupt %s collection under %r, falling back to seed data: %s",
                self._content_type,
                self._key,
                exc,
            )
            return self._seed_copy()
        logger.debug("Loaded %d %s items from %r", len(items), self._content_type, self._key)
        return items

    def _save(self) -> None:
        items = self._ensure_ready()
        try:
            self._store.save(self._key, encode_collection(items))
        except StorageError as exc:
            self.last_save_error = exc
            logger.warning(
                "Could not persist %s collection, keeping in-memory state: %s",
                self._content_type,
                exc,
            )
        else:
            self.last_save_error = None

    def _now(self) -> str:
        return format_timestamp(self._clock())

    def _next_id(self, items: _list[T]) -> str:
        taken = {item.id for item in items}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_generator()
            if candidate not in taken:
                return candidate
        raise GreenGrovesError(
            f"Could not generate a unique {self._content_type} id after {MAX_ID_ATTEMPTS} attempts"
        )

    def _index_of(self, item_id: str) -> int | None:
        for index, item in enumerate(self._ensure_ready()):
            if item.id == item_id:
                return index
        return None

    # ── Lifecycle ────────────────────────────────────────────────

    def load(self) -> None:
        """Load or seed the collection now instead of on first access."""
        self._ensure_ready()

    # ── Write operations ─────────────────────────────────────────

    def create(self, fields: Mapping[str, Any]) -> T:
        """Add a new item and return it.

        Any ``id``, ``createdAt`` or ``updatedAt`` in ``fields`` is replaced
        by a fresh id and the current time.
        """
        items = self._ensure_ready()
        data = {
            key: value
            for key, value in ((wire_key(self._model, k), v) for k, v in fields.items())
            if key not in _MANAGED_ON_CREATE
        }
        now = self._now()
        data["id"] = self._next_id(items)
        data["createdAt"] = now
        data["updatedAt"] = now
        item = self._model.model_validate(data)
        items.append(item)
        self._save()
        logger.info("Created %s %s", self._content_type, item.id)
        return item

    def update(self, item_id: str, changes: Mapping[str, Any]) -> T | None:
        """Shallow-merge ``changes`` into the item with ``item_id``.

        Returns the updated item, or None when no item has that id (the
        collection is left untouched and nothing is written).  ``id`` and ``createdAt`` cannot be
        changed.  Raises pydantic.ValidationError if the merged item is
        invalid, in which case nothing is modified.
        """
        index = self._index_of(item_id)
        if index is None:
            logger.debug("Update of missing %s %s ignored", self._content_type, item_id)
            return None
        items = self._ensure_ready()
        current = items[index]
        data = current.model_dump(by_alias=True)
        for key, value in changes.items():
            key = wire_key(self._model, key)
            if key in _IMMUTABLE:
                continue
            data[key] = value
        # Never move updatedAt backwards, even if the clock does.
        data["updatedAt"] = latest_timestamp(self._now(), current.updated_at)
        updated = self._model.model_validate(data)
        items[index] = updated
        self._save()
        logger.info("Updated %s %s", self._content_type, item_id)
        return updated

    def remove(self, item_id: str) -> None:
        """Remove the item with ``item_id``; a missing id is a no-op."""
        items = self._ensure_ready()
        remaining = [item for item in items if item.id != item_id]
        if len(remaining) == len(items):
            logger.debug("Remove of missing %s %s ignored", self._content_type, item_id)
            return
        self._items = remaining
        self._save()
        logger.info("Removed %s %s", self._content_type, item_id)

    # ── Read operations ──────────────────────────────────────────

    def get_by_id(self, item_id: str) -> T | None:
        """Return the item with ``item_id``, or None if not found."""
        index = self._index_of(item_id)
        if index is None:
            return None
        return self._ensure_ready()[index]

    def list(self) -> _list[T]:
        """Return all items in insertion order."""
        return _list(self._ensure_ready())

    def get_published(self) -> _list[T]:
        """Return published items, preserving their relative order."""
        return [item for item in self._ensure_ready() if item.status == ContentStatus.PUBLISHED]

    def __len__(self) -> int:
        return len(self._ensure_ready())

    def __repr__(self) -> str:
        state = "ready" if self.is_ready else "uninitialized"
        return f"ContentRepository({self._content_type!r}, {self._model.__name__}, {state})"
