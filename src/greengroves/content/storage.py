"""Persistence boundary for content collections.

A collection is persisted as one text payload per content type: a JSON
array of camelCase objects in insertion order.  Stores are plain key-value
slots; they know nothing about content models.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import TypeAdapter

from greengroves.content.models import BaseContent
from greengroves.errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "greengroves_"

T = TypeVar("T", bound=BaseContent)


class KeyValueStore(Protocol):
    """Load/save contract the repository depends on.

    ``load`` returns None when nothing has been stored under ``key``.
    ``save`` raises StorageError when the write is rejected.
    """

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, payload: str) -> None: ...


def storage_key(content_type: str, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Return the persistence key for a content type."""
    return f"{prefix}{content_type}"


def encode_collection(items: Sequence[BaseContent]) -> str:
    """Serialize a collection to its JSON payload."""
    return json.dumps(
        [item.model_dump(mode="json", by_alias=True) for item in items],
        ensure_ascii=False,
    )


def decode_collection(payload: str | bytes, model: type[T]) -> list[T]:
    """Parse a JSON payload into a list of ``model`` instances.

    Raises pydantic.ValidationError for malformed JSON or a payload that
    does not match the model.
    """
    return TypeAdapter(list[model]).validate_json(payload)  # type: ignore[valid-type]


class MemoryStore:
    """In-process key-value store.

    Set ``fail_writes`` to simulate a store that rejects writes.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.fail_writes = False
        self.writes = 0

    def load(self, key: str) -> str | None:
        return self.data.get(key)

    def save(self, key: str, payload: str) -> None:
        if self.fail_writes:
            raise StorageError(key, "store is read-only")
        self.data[key] = payload
        self.writes += 1

    def __contains__(self, key: object) -> bool:
        return key in self.data


class JsonFileStore:
    """Directory-backed store, one ``<key>.json`` file per slot."""

    def __init__(self, directory: Path) -> None:
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def path_for(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def load(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            # Unreadable is treated like corrupt: the repository falls back to seeds.
            logger.warning("Could not read %s: %s", path, exc)
            return ""

    def save(self, key: str, payload: str) -> None:
        path = self.path_for(key)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(key, str(exc)) from exc
