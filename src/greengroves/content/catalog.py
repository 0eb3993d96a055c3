"""One repository per content type, opened on first access."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from greengroves.content.ids import IdGenerator, TimestampIdGenerator
from greengroves.content.models import CONTENT_MODELS, BaseContent, ContentType
from greengroves.content.repository import ContentRepository
from greengroves.content.seeds import DEFAULT_SEEDS
from greengroves.content.storage import DEFAULT_KEY_PREFIX, KeyValueStore
from greengroves.errors import UnknownContentTypeError

logger = logging.getLogger(__name__)


class ContentCatalog:
    """Registry of independent per-type repositories sharing one store.

    Args:
        store: Persistence port shared by every collection.
        seeds: Seed items per content type; defaults to DEFAULT_SEEDS.
        id_factory: Builds one id generator per repository.
        clock: Passed through to every repository.
        key_prefix: Prefix of every persistence key.
    """

    def __init__(
        self,
        store: KeyValueStore,
        seeds: Mapping[ContentType, Iterable[BaseContent | Mapping[str, Any]]] | None = None,
        *,
        id_factory: Callable[[], IdGenerator] = TimestampIdGenerator,
        clock: Callable[[], datetime] | None = None,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._store = store
        self._seeds = DEFAULT_SEEDS if seeds is None else seeds
        self._id_factory = id_factory
        self._clock = clock
        self._key_prefix = key_prefix
        self._repositories: dict[ContentType, ContentRepository[Any]] = {}

    @staticmethod
    def resolve(content_type: str) -> ContentType:
        """Map a content-type identifier to its enum member.

        Accepts the plural form used in page routes (``"tools"``).
        Raises UnknownContentTypeError otherwise.
        """
        name = content_type.strip().lower()
        for candidate in (name, name.removesuffix("s"), name.removesuffix("ies") + "y"):
            try:
                return ContentType(candidate)
            except ValueError:
                continue
        raise UnknownContentTypeError(content_type)

    def repository(self, content_type: str) -> ContentRepository[Any]:
        """Return the repository for ``content_type``, opening it if needed."""
        kind = self.resolve(content_type)
        repo = self._repositories.get(kind)
        if repo is None:
            options: dict[str, Any] = {}
            if self._clock is not None:
                options["clock"] = self._clock
            repo = ContentRepository(
                kind.value,
                CONTENT_MODELS[kind],
                self._seeds.get(kind, ()),
                store=self._store,
                id_generator=self._id_factory(),
                key_prefix=self._key_prefix,
                **options,
            )
            self._repositories[kind] = repo
            logger.debug("Opened %s repository", kind.value)
        return repo

    def __getitem__(self, content_type: str) -> ContentRepository[Any]:
        return self.repository(content_type)

    @property
    def opened(self) -> list[ContentType]:
        """Content types whose repository has been opened, in opening order."""
        return list(self._repositories)
