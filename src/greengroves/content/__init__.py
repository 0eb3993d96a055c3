"""Content domain: variant models, persistence port and the generic repository.

ContentRepository owns one content type's collection and writes it back to
a KeyValueStore after every mutation.  ContentCatalog opens one repository
per content type on demand.
"""

from greengroves.content.catalog import ContentCatalog
from greengroves.content.ids import (
    CounterIdGenerator,
    IdGenerator,
    TimestampIdGenerator,
    UuidIdGenerator,
    make_id_generator,
)
from greengroves.content.models import (
    CONTENT_MODELS,
    Accessory,
    BaseContent,
    Book,
    ContentStatus,
    ContentType,
    Difficulty,
    Essential,
    Pot,
    Suggestion,
    Technique,
    Tool,
    Video,
)
from greengroves.content.repository import ContentRepository
from greengroves.content.storage import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    storage_key,
)

__all__ = [
    "CONTENT_MODELS",
    "Accessory",
    "BaseContent",
    "Book",
    "ContentCatalog",
    "ContentRepository",
    "ContentStatus",
    "ContentType",
    "CounterIdGenerator",
    "Difficulty",
    "Essential",
    "IdGenerator",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "Pot",
    "Suggestion",
    "Technique",
    "TimestampIdGenerator",
    "Tool",
    "UuidIdGenerator",
    "Video",
    "make_id_generator",
    "storage_key",
]
