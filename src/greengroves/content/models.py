"""Content domain models as pure Pydantic v2 data types.

Every content item on the site shares the BaseContent shape (identity,
display attributes, publication status, timestamps).  Variants extend it
with domain-specific fields.  Field names are snake_case in Python and
camelCase on the wire, matching the payload the site has always stored.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentStatus(StrEnum):
    """Publication status of a content item."""

    PUBLISHED = "published"
    DRAFT = "draft"


class ContentType(StrEnum):
    """Identifier of an independent content collection."""

    TECHNIQUE = "technique"
    TOOL = "tool"
    ESSENTIAL = "essential"
    POT = "pot"
    ACCESSORY = "accessory"
    SUGGESTION = "suggestion"
    VIDEO = "video"
    BOOK = "book"


class Difficulty(StrEnum):
    """Skill level of a gardening technique."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class BaseContent(BaseModel):
    """Fields shared by every content variant.

    The repository only ever touches ``id``, ``status``, ``created_at`` and
    ``updated_at``.  Anything else, including fields this class does not
    declare, is carried through untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
    title: str
    description: str
    image_url: str
    status: ContentStatus = ContentStatus.DRAFT
    created_at: str
    updated_at: str
    featured: bool | None = None


class Technique(BaseContent):
    author: str
    category: str
    difficulty: Difficulty
    content: str
    tags: list[str] = Field(default_factory=list)
    estimated_time: str | None = None
    materials: list[str] | None = None
    steps: list[str] | None = None


class Tool(BaseContent):
    brand: str
    model: str
    category: str
    price: float
    specifications: str
    usage: str
    rating: float
    in_stock: bool
    buy_link: str | None = None


class Essential(BaseContent):
    type: str
    size: str
    material: str
    ph_level: str | None = None
    nutrients: str | None = None
    usage: str
    care_instructions: str
    price: float | None = None


class Pot(BaseContent):
    material: str
    size: str
    color: str
    shape: str
    capacity: str
    drainage_holes: bool
    price: float
    weight: str
    durability: str
    care_instructions: str


class Accessory(BaseContent):
    category: str
    type: str
    material: str
    size: str
    color: str
    price: float
    rating: float
    is_decorative: bool
    weather_resistant: bool
    specifications: str


class Suggestion(BaseContent):
    category: str
    type: str
    price: float
    rating: float
    buy_link: str
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)


class Video(BaseContent):
    instructor: str
    category: str
    duration: str
    video_url: str
    embed_code: str | None = None
    views: int = 0
    likes: int = 0
    tags: list[str] = Field(default_factory=list)


class Book(BaseContent):
    author: str
    category: str
    isbn: str | None = None
    price: float
    rating: float
    buy_link: str
    borrow_link: str | None = None
    publisher: str | None = None
    published_year: int | None = None
    pages: int | None = None


CONTENT_MODELS: dict[ContentType, type[BaseContent]] = {
    ContentType.TECHNIQUE: Technique,
    ContentType.TOOL: Tool,
    ContentType.ESSENTIAL: Essential,
    ContentType.POT: Pot,
    ContentType.ACCESSORY: Accessory,
    ContentType.SUGGESTION: Suggestion,
    ContentType.VIDEO: Video,
    ContentType.BOOK: Book,
}


def wire_key(model: type[BaseContent], key: str) -> str:
    """Translate a Python field name to its wire alias; other keys pass through."""
    field = model.model_fields.get(key)
    if field is not None and field.alias:
        return field.alias
    return key
