"""Tests for content domain models."""

import pytest
from greengroves.content.models import (
    CONTENT_MODELS,
    BaseContent,
    Book,
    ContentStatus,
    ContentType,
    Difficulty,
    Technique,
    Tool,
    wire_key,
)
from greengroves.content.seeds import DEFAULT_SEEDS
from pydantic import ValidationError


def _base(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "id": "1",
        "title": "Compost",
        "description": "Rich",
        "imageUrl": "u",
        "status": "published",
        "createdAt": "2024-01-15T00:00:00.000Z",
        "updatedAt": "2024-01-20T00:00:00.000Z",
    }
    data.update(overrides)
    return data


class TestEnums:
    def test_status_values(self):
        assert {s.value for s in ContentStatus} == {"published", "draft"}

    def test_content_type_values(self):
        values = {t.value for t in ContentType}
        assert values == {
            "technique", "tool", "essential", "pot",
            "accessory", "suggestion", "video", "book",
        }

    def test_difficulty_values(self):
        assert Difficulty.ADVANCED == "advanced"

    def test_every_type_has_a_model(self):
        assert set(CONTENT_MODELS) == set(ContentType)
        assert all(issubclass(m, BaseContent) for m in CONTENT_MODELS.values())


class TestBaseContent:
    def test_camel_case_input(self):
        item = BaseContent.model_validate(_base())
        assert item.image_url == "u"
        assert item.created_at == "2024-01-15T00:00:00.000Z"

    def test_snake_case_input(self):
        data = _base()
        data["image_url"] = data.pop("imageUrl")
        item = BaseContent.model_validate(data)
        assert item.image_url == "u"

    def test_dumps_camel_case(self):
        dumped = BaseContent.model_validate(_base()).model_dump(by_alias=True)
        assert "imageUrl" in dumped
        assert "updatedAt" in dumped

    def test_status_defaults_to_draft(self):
        data = _base()
        del data["status"]
        assert BaseContent.model_validate(data).status == ContentStatus.DRAFT

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            BaseContent.model_validate(_base(status="archived"))

    def test_featured_optional(self):
        assert BaseContent.model_validate(_base()).featured is None
        assert BaseContent.model_validate(_base(featured=True)).featured is True

    def test_keeps_unknown_fields(self):
        item = BaseContent.model_validate(_base(brand="GardenPro"))
        assert item.model_extra == {"brand": "GardenPro"}

    def test_timestamps_kept_verbatim(self):
        item = BaseContent.model_validate(_base(createdAt="2024-01-15"))
        assert item.created_at == "2024-01-15"


class TestVariants:
    def test_technique_requires_difficulty(self):
        with pytest.raises(ValidationError):
            Technique.model_validate(_base(author="a", category="c", content="x"))

    def test_technique_optional_lists(self):
        technique = Technique.model_validate(
            _base(author="a", category="c", content="x", difficulty="beginner")
        )
        assert technique.tags == []
        assert technique.steps is None

    def test_tool_model_field(self):
        tool = Tool.model_validate(
            _base(
                brand="b", model="GP-1", category="c", price=1.5, specifications="s",
                usage="u", rating=4.0, inStock=False,
            )
        )
        assert tool.model == "GP-1"
        assert tool.in_stock is False

    def test_book_optional_fields(self):
        book = Book.model_validate(
            _base(author="a", category="c", price=10, rating=4.5, buyLink="l", publishedYear=2017)
        )
        assert book.published_year == 2017
        assert book.isbn is None


class TestSeeds:
    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_seed_validates(self, content_type):
        model = CONTENT_MODELS[content_type]
        items = [model.model_validate(raw) for raw in DEFAULT_SEEDS[content_type]]
        assert items
        assert all(item.status == ContentStatus.PUBLISHED for item in items)
        assert all(item.created_at <= item.updated_at for item in items)

    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_seed_has_no_extra_fields(self, content_type):
        model = CONTENT_MODELS[content_type]
        for raw in DEFAULT_SEEDS[content_type]:
            assert model.model_validate(raw).model_extra == {}


class TestWireKey:
    def test_field_name_to_alias(self):
        assert wire_key(Tool, "in_stock") == "inStock"
        assert wire_key(BaseContent, "created_at") == "createdAt"

    def test_alias_passes_through(self):
        assert wire_key(Tool, "inStock") == "inStock"

    def test_unknown_passes_through(self):
        assert wire_key(BaseContent, "brand") == "brand"
