"""Unit tests for field type descriptors and the registry."""

import pytest
from pydantic import ValidationError

from pagecomments.config import CustomFieldSettings
from pagecomments.domain.value import FieldType, FieldTypeRegistry


class TestFieldType:
    def test_defaults_are_derived_from_name(self):
        field_type = FieldType(name="favourite_tea")

        assert field_type.title == "Favourite tea"
        assert field_type.http_post_name == "favourite_tea"
        assert field_type.required is False

    def test_invalid_name_is_rejected(self):
        with pytest.raises(ValidationError):
            FieldType(name="bad name!")


class TestFieldTypeRegistry:
    def test_from_settings_keeps_order(self):
        registry = FieldTypeRegistry.from_settings(
            [
                CustomFieldSettings(name="topic", required=True),
                CustomFieldSettings(name="company", http_post_name="org"),
            ]
        )

        assert [t.name for t in registry] == ["topic", "company"]
        assert len(registry) == 2
        assert registry.get("company").http_post_name == "org"
        assert registry.get("topic").required is True
        assert registry.get("missing") is None

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(ValidationError):
            FieldTypeRegistry((FieldType(name="topic"), FieldType(name="topic")))

    def test_empty_registry(self):
        registry = FieldTypeRegistry()

        assert list(registry) == []
        assert len(registry) == 0
