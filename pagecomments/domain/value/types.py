"""Domain value objects for page comments."""

import re
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import Field, field_validator, model_validator

from pagecomments.config import CustomFieldSettings
from pagecomments.domain.value.common import RootValueObject, ValueObject


class FieldType(ValueObject):
    """Descriptor of a custom comment field.

    Examples: a "company" field shown below the website input, or a required
    "topic" select on a support page.
    """

    name: str = Field(min_length=1, max_length=64)
    title: str = ""
    http_post_name: str = ""
    required: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate field name format."""
        if not re.match(r"^[a-zA-Z0-9_-]+$", v):
            raise ValueError(
                "Field name must contain only letters, digits, underscores and hyphens"
            )
        return v

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """Derive title and POST key from the name when not given."""
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            data = dict(data)
            if not data.get("title"):
                data["title"] = data["name"].replace("_", " ").capitalize()
            if not data.get("http_post_name"):
                data["http_post_name"] = data["name"]
        return data

    @classmethod
    def from_settings(cls, settings: CustomFieldSettings) -> "FieldType":
        """Build a descriptor from its configuration entry."""
        return cls(
            name=settings.name,
            title=settings.title or "",
            http_post_name=settings.http_post_name or "",
            required=settings.required,
        )


class FieldTypeRegistry(RootValueObject[tuple[FieldType, ...]]):
    """Ordered set of registered custom field types.

    Iteration order is registration order; comments keep their custom fields
    in that same order.
    """

    root: tuple[FieldType, ...] = ()

    @field_validator("root")
    @classmethod
    def validate_unique_names(
        cls, v: tuple[FieldType, ...]
    ) -> tuple[FieldType, ...]:
        """Every field type name must be registered at most once."""
        names = [t.name for t in v]
        if len(names) != len(set(names)):
            raise ValueError("Field type names must be unique")
        return v

    @classmethod
    def from_settings(
        cls, settings: Iterable[CustomFieldSettings]
    ) -> "FieldTypeRegistry":
        """Build the registry from configuration entries."""
        return cls(tuple(FieldType.from_settings(s) for s in settings))

    def __iter__(self) -> Iterator[FieldType]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, name: str) -> FieldType | None:
        """Look up a field type by name."""
        return next((t for t in self.root if t.name == name), None)
