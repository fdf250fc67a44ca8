"""Custom field entity."""

from typing import Any

from pydantic import Field

from pagecomments.domain.error import RequiredFieldMissingError
from pagecomments.domain.model.common import DomainModel
from pagecomments.domain.value import FieldType


class CustomField(DomainModel):
    """A typed, named extra value attached to a comment.

    Required-ness is checked only when the value comes from a submission
    (see `from_submission`). Values reconstructed from storage are trusted.
    """

    field_type: FieldType
    value: str = ""
    content_page: Any = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_submission(
        cls, field_type: FieldType, value: str | None, content_page: Any
    ) -> "CustomField":
        """Build a custom field from a submitted value.

        Args:
            field_type: Descriptor of the field
            value: Submitted value (None when the key was absent)
            content_page: Page the comment is posted on

        Returns:
            The custom field

        Raises:
            RequiredFieldMissingError: If the field is required and empty
        """
        if field_type.required and (value is None or value == ""):
            raise RequiredFieldMissingError(field_type.title, custom=True)
        return cls(field_type=field_type, value=value or "", content_page=content_page)

    @property
    def name(self) -> str:
        return self.field_type.name

    @property
    def title(self) -> str:
        return self.field_type.title

    @property
    def is_empty(self) -> bool:
        return self.value == ""
