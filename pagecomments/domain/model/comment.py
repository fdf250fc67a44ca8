"""Comment entity.

A comment is an immutable value attached to a content page. It is built
either from a validated submission (see `SubmissionValidator`) or from
trusted stored data. Both paths go through the same normalization, which
never rejects input.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from pagecomments.config import MessageSettings
from pagecomments.domain import sanitize
from pagecomments.domain.model.common import DomainModel
from pagecomments.domain.model.custom_field import CustomField
from pagecomments.domain.render import render_message
from pagecomments.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity.

    Author fields are stored tag-stripped and trimmed. Use the escaped
    accessors (`name`, `email`, `website`, `message()`) when writing into a
    page and the `raw_*` accessors for storage or export.
    """

    id: CommentId
    author_name: str = ""
    author_email: Optional[str] = None
    author_website: Optional[str] = None
    text: str = ""  # Raw markdown-like message, never HTML
    custom_fields: dict[str, CustomField] = Field(default_factory=dict)
    posted_at: datetime = Field(default_factory=datetime.now)
    is_preview: bool = False
    content_page: Any = Field(default=None, exclude=True, repr=False)

    @field_validator("author_name", mode="before")
    @classmethod
    def normalize_name(cls, v: Optional[str]) -> str:
        return sanitize.trim(sanitize.strip_tags(v or ""))

    @field_validator("author_email", mode="before")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return sanitize.normalize_optional(v)

    @field_validator("author_website", mode="before")
    @classmethod
    def normalize_website(cls, v: Optional[str]) -> Optional[str]:
        return sanitize.normalize_website(v)

    @field_validator("text", mode="before")
    @classmethod
    def normalize_text(cls, v: Optional[str]) -> str:
        return sanitize.trim(v)

    @property
    def raw_name(self) -> str:
        return self.author_name

    @property
    def name(self) -> str:
        return sanitize.escape_html(self.author_name)

    @property
    def raw_email(self) -> Optional[str]:
        return self.author_email

    @property
    def email(self) -> str:
        return sanitize.escape_html(self.author_email)

    @property
    def raw_website(self) -> Optional[str]:
        return self.author_website

    @property
    def website(self) -> str:
        return sanitize.escape_html(self.author_website)

    @property
    def raw_message(self) -> str:
        """The message as submitted. Never write this into a page unescaped."""
        return self.text

    def message(self, settings: MessageSettings) -> str:
        """Render the message to HTML that is safe to embed in a page."""
        return render_message(self.text, settings)

    @property
    def is_linkable(self) -> bool:
        """Whether the author's name should link to their website."""
        return self.author_website is not None

    def custom_field(self, name: str) -> Optional[str]:
        """Value of a custom field, or None if no such field is attached."""
        field = self.custom_fields.get(name)
        return field.value if field is not None else None

    def date(self, fmt: str = "%Y-%m-%d") -> str:
        return self.posted_at.strftime(fmt)
