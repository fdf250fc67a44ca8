"""Display representation of a comment."""

from datetime import datetime

from pydantic import BaseModel

from pagecomments.config import MessageSettings
from pagecomments.domain.model import Comment


class CommentView(BaseModel):
    """Comment ready to be written into a page.

    Every string except `raw_*` is HTML-safe.
    """

    id: int
    name: str
    email: str
    website: str
    message: str
    is_linkable: bool
    is_preview: bool
    date: str
    posted_at: datetime
    custom_fields: dict[str, str]
    raw_message: str

    @classmethod
    def from_comment(
        cls, comment: Comment, settings: MessageSettings, date_format: str = "%Y-%m-%d"
    ) -> "CommentView":
        """Render a comment for display."""
        return cls(
            id=comment.id,
            name=comment.name,
            email=comment.email,
            website=comment.website,
            message=comment.message(settings),
            is_linkable=comment.is_linkable,
            is_preview=comment.is_preview,
            date=comment.date(date_format),
            posted_at=comment.posted_at,
            custom_fields={
                name: field.value for name, field in comment.custom_fields.items()
            },
            raw_message=comment.raw_message,
        )
