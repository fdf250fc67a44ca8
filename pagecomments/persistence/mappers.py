"""Mappers for converting between stored records and domain models.

Stored records are plain JSON-compatible dicts. Custom fields are stored as
name -> value and re-bound to the current field type registry on load, so a
comment always carries exactly one entry per registered field type.
"""

from typing import Any, Dict

from pagecomments.domain.model import Comment, CustomField
from pagecomments.domain.value import CommentId, FieldTypeRegistry


def comment_to_record(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a storable dict.

    Args:
        comment: Comment domain model

    Returns:
        JSON-compatible dict
    """
    record = comment.model_dump(mode="json", exclude={"custom_fields", "is_preview"})
    record["custom_fields"] = {
        name: field.value for name, field in comment.custom_fields.items()
    }
    return record


def record_to_comment(
    record: Dict[str, Any],
    registry: FieldTypeRegistry,
    content_page: Any = None,
) -> Comment:
    """Convert a stored record to Comment domain model.

    Stored data is trusted: no submission rules are re-applied, only the
    normalization every comment goes through.

    Args:
        record: Stored dict
        registry: Registered custom field types
        content_page: Page handle to attach

    Returns:
        Comment domain model
    """
    values = record.get("custom_fields") or {}
    custom_fields = {
        field_type.name: CustomField(
            field_type=field_type,
            value=values.get(field_type.name, ""),
            content_page=content_page,
        )
        for field_type in registry
    }
    return Comment(
        id=CommentId(int(record["id"])),
        author_name=record.get("author_name", ""),
        author_email=record.get("author_email"),
        author_website=record.get("author_website"),
        text=record.get("text", ""),
        custom_fields=custom_fields,
        posted_at=record["posted_at"],
        is_preview=False,
        content_page=content_page,
    )
