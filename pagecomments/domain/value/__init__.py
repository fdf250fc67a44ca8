"""Domain value objects for page comments."""

from pagecomments.domain.value.identifiers import CommentId, PageId
from pagecomments.domain.value.types import FieldType, FieldTypeRegistry

__all__ = [
    # Identifiers
    "CommentId",
    "PageId",
    # Types
    "FieldType",
    "FieldTypeRegistry",
]
