"""Domain model entities for page comments."""

from pagecomments.domain.model.comment import Comment
from pagecomments.domain.model.custom_field import CustomField

__all__ = [
    "Comment",
    "CustomField",
]
