"""Repository implementations."""

from .comment import JsonFileCommentRepository

__all__ = [
    "JsonFileCommentRepository",
]
