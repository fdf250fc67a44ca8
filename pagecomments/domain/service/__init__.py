"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .submission import SubmissionValidator

__all__ = [
    "CommentService",
    "Service",
    "SubmissionValidator",
]
