"""Comment use cases."""

from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from .view import CommentView

__all__ = [
    "CommentView",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
]
