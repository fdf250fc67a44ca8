"""Get comments use case."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from pagecomments.config import MessageSettings
from pagecomments.domain.service import CommentService
from pagecomments.domain.value import PageId

from pagecomments.application.usecase.base import BaseUseCase
from .view import CommentView


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    page_id: str
    content_page: Any = None
    date_format: str = "%Y-%m-%d"


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]
    count: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the comments of a page for display."""

    def __init__(
        self, comment_service: CommentService, message_settings: MessageSettings
    ) -> None:
        self.comment_service = comment_service
        self.message_settings = message_settings

    def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        comments = self.comment_service.list_comments(
            PageId(request.page_id), request.content_page
        )
        views = [
            CommentView.from_comment(c, self.message_settings, request.date_format)
            for c in comments
        ]
        return GetCommentsResponse(comments=views, count=len(views))
