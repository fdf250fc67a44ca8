"""Submit comment use case."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from pagecomments.config import MessageSettings
from pagecomments.domain.service import CommentService
from pagecomments.domain.value import PageId

from pagecomments.application.usecase.base import BaseUseCase
from .view import CommentView


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    page_id: str
    form: dict[str, str]  # Raw POST data
    content_page: Any = None


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    comment: CommentView
    stored: bool


class SubmitCommentUseCase(BaseUseCase):
    """Use case for posting (or previewing) a comment on a page."""

    def __init__(
        self, comment_service: CommentService, message_settings: MessageSettings
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            message_settings: Rendering configuration
        """
        self.comment_service = comment_service
        self.message_settings = message_settings

    def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Validate the submission and store it unless it is a preview
        2. Render the comment for display

        Args:
            request: Submit comment request

        Returns:
            Response with the rendered comment

        Raises:
            CommentValidationError: If the submission violates a rule
        """
        comment = self.comment_service.submit(
            page_id=PageId(request.page_id),
            submission=request.form,
            content_page=request.content_page,
        )
        return SubmitCommentResponse(
            comment=CommentView.from_comment(comment, self.message_settings),
            stored=not comment.is_preview,
        )
