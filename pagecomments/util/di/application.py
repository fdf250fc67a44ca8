"""Application layer DI providers."""

from dishka import Scope, provide

from pagecomments.application.usecase.comment import (
    GetCommentsUseCase,
    SubmitCommentUseCase,
)
from pagecomments.config import MessageSettings
from pagecomments.domain.service import CommentService
from pagecomments.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, comment_service: CommentService, message_settings: MessageSettings
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            comment_service=comment_service, message_settings=message_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, message_settings: MessageSettings
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, message_settings=message_settings
        )
