"""Domain layer DI providers."""

from dishka import Scope, provide

from pagecomments.config import CommentSettings
from pagecomments.domain.repository import CommentRepository
from pagecomments.domain.service import CommentService, SubmissionValidator
from pagecomments.domain.value import FieldTypeRegistry
from pagecomments.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_submission_validator(
        self, settings: CommentSettings, registry: FieldTypeRegistry
    ) -> SubmissionValidator:
        """Provide submission validator."""
        return SubmissionValidator(settings=settings, registry=registry)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        submission_validator: SubmissionValidator,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            submission_validator=submission_validator,
        )
