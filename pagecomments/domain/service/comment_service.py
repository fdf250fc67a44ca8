"""Comment domain service."""

import logfire
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pagecomments.domain.model.comment import Comment
from pagecomments.domain.repository import CommentRepository
from pagecomments.domain.value import CommentId, PageId

from .base import Service
from .submission import SubmissionValidator


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        submission_validator: SubmissionValidator,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            submission_validator: Validates raw form submissions
        """
        self.comment_repository = comment_repository
        self.submission_validator = submission_validator

    def submit(
        self,
        page_id: PageId,
        submission: Mapping[str, str],
        content_page: Any = None,
        posted_at: datetime | None = None,
    ) -> Comment:
        """Validate a form submission and store the resulting comment.

        Previews get the id the comment would receive but are not stored.

        Args:
            page_id: Storage key of the content page
            submission: Submitted form values
            content_page: Page handle passed through to the comment
            posted_at: Submission time (defaults to now)

        Returns:
            The validated (and, unless a preview, stored) comment

        Raises:
            CommentValidationError: If the submission violates a rule
        """
        with logfire.span("comment_service.submit", page_id=page_id):
            comment = self.submission_validator.validate(
                submission,
                comment_id=self.comment_repository.next_id(page_id),
                posted_at=posted_at or datetime.now(),
                content_page=content_page,
            )

            if comment.is_preview:
                logfire.info(
                    "Comment preview rendered", page_id=page_id, comment_id=comment.id
                )
                return comment

            saved = self.comment_repository.save(page_id, comment)
            logfire.info(
                "Comment created",
                page_id=page_id,
                comment_id=saved.id,
                linkable=saved.is_linkable,
            )
            return saved

    def list_comments(self, page_id: PageId, content_page: Any = None) -> list[Comment]:
        """Get all comments on a page, ordered by id.

        Args:
            page_id: Storage key of the content page
            content_page: Page handle to attach to each comment

        Returns:
            List of comments
        """
        with logfire.span("comment_service.list_comments", page_id=page_id):
            comments = self.comment_repository.find_by_page(page_id, content_page)
            logfire.info(
                "Comments retrieved for page", page_id=page_id, count=len(comments)
            )
            return comments

    def get_comment(
        self, page_id: PageId, comment_id: CommentId, content_page: Any = None
    ) -> Comment | None:
        """Get a comment by ID.

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment", page_id=page_id, comment_id=comment_id
        ):
            comment = self.comment_repository.find_by_id(
                page_id, comment_id, content_page
            )
            if comment is None:
                logfire.warn("Comment not found", page_id=page_id, comment_id=comment_id)
            return comment

    def delete_comment(self, page_id: PageId, comment_id: CommentId) -> bool:
        """Delete a comment.

        Edits are modelled as delete followed by a new submission.

        Returns:
            True if the comment existed
        """
        with logfire.span(
            "comment_service.delete_comment", page_id=page_id, comment_id=comment_id
        ):
            deleted = self.comment_repository.delete(page_id, comment_id)
            if deleted:
                logfire.info("Comment deleted", page_id=page_id, comment_id=comment_id)
            else:
                logfire.warn(
                    "Comment not found for deletion",
                    page_id=page_id,
                    comment_id=comment_id,
                )
            return deleted
