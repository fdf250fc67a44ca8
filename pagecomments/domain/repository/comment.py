"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pagecomments.domain.model.comment import Comment
from pagecomments.domain.value import CommentId, PageId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations. Ids are unique
    per content page, start at 1 and are handed out by `next_id`.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def next_id(self, page_id: PageId) -> CommentId:
        """Return the id the next comment on a page should get.

        Args:
            page_id: The content page

        Returns:
            One more than the highest id ever stored for the page (1 if none).
            Ids of deleted comments are not handed out again.
        """
        pass

    @abstractmethod
    def save(self, page_id: PageId, comment: Comment) -> Comment:
        """Store a new comment.

        Args:
            page_id: The content page
            comment: Comment to store

        Returns:
            The stored comment

        Raises:
            InvalidOperationError: If the comment is a preview or its id is
                not positive
            DuplicateCommentError: If the id is already taken on the page
        """
        pass

    @abstractmethod
    def find_by_id(
        self, page_id: PageId, comment_id: CommentId, content_page: Any = None
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            page_id: The content page
            comment_id: The comment's per-page identifier
            content_page: Page handle to attach to the reconstructed comment

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_page(self, page_id: PageId, content_page: Any = None) -> List[Comment]:
        """Find all comments on a page, ordered by id."""
        pass

    @abstractmethod
    def delete(self, page_id: PageId, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted, False if none had that id
        """
        pass
