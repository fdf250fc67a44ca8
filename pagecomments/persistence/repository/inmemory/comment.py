"""In-memory comment repository for testing."""

from typing import Any, Optional

from pagecomments.domain.error import DuplicateCommentError, InvalidOperationError
from pagecomments.domain.model.comment import Comment
from pagecomments.domain.repository.comment import CommentRepository
from pagecomments.domain.value import CommentId, PageId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[PageId, dict[CommentId, Comment]] = {}
        self._last_ids: dict[PageId, int] = {}

    def next_id(self, page_id: PageId) -> CommentId:
        """Return the next free id on a page."""
        return CommentId(self._last_ids.get(page_id, 0) + 1)

    def save(self, page_id: PageId, comment: Comment) -> Comment:
        """Store a new comment."""
        if comment.is_preview:
            raise InvalidOperationError("Preview comments cannot be stored")
        if comment.id <= 0:
            raise InvalidOperationError(f"Comment id must be positive, got {comment.id}")

        page = self._comments.setdefault(page_id, {})
        if comment.id in page:
            raise DuplicateCommentError(page_id, comment.id)

        page[comment.id] = comment
        self._last_ids[page_id] = max(self._last_ids.get(page_id, 0), comment.id)
        return comment

    def find_by_id(
        self, page_id: PageId, comment_id: CommentId, content_page: Any = None
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(page_id, {}).get(comment_id)
        if comment is None or content_page is None:
            return comment
        return comment.model_copy(update={"content_page": content_page})

    def find_by_page(self, page_id: PageId, content_page: Any = None) -> list[Comment]:
        """Find all comments on a page, ordered by id."""
        page = self._comments.get(page_id, {})
        comments = [page[comment_id] for comment_id in sorted(page)]
        if content_page is None:
            return comments
        return [c.model_copy(update={"content_page": content_page}) for c in comments]

    def delete(self, page_id: PageId, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.get(page_id, {}).pop(comment_id, None) is not None
