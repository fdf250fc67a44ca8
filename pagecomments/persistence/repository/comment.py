"""JSON file implementation of Comment repository."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import logfire

from pagecomments.domain.error import DuplicateCommentError, InvalidOperationError
from pagecomments.domain.model import Comment
from pagecomments.domain.repository import CommentRepository
from pagecomments.domain.value import CommentId, FieldTypeRegistry, PageId
from pagecomments.persistence.mappers import comment_to_record, record_to_comment


class JsonFileCommentRepository(CommentRepository):
    """Stores the comments of each content page in its own JSON file.

    File layout: `<directory>/<url-quoted page id>.json` holding
    `{"last_id": n, "comments": [record, ...]}` with records ordered by id.
    `last_id` is the highest id ever stored on the page; deleting comments
    never lowers it.
    """

    def __init__(self, directory: Path, registry: FieldTypeRegistry) -> None:
        """Initialize repository.

        Args:
            directory: Directory holding the page files (created on first save)
            registry: Registered custom field types, used to rebuild comments
        """
        self.directory = Path(directory)
        self.registry = registry

    def _path(self, page_id: PageId) -> Path:
        return self.directory / f"{quote(page_id, safe='')}.json"

    def _load(self, page_id: PageId) -> Tuple[int, List[Dict[str, Any]]]:
        path = self._path(page_id)
        if not path.exists():
            return 0, []
        data = json.loads(path.read_text(encoding="utf-8"))
        records = data.get("comments", [])
        # Files written without a high-water mark fall back to the stored ids
        ids = [int(record["id"]) for record in records]
        last_id = max([int(data.get("last_id", 0)), *ids], default=0)
        return last_id, records

    def _dump(self, page_id: PageId, last_id: int, records: List[Dict[str, Any]]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(page_id)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(
            json.dumps(
                {"last_id": last_id, "comments": records}, ensure_ascii=False, indent=2
            ),
            encoding="utf-8",
        )
        tmp.replace(path)

    def next_id(self, page_id: PageId) -> CommentId:
        """Return the next free id on a page."""
        last_id, _ = self._load(page_id)
        return CommentId(last_id + 1)

    def save(self, page_id: PageId, comment: Comment) -> Comment:
        """Store a new comment."""
        if comment.is_preview:
            raise InvalidOperationError("Preview comments cannot be stored")
        if comment.id <= 0:
            raise InvalidOperationError(f"Comment id must be positive, got {comment.id}")

        last_id, records = self._load(page_id)
        if any(int(record["id"]) == comment.id for record in records):
            raise DuplicateCommentError(page_id, comment.id)

        records.append(comment_to_record(comment))
        records.sort(key=lambda record: int(record["id"]))
        self._dump(page_id, max(last_id, comment.id), records)
        logfire.debug(
            "Comment written", page_id=page_id, comment_id=comment.id, count=len(records)
        )
        return comment

    def find_by_id(
        self, page_id: PageId, comment_id: CommentId, content_page: Any = None
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        _, records = self._load(page_id)
        for record in records:
            if int(record["id"]) == comment_id:
                return record_to_comment(record, self.registry, content_page)
        return None

    def find_by_page(self, page_id: PageId, content_page: Any = None) -> List[Comment]:
        """Find all comments on a page, ordered by id."""
        _, records = self._load(page_id)
        return [record_to_comment(record, self.registry, content_page) for record in records]

    def delete(self, page_id: PageId, comment_id: CommentId) -> bool:
        """Delete a comment."""
        last_id, records = self._load(page_id)
        remaining = [r for r in records if int(r["id"]) != comment_id]
        if len(remaining) == len(records):
            return False
        self._dump(page_id, last_id, remaining)
        return True
