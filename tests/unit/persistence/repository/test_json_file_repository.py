"""Unit tests for JsonFileCommentRepository."""

import json

import pytest

from pagecomments.domain.error import DuplicateCommentError, InvalidOperationError
from pagecomments.domain.model import Comment, CustomField
from pagecomments.domain.value import CommentId, FieldType, FieldTypeRegistry, PageId
from pagecomments.persistence.repository import JsonFileCommentRepository
from tests.factories import POSTED_AT

PAGE = PageId("blog/tea-party")

COMPANY = FieldType(name="company", title="Company")
TOPIC = FieldType(name="topic", title="Topic", required=True)


@pytest.fixture
def registry() -> FieldTypeRegistry:
    return FieldTypeRegistry((COMPANY, TOPIC))


@pytest.fixture
def repo(tmp_path, registry) -> JsonFileCommentRepository:
    return JsonFileCommentRepository(tmp_path / "comments", registry)


def make_comment(comment_id: int, **overrides) -> Comment:
    values = {
        "id": CommentId(comment_id),
        "author_name": "Alice",
        "author_email": "alice@wonderland.org",
        "author_website": "https://wonderland.org",
        "text": "Why is a raven like a writing-desk?",
        "custom_fields": {
            "company": CustomField(field_type=COMPANY, value="Tea Party Ltd."),
            "topic": CustomField(field_type=TOPIC, value="Riddles"),
        },
        "posted_at": POSTED_AT,
    }
    values.update(overrides)
    return Comment(**values)


class TestSaveAndLoad:
    def test_next_id_on_empty_page(self, repo):
        assert repo.next_id(PAGE) == 1

    def test_round_trip(self, repo):
        """Stored comments come back equal, with the page handle attached."""
        # Arrange
        comment = make_comment(1)
        page = object()

        # Act
        repo.save(PAGE, comment)
        loaded = repo.find_by_id(PAGE, CommentId(1), content_page=page)

        # Assert
        assert loaded is not None
        assert loaded.raw_name == comment.raw_name
        assert loaded.raw_email == comment.raw_email
        assert loaded.raw_website == comment.raw_website
        assert loaded.raw_message == comment.raw_message
        assert loaded.posted_at == POSTED_AT
        assert loaded.custom_field("company") == "Tea Party Ltd."
        assert loaded.content_page is page
        assert loaded.custom_fields["topic"].content_page is page
        assert repo.next_id(PAGE) == 2

    def test_file_layout(self, repo, tmp_path):
        repo.save(PAGE, make_comment(1, author_email=None))

        path = tmp_path / "comments" / "blog%2Ftea-party.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        record = data["comments"][0]
        assert record["id"] == 1
        assert record["author_email"] is None
        assert record["custom_fields"] == {
            "company": "Tea Party Ltd.",
            "topic": "Riddles",
        }
        assert "content_page" not in record
        assert "is_preview" not in record

    def test_find_by_page_in_id_order(self, repo):
        repo.save(PAGE, make_comment(2, author_name="Hatter"))
        repo.save(PAGE, make_comment(1))

        comments = repo.find_by_page(PAGE)

        assert [c.id for c in comments] == [1, 2]
        assert repo.find_by_page(PageId("elsewhere")) == []

    def test_custom_fields_follow_current_registry(self, tmp_path, registry):
        """Fields registered after storing get an empty value."""
        old = JsonFileCommentRepository(tmp_path, FieldTypeRegistry((COMPANY,)))
        old.save(PAGE, make_comment(1, custom_fields={}))

        current = JsonFileCommentRepository(tmp_path, registry)
        loaded = current.find_by_id(PAGE, CommentId(1))

        assert list(loaded.custom_fields) == ["company", "topic"]
        assert loaded.custom_field("topic") == ""


class TestRejections:
    def test_preview_cannot_be_saved(self, repo):
        with pytest.raises(InvalidOperationError):
            repo.save(PAGE, make_comment(1, is_preview=True))

    @pytest.mark.parametrize("comment_id", [0, -3])
    def test_non_positive_id_cannot_be_saved(self, repo, comment_id):
        with pytest.raises(InvalidOperationError):
            repo.save(PAGE, make_comment(comment_id))

        assert repo.find_by_id(PAGE, CommentId(comment_id)) is None
        assert not (repo.directory / "blog%2Ftea-party.json").exists()

    def test_duplicate_id(self, repo):
        repo.save(PAGE, make_comment(1))

        with pytest.raises(DuplicateCommentError):
            repo.save(PAGE, make_comment(1))


class TestDelete:
    def test_delete(self, repo):
        repo.save(PAGE, make_comment(1))
        repo.save(PAGE, make_comment(2))

        assert repo.delete(PAGE, CommentId(1)) is True
        assert repo.delete(PAGE, CommentId(1)) is False
        assert [c.id for c in repo.find_by_page(PAGE)] == [2]

    def test_delete_on_missing_page(self, repo):
        assert repo.delete(PageId("nowhere"), CommentId(1)) is False

    def test_deleted_ids_are_not_reused(self, repo):
        """Deleting the newest comment does not lower the next id."""
        # Arrange
        repo.save(PAGE, make_comment(1))
        repo.save(PAGE, make_comment(2))

        # Act
        repo.delete(PAGE, CommentId(2))

        # Assert
        assert repo.next_id(PAGE) == 3

    def test_next_id_after_deleting_every_comment(self, repo, tmp_path):
        repo.save(PAGE, make_comment(1))
        repo.delete(PAGE, CommentId(1))

        data = json.loads(
            (tmp_path / "comments" / "blog%2Ftea-party.json").read_text(encoding="utf-8")
        )
        assert data == {"last_id": 1, "comments": []}
        assert repo.next_id(PAGE) == 2

    def test_file_without_last_id_uses_stored_ids(self, repo, tmp_path):
        path = tmp_path / "comments" / "blog%2Ftea-party.json"
        repo.save(PAGE, make_comment(4))
        data = json.loads(path.read_text(encoding="utf-8"))
        del data["last_id"]
        path.write_text(json.dumps(data), encoding="utf-8")

        assert repo.next_id(PAGE) == 5
