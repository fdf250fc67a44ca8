"""Persistence infrastructure providers."""

from dishka import Scope, provide

from pagecomments.config import StorageSettings
from pagecomments.domain.repository import CommentRepository
from pagecomments.domain.value import FieldTypeRegistry
from pagecomments.persistence.repository import JsonFileCommentRepository
from pagecomments.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using JSON files."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, storage: StorageSettings, registry: FieldTypeRegistry
    ) -> CommentRepository:
        """Provide Comment repository."""
        return JsonFileCommentRepository(storage.directory, registry)
