"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from pagecomments.config import (
    CommentSettings,
    MessageSettings,
    Settings,
    StorageSettings,
)
from pagecomments.domain.value import FieldTypeRegistry
from pagecomments.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    `Settings` is passed in as container context, so tests and embedding
    applications decide where configuration comes from.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide form, honeypot and message settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_message_settings(self, settings: Settings) -> MessageSettings:
        """Provide rendering settings."""
        return settings.comments.message

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_field_type_registry(self, settings: Settings) -> FieldTypeRegistry:
        """Provide the custom field type registry, in configuration order."""
        return FieldTypeRegistry.from_settings(settings.custom_fields)
