"""Unit tests for DI wiring and bootstrap."""

import pytest

from pagecomments import bootstrap as bootstrap_module
from pagecomments.config import CustomFieldSettings, Settings, StorageSettings
from pagecomments.domain.repository import CommentRepository
from pagecomments.domain.service import CommentService
from pagecomments.domain.value import FieldTypeRegistry, PageId
from pagecomments.persistence.repository import JsonFileCommentRepository
from pagecomments.util.di import PersistenceProvider, get_provider
from pagecomments.util.di.container import create_container, load_settings
from pagecomments.util.error import ConfigurationError
from tests.di import build_test_container
from tests.factories import make_form


class TestProductionContainer:
    def test_uses_json_file_storage(self, tmp_path):
        settings = Settings(
            environment="test",
            storage=StorageSettings(directory=tmp_path),
            custom_fields=[CustomFieldSettings(name="company")],
        )
        container = create_container(settings)

        with container() as request:
            repo = request.get(CommentRepository)
            service = request.get(CommentService)
            comment = service.submit(
                PageId("blog/hello"), make_form(company="Tea Party Ltd.")
            )

        container.close()
        assert isinstance(repo, JsonFileCommentRepository)
        assert comment.custom_field("company") == "Tea Party Ltd."
        assert (tmp_path / "blog%2Fhello.json").exists()

    def test_registry_from_settings(self):
        settings = Settings(
            environment="test",
            custom_fields=[
                CustomFieldSettings(name="topic"),
                CustomFieldSettings(name="company"),
            ],
        )
        container = build_test_container(settings=settings)

        registry = container.get(FieldTypeRegistry)

        container.close()
        assert [t.name for t in registry] == ["topic", "company"]

    def test_load_settings_wraps_validation_errors(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "moon")

        with pytest.raises(ConfigurationError):
            load_settings()

    def test_get_provider_selects_by_mock_flag(self):
        assert get_provider(PersistenceProvider, use_mock=False).__is_mock__ is False
        assert get_provider(PersistenceProvider, use_mock=True).__is_mock__ is True

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"bluesky"})


class TestBootstrap:
    def test_configures_logging_before_building_container(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(
            bootstrap_module, "setup_logging", lambda s: calls.append("logging")
        )
        monkeypatch.setattr(
            bootstrap_module, "configure_logfire", lambda s: calls.append("logfire")
        )
        settings = Settings(
            environment="test", storage=StorageSettings(directory=tmp_path)
        )

        container = bootstrap_module.bootstrap(settings)

        with container() as request:
            assert isinstance(request.get(CommentService), CommentService)
        container.close()
        assert calls == ["logging", "logfire"]
