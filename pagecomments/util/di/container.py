"""Dependency injection container."""

from dishka import Container, make_container
from pydantic import ValidationError

from pagecomments.config import Settings
from pagecomments.util.di import PROVIDERS, get_provider
from pagecomments.util.error import ConfigurationError


def load_settings() -> Settings:
    """Load settings from the environment and `.env`.

    Raises:
        ConfigurationError: If a configured value is invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def create_container(settings: Settings | None = None) -> Container:
    """Build production container (all prod implementations).

    Embedding applications normally call `pagecomments.bootstrap.bootstrap`,
    which also configures logging and Logfire before building the container.

    Args:
        settings: Application settings (loaded from the environment if omitted)

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_container(
        *provider_instances, context={Settings: settings or load_settings()}
    )
