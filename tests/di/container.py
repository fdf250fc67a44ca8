"""Test container builder with selective unmocking."""

from dishka import Container, make_container

from pagecomments.config import Settings
from pagecomments.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None, settings: Settings | None = None
) -> Container:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        settings: Settings to run with (test defaults if omitted)

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real JSON file storage
        container = build_test_container(
            unmock={"persistence"},
            settings=Settings(storage=StorageSettings(directory=tmp_path)),
        )
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        provider_instances.append(provider_class())

    return make_container(
        *provider_instances,
        context={Settings: settings or Settings(environment="test")},
    )


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components
    """
    mockable_providers = [p for p in PROVIDERS if p.__subclasses__()]
    all_components = {
        getattr(p, "__mock_component__")
        for p in mockable_providers
        if hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
