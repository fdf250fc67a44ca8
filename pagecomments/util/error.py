"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration could not be loaded or is inconsistent."""

    pass


class DependencyInjectionError(UtilError):
    """A DI component has no implementation of the requested kind."""

    pass
