"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans the comment aggregate and its
    collaborators (configuration, field registry, storage).
    """

    pass
