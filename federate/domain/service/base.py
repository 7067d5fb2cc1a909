"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the logic that spans the provider adapters, the
    identity store and the local user directory.
    """

    pass
