"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class LinkTargetNotFoundError(NotFoundError):
    """Raised when linking against a local user that does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Link target user", identifier)


class InternalError(DomainError):
    """Raised when persisting a resolution fails part-way.

    The identity store may be left partially updated.
    """

    pass


class InputError(DomainError):
    """Raised when a login request is missing parameters or has malformed ones."""

    pass
