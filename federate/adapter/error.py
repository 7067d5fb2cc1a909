"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error.

    Raised for every failed exchange with a social provider: network
    failures, non-2xx responses, undecodable bodies and missing fields.
    """

    def __init__(self, message: str | None = None, transient: bool = False) -> None:
        """Initialize provider error.

        Args:
            message: Human-readable message supplied by the provider, if any
            transient: Whether the failure may succeed on a later attempt
        """
        self.message = message
        self.transient = transient
        super().__init__(message or "Provider request failed")
