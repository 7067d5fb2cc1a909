"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One login step driven by a route.

    Use cases validate the request, call the provider and identity services
    in order and return a domain result; rendering is left to the route.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
