"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One API operation: takes a request model, calls domain services and
    returns a view model.

    Domain errors (NotFoundError, StorageError) pass through untouched for the
    router to map to HTTP statuses.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
