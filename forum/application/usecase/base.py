"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case: turns a request model into a response model by
    delegating to domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
