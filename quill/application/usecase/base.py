"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: parse identifiers, call domain services, shape the response.

    Use cases never catch domain errors; the HTTP layer maps them to
    status codes.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
