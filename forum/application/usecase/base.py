"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: takes a request DTO, returns a response DTO."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
