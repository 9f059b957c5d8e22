"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeletePostCommand(Command[MutationResult[str]]):
        context: RequestContext
        post_id: PostId

    class DeletePostHandler(MutationHandler[str]):
        def __init__(self, post_repository: PostRepository, ...):
            self._post_repository = post_repository

        async def _handle(self, command: DeletePostCommand) -> str:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
