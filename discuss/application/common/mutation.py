"""
MutationHandler - boundary shared by every mutating command handler.

Subclasses implement _handle() and raise domain exceptions freely;
execute() turns each of them into a Failure so that nothing crosses the
core/caller boundary as an exception:

    DomainValidationError        -> VALIDATION      (field errors)
    AuthenticationRequiredError  -> UNAUTHENTICATED (_form)
    AccessDeniedError            -> FORBIDDEN       (_form)
    EntityNotFoundError          -> NOT_FOUND       (_form)
    StorageError / unexpected    -> STORAGE         (_form)
"""

import logging
from abc import abstractmethod
from typing import Generic, TypeVar

from discuss.application.common.interfaces import Command, CommandHandler
from discuss.application.common.results import (
    Failure,
    FailureKind,
    MutationResult,
    Success,
)
from discuss.domain.entities.identity import Identity
from discuss.domain.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    DomainValidationError,
    EntityNotFoundError,
    StorageError,
)
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.services.authorization import authorize_create, enforce

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_STORAGE_MESSAGE = "Something went wrong"


class MutationHandler(CommandHandler[MutationResult[T]], Generic[T]):
    _session_resolver: SessionResolver
    _notifier: InvalidationNotifier

    def __init__(
        self, session_resolver: SessionResolver, notifier: InvalidationNotifier
    ):
        self._session_resolver = session_resolver
        self._notifier = notifier

    async def execute(self, command: Command[MutationResult[T]]) -> MutationResult[T]:
        name = type(self).__name__
        try:
            return Success(await self._handle(command))
        except DomainValidationError as e:
            logger.debug(f"{name}: invalid input {e.field_errors}")
            return Failure(FailureKind.VALIDATION, e.field_errors)
        except AuthenticationRequiredError as e:
            return Failure.form(FailureKind.UNAUTHENTICATED, str(e))
        except AccessDeniedError as e:
            logger.info(f"{name}: {e}")
            return Failure.form(FailureKind.FORBIDDEN, str(e))
        except EntityNotFoundError as e:
            return Failure.form(FailureKind.NOT_FOUND, str(e))
        except StorageError as e:
            logger.error(f"{name}: store {e.operation} failed: {e}")
            return Failure.form(FailureKind.STORAGE, e.message or GENERIC_STORAGE_MESSAGE)
        except Exception:
            logger.exception(f"{name}: unexpected failure")
            return Failure.form(FailureKind.STORAGE, GENERIC_STORAGE_MESSAGE)

    @abstractmethod
    async def _handle(self, command) -> T: ...

    async def _require_identity(self, context: RequestContext) -> Identity:
        identity = await self._session_resolver.resolve(context)
        enforce(authorize_create(identity), resource="resource", action="change")
        return identity

    async def _invalidate(self, *paths: str) -> None:
        """Best effort: a failed notification never changes the result."""
        for path in dict.fromkeys(paths):
            try:
                await self._notifier.invalidate(path)
            except Exception as e:
                logger.warning(f"Invalidation of {path} failed: {str(e)}")
