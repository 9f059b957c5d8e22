"""
MutationResult - the uniform outcome of every mutation.

A result is either Success(value) or Failure(kind, errors). Failures carry a
field-keyed error map; messages that are not about a single field live under
FORM_ERRORS_KEY. Callers branch on `result.ok` (or isinstance) instead of
catching exceptions.

    result = await handler.execute(command)
    if result.ok:
        redirect(topic_show(result.value.slug.value))
    else:
        render(errors=result.errors)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")

FORM_ERRORS_KEY = "_form"


class FailureKind(str, Enum):
    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def form(cls, kind: FailureKind, message: str) -> "Failure":
        return cls(kind=kind, errors={FORM_ERRORS_KEY: [message]})

    @property
    def form_errors(self) -> list[str]:
        return self.errors.get(FORM_ERRORS_KEY, [])


MutationResult = Union[Success[T], Failure]
