"""
MutationResult → HTTP.

Success bodies are built by each endpoint. Failures share one shape:

    {"kind": "forbidden", "errors": {"_form": ["You are not authorized ..."]}}
"""

from typing import Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from discuss.application.common.results import Failure, FailureKind
from discuss.domain.ports import RequestContext

T = TypeVar("T")

FAILURE_STATUS = {
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def failure_response(failure: Failure) -> JSONResponse:
    return JSONResponse(
        status_code=FAILURE_STATUS[failure.kind],
        content={"kind": failure.kind.value, "errors": failure.errors},
    )


def request_context(request: Request) -> RequestContext:
    return RequestContext.from_headers(request.headers)


def path_value(factory: Callable[[str], T], raw: str, resource: str) -> T:
    """Build an id or slug value object from a path segment; malformed means 404."""
    try:
        return factory(raw)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Cannot find {resource}."
        ) from e
