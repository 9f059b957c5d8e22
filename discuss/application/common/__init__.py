"""Shared application building blocks."""

from discuss.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)
from discuss.application.common.results import (
    FORM_ERRORS_KEY,
    Failure,
    FailureKind,
    MutationResult,
    Success,
)

__all__ = [
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "FORM_ERRORS_KEY",
    "Failure",
    "FailureKind",
    "MutationResult",
    "Success",
]
