"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught at
the command handler boundary, where they become a MutationResult failure.
The presentation layer maps the failure kind to an HTTP status code.
"""

from discuss.domain.exceptions.entity_not_found import EntityNotFoundError
from discuss.domain.exceptions.access_denied import AccessDeniedError
from discuss.domain.exceptions.authentication_required import (
    AuthenticationRequiredError,
)
from discuss.domain.exceptions.validation_error import DomainValidationError
from discuss.domain.exceptions.storage_error import StorageError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "AuthenticationRequiredError",
    "DomainValidationError",
    "StorageError",
]
