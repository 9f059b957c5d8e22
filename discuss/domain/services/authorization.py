"""
Authorization Gate - ownership based access decisions.

Rules:
- Creating requires only an identity; the acting identity becomes the owner.
- Updating and deleting require strict owner id equality. There is no
  role or admin override.
- A missing target resource is reported as NOT_FOUND, checked after
  authentication and before ownership.
"""

from enum import Enum
from typing import Optional

from discuss.domain.entities.identity import Identity
from discuss.domain.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    EntityNotFoundError,
)
from discuss.domain.value_objects.user_id import UserId


class AccessDecision(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    PERMITTED = "permitted"
    NOT_FOUND = "not_found"


def authorize_create(identity: Optional[Identity]) -> AccessDecision:
    if identity is None:
        return AccessDecision.UNAUTHENTICATED
    return AccessDecision.PERMITTED


def authorize_owner(
    identity: Optional[Identity], owner_id: Optional[UserId]
) -> AccessDecision:
    """Decide an update/delete. `owner_id` is None when the target does not exist."""
    if identity is None:
        return AccessDecision.UNAUTHENTICATED
    if owner_id is None:
        return AccessDecision.NOT_FOUND
    if not identity.owns(owner_id):
        return AccessDecision.FORBIDDEN
    return AccessDecision.PERMITTED


def enforce(decision: AccessDecision, resource: str, action: str) -> None:
    """Raise the domain exception matching a non-permitted decision."""
    if decision is AccessDecision.PERMITTED:
        return
    if decision is AccessDecision.UNAUTHENTICATED:
        raise AuthenticationRequiredError()
    if decision is AccessDecision.NOT_FOUND:
        raise EntityNotFoundError(f"Cannot find {resource}.", resource=resource)
    raise AccessDeniedError(f"You are not authorized to {action} this {resource}.")
