"""
DOMAIN SERVICES - Pure decision logic (no I/O)

- authorization.py → who may mutate what
- slugs.py         → how a topic name becomes slug candidates
"""

from discuss.domain.services.authorization import (
    AccessDecision,
    authorize_create,
    authorize_owner,
    enforce,
)
from discuss.domain.services.slugs import (
    DEFAULT_RESERVED_SLUGS,
    initial_candidate,
    normalize_name,
    numbered_candidate,
)

__all__ = [
    "AccessDecision",
    "authorize_create",
    "authorize_owner",
    "enforce",
    "DEFAULT_RESERVED_SLUGS",
    "initial_candidate",
    "normalize_name",
    "numbered_candidate",
]
