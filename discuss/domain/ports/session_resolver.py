"""
Session Resolver Port - Resolves the identity behind a request.
Implementation: discuss/infrastructure/auth/jwt_session_resolver.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional
from discuss.domain.entities.identity import Identity


@dataclass(frozen=True)
class RequestContext:
    """Transport-neutral view of the incoming request (header names lowercased)."""

    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RequestContext":
        return cls(headers={k.lower(): v for k, v in headers.items()})

    @property
    def bearer_token(self) -> Optional[str]:
        auth_header = self.headers.get("authorization", "")
        if not auth_header.startswith("Bearer "):
            return None
        token = auth_header.split(" ", 1)[1].strip()
        return token or None


class SessionResolver(ABC):
    @abstractmethod
    async def resolve(self, context: RequestContext) -> Optional[Identity]:
        """Return the authenticated identity, or None when there is none."""
        ...
