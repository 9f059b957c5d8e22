"""
JWT Session Resolver.

Reads the Bearer token from the request context and verifies it with the
shared secret, issuer and audience of the identity provider. Tokens are
issued elsewhere; this only decodes them.

Claims used:
- sub   → Identity.id (required)
- email → Identity.email (optional)
- name  → Identity.name (optional)

Any missing, expired or invalid token resolves to None (no identity); the
command handler then reports "unauthenticated".
"""

import logging
from typing import Optional

import jwt

from discuss.config.settings import Config
from discuss.domain.entities.identity import Identity
from discuss.domain.ports.session_resolver import RequestContext, SessionResolver
from discuss.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class JwtSessionResolver(SessionResolver):
    def __init__(
        self,
        secret: str | None = None,
        issuer: str | None = None,
        audience: str | None = None,
    ):
        self._secret = Config.SERVICE_AUTH_SECRET if secret is None else secret
        self._issuer = Config.SERVICE_AUTH_ISSUER if issuer is None else issuer
        self._audience = Config.SERVICE_AUTH_AUDIENCE if audience is None else audience

    async def resolve(self, context: RequestContext) -> Optional[Identity]:
        token = context.bearer_token
        if not token or not self._secret:
            return None

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=["HS256"],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("JWT rejected: token has expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"JWT rejected: {str(e)}")
            return None

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject.strip():
            logger.warning("JWT rejected: missing subject claim")
            return None

        return Identity(
            id=UserId(subject),
            email=claims.get("email"),
            name=claims.get("name"),
        )
