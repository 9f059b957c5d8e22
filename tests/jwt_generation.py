from datetime import datetime, timedelta, timezone

import jwt
from discuss.config.settings import Config


def generate_jwt_token(
    sub: str = "u1",
    email: str = "u1@example.com",
    expires_in: timedelta = timedelta(hours=1),
    secret: str | None = None,
    **overrides,
) -> str:
    """Generate a JWT the way the identity provider issues them."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": sub,
        "email": email,
        "exp": now + expires_in,
        "iat": now,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    payload.update(overrides)
    payload = {k: v for k, v in payload.items() if v is not None}

    return jwt.encode(
        payload, secret or Config.SERVICE_AUTH_SECRET, algorithm="HS256"
    )


if __name__ == "__main__":
    token = generate_jwt_token()
    print(f"Bearer {token}")
