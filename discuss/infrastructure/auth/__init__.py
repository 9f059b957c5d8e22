from discuss.infrastructure.auth.jwt_session_resolver import JwtSessionResolver

__all__ = ["JwtSessionResolver"]
