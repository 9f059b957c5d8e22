"""
AuthenticationRequiredError - Raised when no identity could be resolved.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationRequiredError(Exception):
    """Raised when a mutation is attempted without a signed-in identity."""

    def __init__(self, message: str = "You must be signed in to do this."):
        super().__init__(message)
