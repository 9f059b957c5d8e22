"""
StorageError - Raised by store adapters when persistence fails.
Maps to: HTTP 500 Internal Server Error

`unique_violation` is set when the failure is a unique constraint conflict
(e.g. two topics racing for the same slug); callers may retry those.
"""


class StorageError(Exception):
    """Persistent store operation failed."""

    def __init__(
        self,
        message: str = "",
        operation: str = "unknown",
        unique_violation: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.unique_violation = unique_violation
