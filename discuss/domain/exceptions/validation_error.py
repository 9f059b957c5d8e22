"""
DomainValidationError - Raised when untrusted input violates a field rule.
Maps to: HTTP 400 Bad Request

Carries a field-keyed map of human-readable messages; every listed field
has at least one message.
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, field_errors: dict[str, list[str]]):
        fields = ", ".join(sorted(field_errors))
        super().__init__(f"Invalid fields: {fields}")
        self.field_errors = field_errors
