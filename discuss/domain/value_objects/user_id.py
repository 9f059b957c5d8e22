"""
UserId Value Object - Opaque identity id issued by the session provider.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: str  # subject claim of the identity provider, never inspected

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
