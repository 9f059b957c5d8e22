"""
Slug Value Object - URL-safe topic identifier.

A slug is lowercase and contains no whitespace. Uniqueness is not a
property of the value itself; it is guaranteed by the slug allocator and
the store's unique constraint.
"""

from dataclasses import dataclass
import re


@dataclass(frozen=True)
class Slug:
    value: str

    _WHITESPACE = re.compile(r"\s")

    def __post_init__(self):
        if not self.value:
            raise ValueError("Slug cannot be empty")
        if self._WHITESPACE.search(self.value):
            raise ValueError(f"Slug cannot contain whitespace: {self.value!r}")
        if self.value != self.value.lower():
            raise ValueError(f"Slug must be lowercase: {self.value}")

    def __str__(self) -> str:
        return self.value
