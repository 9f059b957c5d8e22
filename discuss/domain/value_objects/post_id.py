"""
PostId Value Object - Identifier of a post.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class PostId:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("PostId cannot be empty")

    @classmethod
    def generate(cls) -> "PostId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
