"""
TopicId Value Object - Identifier of a topic.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class TopicId:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("TopicId cannot be empty")

    @classmethod
    def generate(cls) -> "TopicId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
