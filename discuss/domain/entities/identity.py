"""
Identity Entity - An authenticated principal resolved from the session.

Only `id` takes part in ownership checks; the other fields are whatever the
identity provider exposes and are carried for logging and display.
"""

from dataclasses import dataclass
from typing import Optional
from discuss.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Identity:
    id: UserId
    email: Optional[str] = None
    name: Optional[str] = None

    def owns(self, owner_id: UserId) -> bool:
        return self.id == owner_id
