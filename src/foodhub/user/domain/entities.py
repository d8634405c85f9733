from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from foodhub.shared.domain.errors import DomainValidationError
from foodhub.shared.domain.ids import UserId, is_blank, new_id
from foodhub.user.domain.value_objects import EmailAddress


@dataclass(frozen=True)
class User:
    user_id: UserId
    email: EmailAddress
    display_name: str
    created_at: datetime

    def __post_init__(self) -> None:
        if is_blank(self.user_id):
            raise DomainValidationError("User id cannot be empty.")
        if is_blank(self.display_name):
            raise DomainValidationError("Display name cannot be empty.")
        if self.created_at.tzinfo is None:
            raise DomainValidationError("created_at must be timezone-aware")
        object.__setattr__(self, "display_name", self.display_name.strip())


def create_user(email: str, display_name: str, now: datetime) -> User:
    return User(
        user_id=UserId(new_id()),
        email=EmailAddress(email),
        display_name=display_name,
        created_at=now,
    )


def rehydrate_user(
    user_id: UserId,
    email: str,
    display_name: str,
    created_at: datetime,
) -> User:
    return User(
        user_id=user_id,
        email=EmailAddress(email),
        display_name=display_name,
        created_at=created_at,
    )
