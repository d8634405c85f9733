from __future__ import annotations

from typing import Protocol

from foodhub.shared.domain.ids import UserId
from foodhub.user.domain.entities import User
from foodhub.user.domain.value_objects import EmailAddress


class UserRepository(Protocol):
    def add(self, user: User) -> None: ...

    def get_by_id(self, user_id: UserId) -> User | None: ...

    def get_by_email(self, email: EmailAddress) -> User | None: ...


class DuplicateUserError(Exception):
    pass
