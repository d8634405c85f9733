from __future__ import annotations

import logging
from datetime import datetime, timezone

from foodhub.shared.application.errors import ApplicationError, NotFoundError
from foodhub.shared.domain.ids import UserId
from foodhub.user.application.dto.requests import RegisterUserRequest
from foodhub.user.application.dto.responses import UserResponse
from foodhub.user.application.mappers.user_mapper import to_user_response
from foodhub.user.application.metrics.user_lifecycle import record_user_registered
from foodhub.user.application.ports.repositories import DuplicateUserError, UserRepository
from foodhub.user.domain.entities import create_user

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(ApplicationError):
    pass


class UserNotFoundError(NotFoundError):
    pass


class RegisterUser:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, request_dto: RegisterUserRequest) -> UserResponse:
        user = create_user(
            email=request_dto.email,
            display_name=request_dto.display_name,
            now=datetime.now(timezone.utc),
        )
        if self._user_repository.get_by_email(user.email) is not None:
            raise EmailAlreadyRegisteredError(f"Email '{user.email}' is already registered.")

        try:
            self._user_repository.add(user)
        except DuplicateUserError as exc:
            raise EmailAlreadyRegisteredError(str(exc)) from exc

        record_user_registered()
        logger.info("user_registered", extra={"user_id": user.user_id})
        return to_user_response(user)


class GetUser:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, user_id: UserId) -> UserResponse:
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User with ID '{user_id}' not found.")
        return to_user_response(user)
