from __future__ import annotations

from fastapi import APIRouter, status

from foodhub.shared.domain.ids import UserId
from foodhub.user.application.dto.requests import RegisterUserRequest
from foodhub.user.application.dto.responses import UserResponse
from foodhub.user.application.use_cases.register_user import GetUser, RegisterUser
from foodhub.user.infrastructure.db.repositories.user_repo import SqlAlchemyUserRepository

router = APIRouter()


def _register_user_use_case() -> RegisterUser:
    return RegisterUser(user_repository=SqlAlchemyUserRepository())


def _get_user_use_case() -> GetUser:
    return GetUser(user_repository=SqlAlchemyUserRepository())


@router.post("/v1/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(request_dto: RegisterUserRequest) -> UserResponse:
    return _register_user_use_case().execute(request_dto)


@router.get("/v1/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str) -> UserResponse:
    return _get_user_use_case().execute(UserId(user_id))
