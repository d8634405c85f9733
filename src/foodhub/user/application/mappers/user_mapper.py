from __future__ import annotations

from foodhub.user.application.dto.responses import UserResponse
from foodhub.user.domain.entities import User


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.user_id),
        email=user.email.value,
        displayName=user.display_name,
        createdAt=user.created_at,
    )
