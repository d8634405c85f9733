from __future__ import annotations

from datetime import timezone

from sqlalchemy import Engine, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodhub.shared.domain.ids import UserId
from foodhub.user.application.ports.repositories import DuplicateUserError, UserRepository
from foodhub.user.domain.entities import User, rehydrate_user
from foodhub.user.domain.value_objects import EmailAddress
from foodhub.user.infrastructure.db.models import UserModel
from foodhub.user.infrastructure.db.session import get_engine


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, user: User) -> None:
        model = UserModel(
            id=str(user.user_id),
            email=user.email.value,
            display_name=user.display_name,
            created_at=user.created_at,
        )
        with Session(self._engine) as session:
            session.add(model)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateUserError(f"Email '{user.email}' is already registered.") from exc

    def get_by_id(self, user_id: UserId) -> User | None:
        statement = select(UserModel).where(UserModel.id == str(user_id))
        return self._fetch_one(statement)

    def get_by_email(self, email: EmailAddress) -> User | None:
        statement = select(UserModel).where(UserModel.email == email.value).limit(1)
        return self._fetch_one(statement)

    def _fetch_one(self, statement) -> User | None:
        with Session(self._engine) as session:
            model = session.execute(statement).scalar_one_or_none()

        if model is None:
            return None
        return self._to_domain(model)

    def _to_domain(self, model: UserModel) -> User:
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return rehydrate_user(
            user_id=UserId(model.id),
            email=model.email,
            display_name=model.display_name,
            created_at=created_at,
        )
