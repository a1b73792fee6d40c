"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel


class UserRepository:
    """Provide lookups and creation for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(name=user.name, email=user.email, is_active=user.is_active)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            is_active=model.is_active,
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
