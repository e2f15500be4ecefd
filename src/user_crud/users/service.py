"""Service layer for user operations."""

import logging

from user_crud.core.errors import ValidationError
from user_crud.users.models import User
from user_crud.users.repository import UserRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name and email are required"


class UserService:
    """Validates input and delegates to a user repository."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    def get_all_users(self) -> list[User]:
        return self._repository.find_all()

    def get_user_by_id(self, user_id: int) -> User | None:
        return self._repository.find_by_id(user_id)

    def create_user(self, name: str, email: str) -> User:
        self._validate(name, email)
        return self._repository.create(name, email)

    def update_user(self, user_id: int, name: str, email: str) -> User | None:
        self._validate(name, email)
        return self._repository.update(user_id, name, email)

    def delete_user(self, user_id: int) -> bool:
        return self._repository.delete(user_id)

    def _validate(self, name: str | None, email: str | None) -> None:
        missing = tuple(
            field for field, value in (("name", name), ("email", email)) if not value
        )
        if missing:
            logger.warning(f"Rejected user input, missing: {', '.join(missing)}")
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, fields=missing)
