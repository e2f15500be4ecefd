"""Repositories for user data access."""

import logging
from abc import ABC, abstractmethod

from user_crud.users.models import User

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Storage abstraction for users.

    Lookups that find nothing return ``None`` (or ``False`` for deletes);
    absence is an expected outcome and never raises.
    """

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every user in insertion order."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with ``user_id``, or None."""

    @abstractmethod
    def create(self, name: str, email: str) -> User:
        """Store a new user under the next sequential id and return it."""

    @abstractmethod
    def update(self, user_id: int, name: str, email: str) -> User | None:
        """Overwrite name and email of an existing user.

        Returns:
            The updated user, or None if no user has ``user_id``.
        """

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove a user. Returns True if one was removed."""


class InMemoryUserRepository(UserRepository):
    """Keeps users in a process-local list.

    Every returned user is a copy; callers cannot alter stored state by
    mutating what they receive.
    """

    def __init__(self):
        self._users: list[User] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._users)

    def find_all(self) -> list[User]:
        return [user.copy() for user in self._users]

    def find_by_id(self, user_id: int) -> User | None:
        user = self._find(user_id)
        return user.copy() if user else None

    def create(self, name: str, email: str) -> User:
        user = User(id=self._next_id, name=name, email=email)
        self._next_id += 1
        self._users.append(user)
        logger.debug(f"Created user {user.id}")
        return user.copy()

    def update(self, user_id: int, name: str, email: str) -> User | None:
        user = self._find(user_id)
        if not user:
            logger.debug(f"User {user_id} not found for update")
            return None

        user.name = name
        user.email = email
        logger.debug(f"Updated user {user_id}")
        return user.copy()

    def delete(self, user_id: int) -> bool:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                del self._users[index]
                logger.debug(f"Deleted user {user_id}")
                return True

        logger.debug(f"User {user_id} not found for deletion")
        return False

    def _find(self, user_id: int) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user
        return None
