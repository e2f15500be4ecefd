"""User management for user-crud."""

from user_crud.users.controller import UserController
from user_crud.users.models import User
from user_crud.users.repository import InMemoryUserRepository, UserRepository
from user_crud.users.service import UserService

__all__ = [
    "InMemoryUserRepository",
    "User",
    "UserController",
    "UserRepository",
    "UserService",
]
