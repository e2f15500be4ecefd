"""User CRUD - a layered MVC demonstration over an in-memory repository."""

__version__ = "0.1.0"

from user_crud.app import AppContext, build_app, run_demo
from user_crud.config import Settings, get_settings
from user_crud.core.errors import ValidationError
from user_crud.users import (
    InMemoryUserRepository,
    User,
    UserController,
    UserRepository,
    UserService,
)
from user_crud.views import ConsoleView

__all__ = [
    "AppContext",
    "build_app",
    "ConsoleView",
    "get_settings",
    "InMemoryUserRepository",
    "run_demo",
    "Settings",
    "User",
    "UserController",
    "UserRepository",
    "UserService",
    "ValidationError",
]
